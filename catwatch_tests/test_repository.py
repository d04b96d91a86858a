"""Test the InMemoryRepository and its use by the StatusEngine."""

from catwatch import (
    AlarmStatus,
    ArmingStatus,
    InMemoryRepository,
    Sensor,
    StatusEngine,
)


def test_empty_repository() -> None:
    """A fresh repository has no sensors and no statuses."""
    repository = InMemoryRepository()
    assert repository.get_sensors() == set()
    assert repository.get_alarm_status() is None
    assert repository.get_arming_status() is None


def test_get_sensors_returns_copy() -> None:
    """Callers cannot change the stored set through the returned one."""
    repository = InMemoryRepository([Sensor("a")])
    repository.get_sensors().clear()
    assert repository.get_sensors() == {Sensor("a")}


def test_sensor_add_update_remove() -> None:
    repository = InMemoryRepository()
    sensor = Sensor("a")
    repository.add_sensor(sensor)
    sensor.active = True
    repository.update_sensor(sensor)
    (stored,) = repository.get_sensors()
    assert stored.active
    repository.remove_sensor(sensor)
    repository.remove_sensor(sensor)
    assert repository.get_sensors() == set()


def test_engine_writes_through() -> None:
    """State written by one engine is loaded by the next."""
    door = Sensor("door")
    repository = InMemoryRepository([door])
    engine = StatusEngine(repository)
    engine.set_arming_status(ArmingStatus.ARMED_AWAY)
    engine.change_sensor_activation(door, True)  # noqa: FBT003
    engine.add_sensor(Sensor("window"))

    assert repository.get_alarm_status() == AlarmStatus.PENDING_ALARM
    assert repository.get_arming_status() == ArmingStatus.ARMED_AWAY

    reloaded = StatusEngine(repository)
    assert reloaded.alarm_status == AlarmStatus.PENDING_ALARM
    assert reloaded.arming_status == ArmingStatus.ARMED_AWAY
    assert {s.name for s in reloaded.sensors} == {"door", "window"}
    assert reloaded.get_sensor("door").active
