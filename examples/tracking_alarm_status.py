"""Example that drives a status engine and prints listener notifications."""

from catwatch import (
    AlarmStatus,
    ArmingStatus,
    InMemoryRepository,
    Sensor,
    SensorType,
    StatusEngine,
    StatusListener,
)


class PrintListener(StatusListener):
    """Print each notification from the engine."""

    def on_status_changed(self, status: AlarmStatus) -> None:
        """Print the new alarm status."""
        print(f"Alarm status: {status.value}")  # noqa: T201 # Valid CLI print

    def on_cat_detected(self, cat_detected: bool) -> None:  # noqa: FBT001 # Bool part of Pre-defined API
        """Print the camera result."""
        print(f"Cat detected: {cat_detected}")  # noqa: T201 # Valid CLI print


def main() -> AlarmStatus:
    """Arm the house, trip two sensors, then disarm."""
    door = Sensor("front_door", SensorType.DOOR)
    window = Sensor("kitchen_window", SensorType.WINDOW)
    engine = StatusEngine(InMemoryRepository([door, window]))
    engine.add_status_listener(PrintListener())

    engine.set_arming_status(ArmingStatus.ARMED_AWAY)
    engine.change_sensor_activation(door, True)  # noqa: FBT003 # bool arg dictated by engine api
    engine.change_sensor_activation(window, True)  # noqa: FBT003 # bool arg dictated by engine api
    sounding = engine.alarm_status

    engine.set_arming_status(ArmingStatus.DISARMED)
    return sounding


if __name__ == "__main__":
    main()
