"""Persistence contract used by the status engine, plus an in-memory store."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from .sensor import Sensor
from .status import AlarmStatus, ArmingStatus

_LOGGER = logging.getLogger(__name__)


class Repository(ABC):
    """
    Backing store for the engine's sensors and statuses.

    Writes are assumed to be synchronous and durable - the engine does not
    retry or verify them. Failures should be raised from the method itself.
    """

    @abstractmethod
    def get_sensors(self) -> set[Sensor]:
        """Return the persisted sensor set."""
        raise NotImplementedError

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus | None:
        """Return the persisted alarm status, or None if never stored."""
        raise NotImplementedError

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus | None:
        """Return the persisted arming status, or None if never stored."""
        raise NotImplementedError

    @abstractmethod
    def set_alarm_status(self, status: AlarmStatus) -> None:
        """Persist the alarm status."""
        raise NotImplementedError

    @abstractmethod
    def set_arming_status(self, status: ArmingStatus) -> None:
        """Persist the arming status."""
        raise NotImplementedError

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        """Persist a newly added sensor."""
        raise NotImplementedError

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        """Forget a sensor."""
        raise NotImplementedError

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Persist a change to an existing sensor."""
        raise NotImplementedError


class InMemoryRepository(Repository):
    """Repository that keeps everything in process memory. Nothing survives exit."""

    def __init__(
        self,
        sensors: Iterable[Sensor] = (),
        *,
        alarm_status: AlarmStatus | None = None,
        arming_status: ArmingStatus | None = None,
    ) -> None:
        """Create a repository, optionally seeded with sensors and statuses."""
        self._sensors: set[Sensor] = set(sensors)
        self._alarm_status = alarm_status
        self._arming_status = arming_status

    def get_sensors(self) -> set[Sensor]:
        """Return a copy of the stored sensor set."""
        return set(self._sensors)

    def get_alarm_status(self) -> AlarmStatus | None:
        """Return the stored alarm status."""
        return self._alarm_status

    def get_arming_status(self) -> ArmingStatus | None:
        """Return the stored arming status."""
        return self._arming_status

    def set_alarm_status(self, status: AlarmStatus) -> None:
        """Store the alarm status."""
        _LOGGER.debug("Storing alarm status %s", status)
        self._alarm_status = status

    def set_arming_status(self, status: ArmingStatus) -> None:
        """Store the arming status."""
        _LOGGER.debug("Storing arming status %s", status)
        self._arming_status = status

    def add_sensor(self, sensor: Sensor) -> None:
        """Store a sensor."""
        _LOGGER.debug("Storing sensor %s", sensor)
        self._sensors.add(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        """Drop a sensor if it is stored."""
        _LOGGER.debug("Removing sensor %s", sensor)
        self._sensors.discard(sensor)

    def update_sensor(self, sensor: Sensor) -> None:
        """Replace the stored copy of a sensor."""
        _LOGGER.debug("Updating sensor %s", sensor)
        self._sensors.discard(sensor)
        self._sensors.add(sensor)
