"""Provides the status engine that decides the alarm status of the home."""

import logging
import threading
from typing import Any

from .image import ImageClassifier
from .listener import StatusListener
from .repository import Repository
from .sensor import Sensor
from .status import AlarmStatus, ArmingStatus

_LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIDENCE_THRESHOLD = 50.0


class CatwatchError(Exception):
    """Base class for errors raised by catwatch."""


class UnknownSensorError(CatwatchError, KeyError):
    """Raised when an operation names a sensor the engine does not hold."""

    def __str__(self) -> str:
        """Return the plain message rather than the KeyError repr."""
        return str(self.args[0]) if self.args else ""


class StatusEngine:
    """
    Receives changes to the security system and decides the alarm status.

    Every change is forwarded to the repository and broadcast to the
    registered listeners before the call returns.

    NO_ALARM -> (sensor activated while armed) -> PENDING_ALARM
      (sensor activated again): -> ALARM
      (sensor deactivated): -> NO_ALARM
    ALARM is only cleared by disarming, or by an image with no cat while no
    sensor is active.
    """

    def __init__(
        self,
        repository: Repository,
        *,
        image_classifier: ImageClassifier | None = None,
        confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
    ) -> None:
        """
        Create an engine from the state held in the repository.

        :param image_classifier: Used by process_image(). Not needed when
            results are passed to process_image_result() directly.
        :param confidence_threshold: Threshold handed to the classifier
        """
        self._repository = repository
        self._image_classifier = image_classifier
        self.confidence_threshold = confidence_threshold
        self._lock = threading.RLock()
        self._listeners: set[StatusListener] = set()

        self._sensors: dict[str, Sensor] = {
            sensor.name: sensor for sensor in repository.get_sensors()
        }

        alarm_status = repository.get_alarm_status()
        self._alarm_status = (
            alarm_status if alarm_status is not None else AlarmStatus.NO_ALARM
        )

        arming_status = repository.get_arming_status()
        self._arming_status = (
            arming_status if arming_status is not None else ArmingStatus.DISARMED
        )

        self._cat_detected = False
        _LOGGER.debug(
            "Engine loaded - alarm: %s arming: %s sensors: %s",
            self._alarm_status,
            self._arming_status,
            len(self._sensors),
        )

    @property
    def alarm_status(self) -> AlarmStatus:
        """Current alarm status."""
        return self._alarm_status

    @property
    def arming_status(self) -> ArmingStatus:
        """Current arming status."""
        return self._arming_status

    @property
    def cat_detected(self) -> bool:
        """Result of the most recent image analysis."""
        return self._cat_detected

    @property
    def sensors(self) -> frozenset[Sensor]:
        """Snapshot of the sensors known to the engine."""
        with self._lock:
            return frozenset(self._sensors.values())

    def get_sensor(self, name: str) -> Sensor:
        """Look up a known sensor by name."""
        with self._lock:
            try:
                return self._sensors[name]
            except KeyError:
                msg = f"Unknown sensor '{name}'"
                raise UnknownSensorError(msg) from None

    def add_status_listener(self, listener: StatusListener) -> None:
        """Register a listener. Registering twice has no extra effect."""
        with self._lock:
            self._listeners.add(listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        """Unregister a listener, if it is registered."""
        with self._lock:
            self._listeners.discard(listener)

    def set_alarm_status(self, status: AlarmStatus) -> None:
        """
        Change the alarm status, persist it and notify every listener.

        All alarm status changes pass through here.
        """
        with self._lock:
            _LOGGER.debug("Alarm status %s -> %s", self._alarm_status, status)
            self._alarm_status = status
            self._repository.set_alarm_status(status)
            for listener in list(self._listeners):
                listener.on_status_changed(status)

    def set_arming_status(self, arming_status: ArmingStatus) -> None:
        """
        Change the arming status.

        Disarming clears the alarm. Arming resets every sensor to inactive,
        and arming home while a cat is in view raises the alarm.
        """
        with self._lock:
            _LOGGER.debug(
                "Arming status %s -> %s", self._arming_status, arming_status
            )
            if arming_status == ArmingStatus.DISARMED:
                self.set_alarm_status(AlarmStatus.NO_ALARM)
            else:
                # Plain flag reset - must not run the activation rules
                for sensor in self._sensors.values():
                    sensor.active = False

                if arming_status == ArmingStatus.ARMED_HOME and self._cat_detected:
                    self.set_alarm_status(AlarmStatus.ALARM)

            self._arming_status = arming_status
            self._repository.set_arming_status(arming_status)
            for listener in list(self._listeners):
                listener.on_sensor_status_changed()

    def change_sensor_activation(
        self,
        sensor: Sensor,
        active: bool,  # noqa: FBT001 # Bool part of Pre-defined API
    ) -> None:
        """
        Set the active flag of a known sensor and update the alarm status.

        Activation is handled even if the sensor is already active, so a
        repeated activation while pending raises the alarm. Deactivation is
        only handled if the sensor was active.
        """
        with self._lock:
            known = self._sensors.get(sensor.name)
            if known is None:
                msg = f"Unknown sensor '{sensor.name}'"
                raise UnknownSensorError(msg)

            if active:
                self._handle_sensor_activated()
            elif known.active:
                self._handle_sensor_deactivated()

            _LOGGER.debug("Sensor %s active %s -> %s", known.name, known.active, active)
            known.active = active
            self._repository.update_sensor(known)

    def _handle_sensor_activated(self) -> None:
        if not self._arming_status.is_armed:
            return

        if self._alarm_status == AlarmStatus.NO_ALARM:
            self.set_alarm_status(AlarmStatus.PENDING_ALARM)
        elif self._alarm_status == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.ALARM)

    def _handle_sensor_deactivated(self) -> None:
        # A sounding alarm is not silenced by sensors going quiet
        if self._alarm_status == AlarmStatus.PENDING_ALARM:
            self.set_alarm_status(AlarmStatus.NO_ALARM)

    def process_image_result(self, cat_present: bool) -> None:  # noqa: FBT001 # Bool part of Pre-defined API
        """
        Update the alarm status from the outcome of an image analysis.

        A cat while armed home raises the alarm. Otherwise the alarm is
        cleared if no sensor is active, whatever the arming status.
        """
        with self._lock:
            _LOGGER.debug(
                "Image result cat:%s arming:%s", cat_present, self._arming_status
            )
            if cat_present and self._arming_status == ArmingStatus.ARMED_HOME:
                self.set_alarm_status(AlarmStatus.ALARM)
            elif not any(sensor.active for sensor in self._sensors.values()):
                self.set_alarm_status(AlarmStatus.NO_ALARM)

            self._cat_detected = cat_present
            for listener in list(self._listeners):
                listener.on_cat_detected(cat_present)

    def process_image(self, image: Any) -> bool:
        """
        Classify a camera image and apply the result.

        Returns whether a cat was found.
        """
        if self._image_classifier is None:
            msg = "No image classifier configured"
            raise CatwatchError(msg)
        cat_present = self._image_classifier.image_contains_cat(
            image, self.confidence_threshold
        )
        self.process_image_result(cat_present)
        return cat_present

    def add_sensor(self, sensor: Sensor) -> None:
        """Add a sensor to the engine and the repository."""
        with self._lock:
            _LOGGER.debug("Adding sensor %s", sensor)
            self._sensors.setdefault(sensor.name, sensor)
            self._repository.add_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        """Remove a sensor from the engine and the repository."""
        with self._lock:
            _LOGGER.debug("Removing sensor %s", sensor)
            self._sensors.pop(sensor.name, None)
            self._repository.remove_sensor(sensor)
