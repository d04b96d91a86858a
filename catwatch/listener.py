"""Provides the listener interface notified by the status engine."""

from .status import AlarmStatus


class StatusListener:
    """
    Receives status engine notifications.

    All methods do nothing by default - override the ones of interest.
    """

    def on_status_changed(self, status: AlarmStatus) -> None:
        """Handle a new alarm status."""

    def on_sensor_status_changed(self) -> None:
        """Handle a change to the arming status or the sensors."""

    def on_cat_detected(self, cat_detected: bool) -> None:  # noqa: FBT001 # Bool part of Pre-defined API
        """Handle the result of an image analysis."""
