"""Alarm and arming status values tracked by the status engine."""

from enum import Enum


class AlarmStatus(Enum):
    """Escalation level of the alarm, passed to on_status_changed()."""

    NO_ALARM = "NO_ALARM"
    PENDING_ALARM = "PENDING_ALARM"
    ALARM = "ALARM"


class ArmingStatus(Enum):
    """Whether the system is monitoring, and in which mode."""

    DISARMED = "DISARMED"
    ARMED_HOME = "ARMED_HOME"
    ARMED_AWAY = "ARMED_AWAY"

    @property
    def is_armed(self) -> bool:
        """Return True for either of the armed modes."""
        return self is not ArmingStatus.DISARMED
