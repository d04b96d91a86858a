"""Provides the sensor model shared by the engine and its repository."""

from dataclasses import dataclass
from enum import Enum


class SensorType(Enum):
    """Kind of device a sensor represents. Not used by the alarm rules."""

    DOOR = "DOOR"
    WINDOW = "WINDOW"
    MOTION = "MOTION"


@dataclass(eq=False)
class Sensor:
    """
    A binary-state device that contributes activation events.

    Sensors are identified by name only, so the active flag can change while
    the sensor is held in a set.
    """

    name: str
    sensor_type: SensorType = SensorType.MOTION
    active: bool = False

    def __eq__(self, other: object) -> bool:
        """Compare sensors by name."""
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        """Hash by name to match __eq__."""
        return hash(self.name)

    @classmethod
    def parse(cls, value: str) -> "Sensor":
        """
        Create a sensor from a 'NAME' or 'NAME:TYPE' string.

        Used by the CLI --sensor option, eg. 'front_door:DOOR'
        """
        name, _, type_name = value.partition(":")
        name = name.strip()
        if not name:
            msg = f"Sensor name missing in '{value}'"
            raise ValueError(msg)
        if not type_name:
            return cls(name=name)
        try:
            sensor_type = SensorType[type_name.strip().upper()]
        except KeyError:
            msg = f"Unknown sensor type '{type_name}'"
            raise ValueError(msg) from None
        return cls(name=name, sensor_type=sensor_type)
