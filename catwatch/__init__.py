"""Module file for catwatch."""

from .engine import CatwatchError, StatusEngine, UnknownSensorError
from .image import ImageClassifier, RandomImageClassifier
from .listener import StatusListener
from .monitor import CameraMonitor
from .repository import InMemoryRepository, Repository
from .sensor import Sensor, SensorType
from .status import AlarmStatus, ArmingStatus

__all__ = [
    "AlarmStatus",
    "ArmingStatus",
    "CameraMonitor",
    "CatwatchError",
    "ImageClassifier",
    "InMemoryRepository",
    "RandomImageClassifier",
    "Repository",
    "Sensor",
    "SensorType",
    "StatusEngine",
    "StatusListener",
    "UnknownSensorError",
]
__version__ = "0.0.0-dev"
