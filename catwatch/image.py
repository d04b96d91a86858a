"""Image classifier contract and a random stand-in classifier."""

import logging
import random
from abc import ABC, abstractmethod
from typing import Any

_LOGGER = logging.getLogger(__name__)


class ImageClassifier(ABC):
    """Decides whether a camera image shows a cat."""

    @abstractmethod
    def image_contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        """
        Return True if a cat is present in the image.

        :param image: The camera frame. The engine treats this as opaque.
        :param confidence_threshold: Minimum confidence (0-100) for a positive
            answer
        """
        raise NotImplementedError


class RandomImageClassifier(ImageClassifier):
    """Classifier that answers at random. Stands in for a real model."""

    def __init__(self, seed: int | None = None) -> None:
        """Create a classifier, optionally seeded for repeatable answers."""
        self._random = random.Random(seed)  # noqa: S311 # Not used for crypto

    def image_contains_cat(self, image: Any, confidence_threshold: float) -> bool:
        """Return a cat-presence answer drawn against the threshold."""
        confidence = self._random.uniform(0.0, 100.0)
        result = confidence > confidence_threshold
        _LOGGER.debug(
            "Classified %s - confidence %.1f threshold %.1f -> %s",
            type(image).__name__,
            confidence,
            confidence_threshold,
            result,
        )
        return result
