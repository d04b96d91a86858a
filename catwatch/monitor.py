"""Polls a camera for images and feeds them to the status engine."""

import asyncio
import logging
from asyncio import sleep
from collections.abc import Callable
from typing import Any

from justbackoff import Backoff

from .engine import StatusEngine

_LOGGER = logging.getLogger(__name__)


class CameraMonitor:
    """Long-running loop that classifies camera images on a fixed interval."""

    poll_count: int
    error_count: int
    _engine: StatusEngine
    _image_source: Callable[[], Any]
    _poll_interval: float
    _closed: bool
    _backoff: Backoff

    def __init__(
        self,
        engine: StatusEngine,
        image_source: Callable[[], Any],
        *,
        poll_interval: float = 5.0,
        backoff: Backoff | None = None,
    ) -> None:
        """
        Create a monitor for one camera.

        :param image_source: Returns the latest camera image, or None when no
            image is available. May raise OSError.
        :param poll_interval: Seconds between successful polls
        """
        self._engine = engine
        self._image_source = image_source
        self._poll_interval = poll_interval
        self._closed = False
        if backoff is None:
            backoff = Backoff(min_ms=500, max_ms=60000)
        self._backoff = backoff
        self.poll_count = 0
        self.error_count = 0

    def poll_once(self) -> bool | None:
        """
        Fetch and classify a single image.

        Returns whether a cat was seen, or None if no image was available.
        """
        image = self._image_source()
        if image is None:
            _LOGGER.debug("No image available from camera")
            return None

        self.poll_count += 1
        return self._engine.process_image(image)

    async def run(self) -> None:
        """
        Poll the camera until close() is called or the task is cancelled.

        Errors reading or classifying an image are retried with backoff.
        """
        _LOGGER.debug("CameraMonitor run start")
        while not self._closed:
            try:
                # Source and classifier may block - keep them off the event loop
                cat_present = await asyncio.to_thread(self.poll_once)
            except OSError as e:
                self.error_count += 1
                delay = self._backoff.duration()
                _LOGGER.warning(
                    "Failed to process camera image: %s - sleeping backoff %s",
                    e,
                    delay,
                )
                await sleep(delay)
                continue

            self._backoff.reset()
            _LOGGER.debug(
                "Poll %s cat:%s - sleeping for %s",
                self.poll_count,
                cat_present,
                self._poll_interval,
            )
            await asyncio.sleep(self._poll_interval)
        _LOGGER.debug("CameraMonitor run end")

    def close(self) -> None:
        """Stop the polling loop after the current iteration."""
        _LOGGER.debug("Closing CameraMonitor")
        self._closed = True
