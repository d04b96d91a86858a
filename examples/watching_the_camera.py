"""
Example that polls a simulated camera and raises the alarm when a cat is seen.

Defaults to running forever - use ctrl-C to end.
"""

import asyncio
import itertools

from catwatch import (
    AlarmStatus,
    ArmingStatus,
    CameraMonitor,
    InMemoryRepository,
    RandomImageClassifier,
    StatusEngine,
    StatusListener,
)


def main(timeout: float = 0, seed: int | None = None) -> CameraMonitor:
    """Arm the house at home and watch the camera."""
    engine = StatusEngine(
        InMemoryRepository(), image_classifier=RandomImageClassifier(seed)
    )
    engine.set_arming_status(ArmingStatus.ARMED_HOME)

    class _Listener(StatusListener):
        def on_status_changed(self, status: AlarmStatus) -> None:
            print(f"Alarm status: {status.value}")  # noqa: T201 # Valid CLI print

    engine.add_status_listener(_Listener())

    frames = itertools.count(1)
    monitor = CameraMonitor(engine, lambda: f"frame-{next(frames)}", poll_interval=0.1)

    async def _run() -> None:
        task = asyncio.create_task(monitor.run())
        if timeout != 0:
            await asyncio.sleep(timeout)
            monitor.close()
        await task

    try:
        asyncio.run(_run())
    except KeyboardInterrupt:
        print("Cancelled - shutting down")  # noqa: T201 # Valid CLI print

    return monitor


if __name__ == "__main__":
    main()
