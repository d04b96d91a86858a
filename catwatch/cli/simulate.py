"""Provide the 'simulate' catwatch CLI command - an interactive status engine."""

import logging

import click

from catwatch.engine import StatusEngine, UnknownSensorError
from catwatch.image import RandomImageClassifier
from catwatch.listener import StatusListener
from catwatch.repository import InMemoryRepository
from catwatch.sensor import Sensor
from catwatch.status import AlarmStatus, ArmingStatus

_LOGGER = logging.getLogger(__name__)

logging.basicConfig(
    format="%(asctime)s.%(msecs)03d %(threadName)-25s %(levelname)-8s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)

DEFAULT_SENSORS = ["front_door:DOOR", "back_window:WINDOW", "hall_motion:MOTION"]


class PrintingListener(StatusListener):
    """Prints every engine notification."""

    def on_status_changed(self, status: AlarmStatus) -> None:
        """Print the new alarm status."""
        print(f"Alarm status changed to {status.value}")  # noqa: T201 # Valid CLI print

    def on_sensor_status_changed(self) -> None:
        """Print that sensors or arming changed."""
        print("Sensor/arming status changed")  # noqa: T201 # Valid CLI print

    def on_cat_detected(self, cat_detected: bool) -> None:  # noqa: FBT001 # Bool part of Pre-defined API
        """Print the image analysis result."""
        print(f"Cat detected: {cat_detected}")  # noqa: T201 # Valid CLI print


class Simulator:
    """Drives a status engine from typed commands."""

    engine: StatusEngine
    _frame_count: int

    def __init__(self, engine: StatusEngine) -> None:
        """Create a simulator for an engine."""
        self.engine = engine
        self._frame_count = 0

    def interactive_command(self, command: str) -> bool:
        """Handle a user CLI command. Returns False when the user quits."""
        _LOGGER.debug("Got command %s", command)

        verb, _, argument = command.strip().partition(" ")
        verb = verb.upper()
        argument = argument.strip()
        if verb == "D":
            self.engine.set_arming_status(ArmingStatus.DISARMED)
        elif verb == "AH":
            self.engine.set_arming_status(ArmingStatus.ARMED_HOME)
        elif verb == "AA":
            self.engine.set_arming_status(ArmingStatus.ARMED_AWAY)
        elif verb in ("ON", "OFF") and argument:
            self._change_sensor(argument, active=verb == "ON")
        elif verb == "C":
            self.engine.process_image_result(True)  # noqa: FBT003 # bool arg dictated by engine api
        elif verb == "N":
            self.engine.process_image_result(False)  # noqa: FBT003 # bool arg dictated by engine api
        elif verb == "I":
            self._frame_count += 1
            self.engine.process_image(f"frame-{self._frame_count}")
        elif verb == "S":
            self.print_status()
        elif verb == "Q":
            return False
        else:
            print("Commands:")  # noqa: T201 # Valid CLI print
            print("  D        : Disarm")  # noqa: T201 # Valid CLI print
            print("  AH       : Armed Home")  # noqa: T201 # Valid CLI print
            print("  AA       : Armed Away")  # noqa: T201 # Valid CLI print
            print("  ON name  : Activate sensor")  # noqa: T201 # Valid CLI print
            print("  OFF name : Deactivate sensor")  # noqa: T201 # Valid CLI print
            print("  C        : Camera sees a cat")  # noqa: T201 # Valid CLI print
            print("  N        : Camera sees no cat")  # noqa: T201 # Valid CLI print
            print("  I        : Classify a simulated camera frame")  # noqa: T201 # Valid CLI print
            print("  S        : Print status")  # noqa: T201 # Valid CLI print
            print("  Q        : Quit")  # noqa: T201 # Valid CLI print

        return True

    def _change_sensor(self, name: str, *, active: bool) -> None:
        try:
            sensor = self.engine.get_sensor(name)
        except UnknownSensorError:
            print(f"Unknown sensor: {name}")  # noqa: T201 # Valid CLI print
            return
        self.engine.change_sensor_activation(sensor, active)

    def print_status(self) -> None:
        """Print the current engine state."""
        print(f"Arming: {self.engine.arming_status.value}")  # noqa: T201 # Valid CLI print
        print(f"Alarm: {self.engine.alarm_status.value}")  # noqa: T201 # Valid CLI print
        print(f"Cat detected: {self.engine.cat_detected}")  # noqa: T201 # Valid CLI print
        for sensor in sorted(self.engine.sensors, key=lambda s: s.name):
            state = "active" if sensor.active else "inactive"
            print(f"  {sensor.name} ({sensor.sensor_type.value}): {state}")  # noqa: T201 # Valid CLI print


@click.command(help="Run an interactive status engine simulation")
@click.option(
    "--sensor",
    "sensors",
    multiple=True,
    help="Sensor as NAME or NAME:TYPE (DOOR, WINDOW, MOTION). Repeatable.",
)
@click.option(
    "--arming-status",
    type=click.Choice([s.value for s in ArmingStatus]),
    default=None,
    help="Initial persisted arming status",
)
@click.option("--seed", type=int, default=None, help="Seed for the random classifier")
def simulate(
    *,
    sensors: tuple[str, ...],
    arming_status: str | None,
    seed: int | None,
) -> None:
    """Add the 'simulate' CLI command which reads engine commands from stdin."""
    try:
        sensor_list = [Sensor.parse(s) for s in (sensors or DEFAULT_SENSORS)]
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--sensor") from e

    repository = InMemoryRepository(
        sensor_list,
        arming_status=ArmingStatus(arming_status) if arming_status else None,
    )
    engine = StatusEngine(repository, image_classifier=RandomImageClassifier(seed))
    engine.add_status_listener(PrintingListener())
    simulator = Simulator(engine)
    simulator.print_status()

    while True:
        try:
            command = input("Command: ")
        except EOFError:
            _LOGGER.debug("End of input")
            break
        if not simulator.interactive_command(command):
            _LOGGER.debug("Stopping interactive commands")
            break
