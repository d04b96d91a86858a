"""Test the examples and the catwatch CLI tool."""

import logging

from click.testing import CliRunner

from catwatch import AlarmStatus, ArmingStatus
from catwatch.cli.__main__ import cli
from catwatch.cli.simulate import Simulator
from catwatch.engine import StatusEngine
from catwatch.repository import InMemoryRepository
from catwatch.sensor import Sensor
from examples import tracking_alarm_status, watching_the_camera

_LOGGER = logging.getLogger(__name__)

logging.basicConfig(
    format="%(asctime)s.%(msecs)03d %(threadName)-25s %(levelname)-8s %(message)s",
    level=logging.DEBUG,
    datefmt="%Y-%m-%d %H:%M:%S",
)


def test_tracking_alarm_status() -> None:
    """Test the tracking_alarm_status.py example operation."""
    assert tracking_alarm_status.main() == AlarmStatus.ALARM


def test_watching_the_camera() -> None:
    """Run the camera example for half a second."""
    monitor = watching_the_camera.main(timeout=0.5, seed=3)
    assert monitor.poll_count > 0


def test_cli_version() -> None:
    """Run equivalent of python3 -m catwatch.cli --log-level debug version."""
    runner = CliRunner()
    result = runner.invoke(cli, args=["--log-level", "debug", "version"])
    _LOGGER.info("version output: %s", result.output)
    assert result.exit_code == 0, result.output
    assert result.output.strip()


def test_cli_simulate() -> None:
    """Drive the interactive simulator through a short session."""
    runner = CliRunner()
    result = runner.invoke(
        cli,
        args=[
            "--log-level",
            "info",
            "simulate",
            "--sensor",
            "door:DOOR",
            "--sensor",
            "hall",
            "--seed",
            "1",
        ],
        input="AA\nON door\nON hall\nOFF door\nON garage\nI\nS\nX\nD\nQ\n",
    )
    assert result.exit_code == 0, result.output
    assert "Alarm status changed to PENDING_ALARM" in result.output
    assert "Alarm status changed to ALARM" in result.output
    assert "Unknown sensor: garage" in result.output
    assert "Commands:" in result.output
    assert "Alarm status changed to NO_ALARM" in result.output


def test_cli_simulate_ends_on_eof() -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli, args=["simulate", "--arming-status", "ARMED_HOME"], input="C\n"
    )
    assert result.exit_code == 0, result.output
    assert "Arming: ARMED_HOME" in result.output
    assert "Cat detected: True" in result.output


def test_cli_simulate_bad_sensor() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, args=["simulate", "--sensor", "x:BOGUS"], input="Q\n")
    assert result.exit_code != 0
    assert "Unknown sensor type" in result.output


def test_simulator_commands() -> None:
    """Commands map onto engine operations."""
    door = Sensor("door")
    engine = StatusEngine(InMemoryRepository([door]))
    simulator = Simulator(engine)

    assert simulator.interactive_command("ah")
    assert engine.arming_status == ArmingStatus.ARMED_HOME
    assert simulator.interactive_command("on door")
    assert engine.alarm_status == AlarmStatus.PENDING_ALARM
    assert simulator.interactive_command("N")
    assert engine.alarm_status == AlarmStatus.PENDING_ALARM
    assert simulator.interactive_command("C")
    assert engine.alarm_status == AlarmStatus.ALARM
    assert simulator.interactive_command("D")
    assert engine.alarm_status == AlarmStatus.NO_ALARM
    assert not simulator.interactive_command("q")
