"""Mini README: Tests for the Typer control centre commands."""

from __future__ import annotations

from typer.testing import CliRunner

from main_control_centre import cli

runner = CliRunner()


def test_fleet_command_lists_demo_records() -> None:
    """The fleet command prints demo drones and stops."""

    result = runner.invoke(cli, ["fleet"])
    assert result.exit_code == 0
    assert "drone_1" in result.output
    assert "London Charging Hub" in result.output


def test_plan_command_accepts_short_route() -> None:
    """A short route exits cleanly with a success message."""

    result = runner.invoke(cli, ["plan", "drone_1", "--waypoint", "37.79,-122.42"])
    assert result.exit_code == 0
    assert "Route is within range and battery limits." in result.output


def test_plan_command_reports_issues_and_stops() -> None:
    """An overlong route prints issues and suggested stops."""

    result = runner.invoke(
        cli,
        ["plan", "drone_1", "-w", "37.9,-122.3", "-w", "38.2,-122.0"],
    )
    assert result.exit_code == 2
    assert "exceeds drone's maximum range of 35 km" in result.output
    assert "Suggested charging stops: stop_1" in result.output


def test_plan_command_rejects_unknown_drone() -> None:
    """Unknown drones exit with status 1."""

    result = runner.invoke(cli, ["plan", "drone_404"])
    assert result.exit_code == 1


def test_plan_command_rejects_malformed_waypoint() -> None:
    """Waypoints that are not LAT,LNG are rejected."""

    result = runner.invoke(cli, ["plan", "drone_1", "-w", "north"])
    assert result.exit_code != 0
