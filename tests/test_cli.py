# SPDX-License-Identifier: MIT

import pytest
from typer.testing import CliRunner

from chronoloop import configuration
from chronoloop.repository.configuration import CONFIGURATION_REPO
from chronoloop.terminal.app import app

runner = CliRunner()


@pytest.fixture
def schedule(data_path, tmp_path, monkeypatch):
    config_dir = tmp_path / "config"
    monkeypatch.setattr(configuration, "CONFIG_PATH", config_dir)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_dir / "config.yaml")
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)

    (data_path / "events").mkdir()
    (data_path / "events" / "standup.yaml").write_text(
        "title: Standup\n"
        "start_time: '2024-01-01T09:00:00'\n"
        "end_time: '2024-01-01T09:30:00'\n"
        "recurrence:\n"
        "  kind: daily\n"
    )
    (data_path / "tasks").mkdir()
    (data_path / "tasks" / "report.yaml").write_text(
        "title: Report\ndue_date: '2024-01-01T17:00:00'\nestimated_duration: 90\n"
    )
    return data_path


def invoke(data_path, *args):
    return runner.invoke(app, ["--data-path", str(data_path), "--no-header", *args])


def test_timeline_shows_occurrences(schedule):
    result = invoke(
        schedule, "timeline", "--day", "2024-01-03", "--scale", "day", "--no-rollover"
    )

    assert result.exit_code == 0, result.output
    assert "Standup" in result.output
    assert "Report" not in result.output


def test_timeline_alias_and_filter(schedule):
    result = invoke(
        schedule,
        "tl",
        "--day",
        "2024-01-01",
        "--scale",
        "day",
        "-c",
        "task",
        "--no-rollover",
    )

    assert result.exit_code == 0, result.output
    assert "Report" in result.output
    assert "Standup" not in result.output


def test_workload(schedule):
    result = invoke(
        schedule, "workload", "--day", "2024-01-01", "--scale", "day", "--no-rollover"
    )

    assert result.exit_code == 0, result.output
    assert "2h" in result.output
    assert "light" in result.output


def test_conflicts(schedule):
    result = invoke(
        schedule, "cf", "--start", "2024-01-02 09:15", "--end", "2024-01-02 10:00"
    )

    assert result.exit_code == 0, result.output
    assert "1 conflicting item(s)" in result.output
    assert "Standup" in result.output


def test_back_to_back_is_not_a_conflict(schedule):
    result = invoke(
        schedule, "conflicts", "--start", "2024-01-02 09:30", "--end", "2024-01-02 10:00"
    )

    assert result.exit_code == 0, result.output
    assert "No conflicts" in result.output


def test_rollover_preview(schedule):
    result = invoke(schedule, "rollover")

    assert result.exit_code == 0, result.output
    assert "Report" in result.output


def test_missing_data_directory(schedule, tmp_path):
    result = invoke(tmp_path / "nowhere", "timeline", "--scale", "day")

    assert result.exit_code == 1
    assert "No data directory" in result.output


def test_invalid_scale(schedule):
    result = invoke(schedule, "timeline", "--scale", "decade")

    assert result.exit_code != 0


def test_config_set_and_view(schedule):
    result = invoke(schedule, "config", "set", "--default-scale", "month")

    assert result.exit_code == 0, result.output
    assert "month" in result.output
    assert configuration.APP_CONFIG_PATH.is_file()


def test_conflicts_reach_back_to_long_running_blocks(schedule):
    (schedule / "time_blocks").mkdir()
    (schedule / "time_blocks" / "offsite.yaml").write_text(
        "title: Offsite\n"
        "start_time: '2024-01-01T09:00:00'\n"
        "end_time: '2024-01-04T09:00:00'\n"
    )

    result = invoke(
        schedule, "conflicts", "--start", "2024-01-03 10:00", "--end", "2024-01-03 11:00"
    )

    assert result.exit_code == 0, result.output
    assert "1 conflicting item(s)" in result.output
    assert "Offsite" in result.output
