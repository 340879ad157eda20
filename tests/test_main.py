"""Tests for the report entry point."""

from __future__ import annotations

import importlib
import logging

import pytest

from workout_tracker import config
from workout_tracker.examples import example_workouts
from workout_tracker.main import main
from workout_tracker.models.activities import Running, Swimming, Walking
from workout_tracker.report import read_data


@pytest.fixture
def reload_config():
    """Reload config after the test so env changes don't leak."""
    yield lambda: importlib.reload(config)
    importlib.reload(config)


class TestExampleWorkouts:
    def test_print_order(self) -> None:
        kinds = [type(w) for w in example_workouts()]
        assert kinds == [Swimming, Walking, Running]


class TestConfig:
    def test_log_level_from_env(self, monkeypatch, reload_config) -> None:
        monkeypatch.setenv("WORKOUT_TRACKER_LOG_LEVEL", "debug")
        assert reload_config().LOG_LEVEL == "DEBUG"

    def test_log_level_default(self, monkeypatch, reload_config) -> None:
        monkeypatch.delenv("WORKOUT_TRACKER_LOG_LEVEL", raising=False)
        assert reload_config().LOG_LEVEL == "WARNING"


class TestMain:
    def test_exit_code_zero(self, capsys) -> None:
        assert main() == 0

    def test_prints_three_reports_in_order(self, capsys) -> None:
        main()
        out = capsys.readouterr().out
        labels = [line for line in out.splitlines() if line.startswith("Тип тренировки:")]
        assert labels == [
            "Тип тренировки: Плавание",
            "Тип тренировки: Ходьба",
            "Тип тренировки: Бег",
        ]

    def test_reports_separated_by_blank_line(self, capsys) -> None:
        main()
        out = capsys.readouterr().out
        assert out.count("\n\n") == 3
        assert "Потрачено ккал: 302.91" in out

    def test_debug_logging_stays_off_stdout(self, capsys, caplog, monkeypatch) -> None:
        monkeypatch.setattr("workout_tracker.main.LOG_LEVEL", "DEBUG")
        caplog.set_level(logging.DEBUG)

        main()

        expected = "".join(read_data(w) + "\n" for w in example_workouts())
        assert capsys.readouterr().out == expected
        assert any("Built summary" in r.getMessage() for r in caplog.records)
