"""Tests for the ymd CLI."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from ymd.cli import app
from ymd.config import get_config_path, load_config, save_config


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> CliRunner:
    """CLI runner isolated from the user's config and environment."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("YMD_ZONE", "utc")
    monkeypatch.delenv("YMD_WEEK_START", raising=False)
    return CliRunner()


class TestInit:
    """Tests for ymd init."""

    def test_creates_config(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 0
        assert load_config(get_config_path()) == {"zone": "local", "week_start": 0}

    def test_refuses_to_overwrite(self, runner: CliRunner) -> None:
        runner.invoke(app, ["init"])
        result = runner.invoke(app, ["init"])

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_force(self, runner: CliRunner) -> None:
        runner.invoke(app, ["init"])
        result = runner.invoke(app, ["init", "--force"])

        assert result.exit_code == 0


class TestCheck:
    """Tests for ymd check."""

    def test_valid(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check", "2024-02-29"])

        assert result.exit_code == 0
        assert "Thursday 29 February 2024" in result.output

    def test_reports_each_failure(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["check", "2024-02-29", "2024-02-30", "2024-2-1"])

        assert result.exit_code == 1
        assert "not a real date" in result.output
        assert "wrong format" in result.output


class TestToday:
    """Tests for ymd today."""

    def test_prints_a_date(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["today", "--zone", "Asia/Tokyo"])

        assert result.exit_code == 0
        assert len(result.output.strip()) == 10

    def test_unknown_zone(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["today", "--zone", "Nowhere/Special"])

        assert result.exit_code == 1
        assert "Unknown time zone" in result.output

    def test_bad_config_zone(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YMD_ZONE", "Nowhere/Special")
        result = runner.invoke(app, ["today"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_numeric_config_zone(self, runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("YMD_ZONE")
        get_config_path().parent.mkdir(parents=True)
        save_config({"zone": 5}, get_config_path())
        result = runner.invoke(app, ["today"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output


class TestAdd:
    """Tests for ymd add."""

    def test_months_clamp(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["add", "2023-01-31", "--months", "1"])

        assert result.exit_code == 0
        assert result.output.strip() == "2023-02-28"

    def test_negative_days(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["add", "2024-03-01", "--days=-1"])

        assert result.exit_code == 0
        assert result.output.strip() == "2024-02-29"

    def test_bad_date(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["add", "2024-2-30", "--days", "1"])

        assert result.exit_code == 1
        assert "Invalid date format" in result.output


class TestDiff:
    """Tests for ymd diff."""

    def test_january(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["diff", "2025-01-01", "2025-01-31"])

        assert result.exit_code == 0
        assert "30" in result.output
        assert "31" in result.output

    def test_reversed_has_no_inclusive_count(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["diff", "2025-02-01", "2025-01-01"])

        assert result.exit_code == 0
        assert "-31" in result.output
        assert "-1" in result.output


class TestRange:
    """Tests for ymd range."""

    def test_lists_dates(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["range", "2024-02-28", "2024-03-01"])

        assert result.exit_code == 0
        assert result.output.split() == ["2024-02-28", "2024-02-29", "2024-03-01"]

    def test_format(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["range", "2023-11-13", "2023-11-14", "--format", "%a"])

        assert result.output.split() == ["Mon", "Tue"]

    def test_empty(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["range", "2024-03-01", "2024-02-28"])

        assert result.exit_code == 0
        assert "No dates in range" in result.output


class TestCalendar:
    """Tests for ymd calendar."""

    def test_month_grid(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calendar", "--month", "2024-03", "--week-start", "monday"])

        assert result.exit_code == 0
        assert "March 2024" in result.output
        assert result.output.index("Mo") < result.output.index("Su")

    def test_bad_month(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calendar", "--month", "2024-13"])

        assert result.exit_code == 1
        assert "Invalid date" in result.output

    def test_bad_week_start(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["calendar", "--week-start", "someday"])

        assert result.exit_code == 1
        assert "Unknown day of week" in result.output

    @pytest.mark.parametrize("month", ["9999-12", "0001-01"])
    def test_month_at_year_limit(self, runner: CliRunner, month: str) -> None:
        """Should report padding weeks that leave the supported years instead of crashing."""
        result = runner.invoke(app, ["calendar", "--month", month, "--week-start", "sunday"])

        assert result.exit_code == 1
        assert "out of range" in result.output


class TestVerbose:
    """Tests for global logging options."""

    def test_verbose_flag_accepted(self, runner: CliRunner) -> None:
        result = runner.invoke(app, ["-v", "add", "2024-01-01", "--days", "1"])

        assert result.exit_code == 0
        assert "2024-01-02" in result.output
