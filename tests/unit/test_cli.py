# tests/unit/test_cli.py
"""
CLI unit tests.

Tests each command via typer's CliRunner, with the config file redirected
to a temporary directory.
"""

import json
import logging
from unittest.mock import patch

import pytest
import yaml
from typer.testing import CliRunner

from rein_planner.cli import app

runner = CliRunner()


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def config_path(tmp_path):
    """Point config loading at a quiet temp config and restore logging after."""
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"output": {"format": "table", "verbosity": "quiet"}}))

    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    with patch("rein_planner.config.loader.get_config_path", return_value=path):
        yield path
    root.handlers[:] = handlers
    root.setLevel(level)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestHelp:
    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "natural-language timeframe" in result.output

    def test_help_flag(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        for command in ("dates", "spacing", "parse", "span", "serve"):
            assert command in result.output


class TestDates:
    def test_json_output(self):
        result = runner.invoke(app, ["dates", "30 days", "--start", "2026-01-01", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total_days"] == 30
        assert data["stage_count"] == 3
        assert [s["start_date"] for s in data["stages"]] == ["2026-01-01", "2026-01-11", "2026-01-21"]

    def test_level_without_timeframe(self):
        result = runner.invoke(app, ["dates", "--level", "beginner", "--start", "2026-01-01", "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total_days"] == 60
        assert data["node_spacing"] == 2

    def test_table_output(self):
        result = runner.invoke(app, ["dates", "30 days", "--start", "2026-01-01"])
        assert result.exit_code == 0
        assert "2026-01-01" in result.output
        assert "2026-01-30" in result.output
        assert "daily tasks" in result.output
        assert "1 month" in result.output

    def test_markdown_output(self):
        result = runner.invoke(app, ["dates", "2 weeks", "-s", "2026-01-01", "-f", "markdown"])
        assert result.exit_code == 0
        assert "## Roadmap Schedule" in result.output
        assert "### Stage 1: 2026-01-01" in result.output

    def test_format_from_config(self, config_path):
        config_path.write_text(yaml.safe_dump({"output": {"format": "json", "verbosity": "quiet"}}))
        result = runner.invoke(app, ["dates", "2 weeks", "--start", "2026-01-01"])
        assert result.exit_code == 0
        assert json.loads(result.output)["total_days"] == 14

    def test_invalid_start(self):
        result = runner.invoke(app, ["dates", "2 weeks", "--start", "01/01/2026"])
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_invalid_level(self):
        result = runner.invoke(app, ["dates", "--level", "wizard"])
        assert result.exit_code == 1
        assert "Invalid experience level" in result.output

    def test_invalid_format(self):
        result = runner.invoke(app, ["dates", "2 weeks", "--format", "xml"])
        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_timeframe_too_long(self):
        result = runner.invoke(app, ["dates", "99999999 days", "--start", "2026-01-01"])
        assert result.exit_code == 1
        assert "too long" in result.output


class TestSpacing:
    def test_spacing_summary(self):
        result = runner.invoke(app, ["spacing", "3 months"])
        assert result.exit_code == 0
        assert "90" in result.output
        assert "tasks every 3 days" in result.output
        assert "32" in result.output


class TestParse:
    @pytest.mark.parametrize(
        "text,expected",
        [("in 6 months", "180"), ("quick", "14"), ("no idea", "30")],
    )
    def test_parse(self, text, expected):
        result = runner.invoke(app, ["parse", text])
        assert result.exit_code == 0
        assert result.output.strip() == expected


class TestSpan:
    def test_span(self):
        result = runner.invoke(app, ["span", "2026-01-01", "2026-01-14"])
        assert result.exit_code == 0
        assert result.output.strip() == "2 weeks"

    def test_span_invalid(self):
        result = runner.invoke(app, ["span", "2026-01-01", "later"])
        assert result.exit_code == 1
        assert "Invalid date" in result.output
