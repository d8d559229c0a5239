"""Tests for the swimtally CLI."""

import json
import logging

import pytest
import structlog
from typer.testing import CliRunner

from swimtally.cli.app import app
from swimtally.config import get_settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_settings(monkeypatch):
    """Fresh settings per test with info logs off, and logging reset afterwards."""
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    for name in ("SPLIT_SLASH_STROKES", "REPEAT_MAX_LINES", "POOL_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def session_file(tmp_path, sample_session):
    path = tmp_path / "session.txt"
    path.write_text(sample_session, encoding="utf-8")
    return path


def _write(tmp_path, text: str):
    path = tmp_path / "set.txt"
    path.write_text(text, encoding="utf-8")
    return str(path)


class TestParseCommand:
    """Tests for `swimtally parse`."""

    def test_totals_table(self, session_file):
        """The totals table and counters are shown."""
        result = runner.invoke(app, ["parse", str(session_file)])
        assert result.exit_code == 0
        assert "Session Totals" in result.stdout
        assert "Front Crawl" in result.stdout
        assert "Parsed: 7" in result.stdout

    def test_lines_table(self, session_file):
        """--lines adds the per-line audit."""
        result = runner.invoke(app, ["parse", str(session_file), "--lines"])
        assert result.exit_code == 0
        assert "Lines" in result.stdout

    def test_json(self, session_file):
        """--json prints the full result with stored column names."""
        result = runner.invoke(app, ["parse", str(session_file), "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["totals"]["totalDistance"] == 2200
        assert data["totals"]["totalFrontCrawlSwim"] == 1100
        assert data["success_count"] == 7
        assert len(data["parsed_lines"]) == 11

    def test_stdin(self):
        """'-' reads the session from stdin."""
        result = runner.invoke(app, ["parse", "-", "--json"], input="400 fc\n200 bk\n")
        assert result.exit_code == 0
        assert json.loads(result.stdout)["totals"]["totalDistance"] == 600

    def test_split_slash_flag(self):
        """--split-slash turns on the slash-stroke split."""
        result = runner.invoke(
            app, ["parse", "-", "--json", "--split-slash"], input="4 x 100m FC/BK Swim\n"
        )
        totals = json.loads(result.stdout)["totals"]
        assert totals["totalFrontCrawlSwim"] == 200
        assert totals["totalBackstrokeSwim"] == 200

    def test_split_slash_from_settings(self, monkeypatch):
        """The setting applies when the flag is not given."""
        monkeypatch.setenv("SPLIT_SLASH_STROKES", "true")
        get_settings.cache_clear()
        result = runner.invoke(app, ["parse", "-", "--json"], input="4 x 100m FC/BK Swim\n")
        assert json.loads(result.stdout)["totals"]["totalBackstrokeSwim"] == 200

    def test_no_split_slash_overrides_settings(self, monkeypatch):
        """--no-split-slash wins over the setting."""
        monkeypatch.setenv("SPLIT_SLASH_STROKES", "true")
        get_settings.cache_clear()
        result = runner.invoke(
            app, ["parse", "-", "--json", "--no-split-slash"], input="4 x 100m FC/BK Swim\n"
        )
        assert json.loads(result.stdout)["totals"]["totalFrontCrawlSwim"] == 400

    def test_missing_file(self, tmp_path):
        """An unreadable file exits with code 1."""
        result = runner.invoke(app, ["parse", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert "cannot read" in result.output


class TestCheckCommand:
    """Tests for `swimtally check`."""

    def test_consistent_totals(self, session_file):
        """The sample session passes."""
        result = runner.invoke(app, ["check", str(session_file)])
        assert result.exit_code == 0
        assert "Total distance: 2200m" in result.stdout
        assert "Totals look consistent" in result.stdout

    def test_line_warnings_listed(self, session_file):
        """Line warnings are shown with their line numbers."""
        result = runner.invoke(app, ["check", str(session_file)])
        assert "Line 10:" in result.stdout

    def test_inconsistent_totals_exit_1(self, tmp_path):
        """440m in a 25m pool fails the check."""
        result = runner.invoke(app, ["check", _write(tmp_path, "4 x 110 fc\n")])
        assert result.exit_code == 1
        assert "not a multiple of" in result.stdout

    def test_pool_length_option(self, tmp_path):
        """375m passes in a 25m pool but not a 50m one."""
        path = _write(tmp_path, "3 x 125 fc\n")
        assert runner.invoke(app, ["check", path]).exit_code == 0
        assert runner.invoke(app, ["check", path, "--pool-length", "50"]).exit_code == 1

    def test_invalid_pool_length(self, tmp_path):
        """A non-positive pool length is an error."""
        result = runner.invoke(app, ["check", _write(tmp_path, "400 fc\n"), "--pool-length=0"])
        assert result.exit_code == 1

    def test_empty_session(self, tmp_path):
        """Nothing parsed fails the check."""
        result = runner.invoke(app, ["check", _write(tmp_path, "Warm up\n")])
        assert result.exit_code == 1
