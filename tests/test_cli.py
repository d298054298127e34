"""Tests for the projfind command line."""

import tempfile
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from projfind import __version__
from projfind.cli import app

runner = CliRunner()


def test_cli_reports_projects():
    """Both example projects are printed, each under its bracketed path."""
    with tempfile.TemporaryDirectory() as d:
        root = Path(d)
        (root / "proj-a" / ".git").mkdir(parents=True)
        (root / "proj-b" / "node_modules").mkdir(parents=True)
        (root / "proj-b" / "package.json").write_text("{}")
        (root / "proj-b" / "yarn.lock").write_text("")
        result = runner.invoke(app, [d])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines == [
        f"[{root / 'proj-a'}]",
        "  found Git with clean worktree and synced",
        f"[{root / 'proj-b'}]",
        "  no Git found",
        "  found installed Node.js (has lockfile)",
    ]


def test_cli_empty_dir_prints_nothing():
    with tempfile.TemporaryDirectory() as d:
        (Path(d) / "empty-dir").mkdir()
        (Path(d) / "empty-dir" / "plain.txt").write_text("x")
        result = runner.invoke(app, [d])
    assert result.exit_code == 0
    assert result.output == ""


def test_cli_missing_root_is_noop():
    """A path that does not exist is not an error."""
    with tempfile.TemporaryDirectory() as d:
        result = runner.invoke(app, [str(Path(d) / "missing")])
    assert result.exit_code == 0
    assert result.output == ""


def test_cli_requires_directory_argument():
    """A missing DIRECTORY is a usage error; nothing is printed on stdout."""
    result = runner.invoke(app, [])
    assert result.exit_code == 2
    assert result.stdout == ""


def test_cli_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"projfind {__version__}" in result.output


def test_cli_listing_failure_exits_1():
    """Listing failure: exit 1, projects found before it are still printed."""
    real_iterdir = Path.iterdir

    def iterdir(self):
        if self.name == "locked":
            raise PermissionError(13, "Permission denied", str(self))
        return real_iterdir(self)

    with tempfile.TemporaryDirectory() as d:
        root = Path(d)
        (root / "a-proj" / ".git").mkdir(parents=True)
        (root / "locked").mkdir()
        with patch.object(Path, "iterdir", iterdir):
            result = runner.invoke(app, [d])
    assert result.exit_code == 1
    assert f"[{root / 'a-proj'}]" in result.stdout
    assert f"Error: cannot read directory {root / 'locked'}" in result.stderr
    assert "Traceback" not in result.output


def test_cli_verbose_still_reports():
    with tempfile.TemporaryDirectory() as d:
        (Path(d) / "proj" / ".git").mkdir(parents=True)
        result = runner.invoke(app, ["-v", d])
    assert result.exit_code == 0
    assert "found Git" in result.output
