"""Unit tests for the submodules CLI."""

import json
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from src.cli.submodules import cli


OUTPUT = """ 1f2e3d4c libs/core (heads/main)
+9a8b7c6d libs/ui (v2.0)
-0a1b2c3d libs/alpha
-0a1b2c3d libs/beta
"""


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Create a repository root with a git config registering libs/alpha."""
    git_dir = tmp_path / ".git"
    git_dir.mkdir()
    (git_dir / "config").write_text(
        '[core]\n\tbare = false\n[submodule "libs/alpha"]\n\tactive = true\n',
        encoding="utf-8",
    )
    return tmp_path


class TestStatusCommand:
    """Tests for the status command."""

    def test_json_output(self, repo: Path) -> None:
        """JSON output lists every entry with status and health."""
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["status", "--repo-root", str(repo), "--format", "json", "--no-json-logs"],
            input=OUTPUT,
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert [p["status"] for p in payload] == [
            "CURRENT",
            "NOT_CURRENT",
            "INITIALIZED",
            "NOT_INITIALIZED",
        ]
        assert payload[1]["reference"] == "v2.0"
        assert all(p["health"] == "OKAY" for p in payload)

    def test_text_output(self, repo: Path) -> None:
        """Text output prints one line per entry."""
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["status", "--repo-root", str(repo)],
            input=OUTPUT,
        )

        assert result.exit_code == 0, result.output
        lines = result.stdout.strip().splitlines()
        assert len(lines) == 4
        assert lines[0].startswith("CURRENT")
        assert "Submodule is initialized" in lines[2]

    def test_missing_config(self, tmp_path: Path) -> None:
        """A root without .git/config reports UNKNOWN for '-' lines."""
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["status", "--repo-root", str(tmp_path), "--format", "json"],
            input="-abc libs/alpha\n",
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload[0]["status"] == "UNKNOWN"
        assert payload[0]["status_message"] == "Git config file not found"

    def test_input_file(self, repo: Path, tmp_path: Path) -> None:
        """Status output can be read from a file."""
        input_path = tmp_path / "status.txt"
        input_path.write_text("Uabc libs/core\n", encoding="utf-8")

        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["status", "--repo-root", str(repo), "--input", str(input_path), "--format", "json"],
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload[0]["status"] == "MERGE_CONFLICT"
        assert payload[0]["reference"] == "???"

    def test_unreadable_input_is_usage_error(self, tmp_path: Path) -> None:
        """A missing input file exits with a usage error."""
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["status", "--input", str(tmp_path / "missing.txt")],
        )

        assert result.exit_code == 2
