"""Tests for the console entry point and its exit codes."""

import os
import sys
from pathlib import Path

import pytest

from deadsbd.__main__ import main
from deadsbd.exceptions import NotFoundError

os.environ["NO_COLOR"] = "1"
os.environ["TERM"] = "dumb"


class FailingManager:
    def __init__(self, config, fetcher) -> None:
        pass

    async def fetch_show(self, show_name: str):
        raise NotFoundError(f"No shows found with name: {show_name}")


@pytest.fixture
def run_cli(monkeypatch, tmp_path: Path):
    """Runs main() with the given arguments and a config file that does not exist."""

    def run(*args: str) -> None:
        argv = ["deadsbd", "--config", str(tmp_path / "config.ini"), *args]
        monkeypatch.setattr(sys, "argv", argv)
        main()

    return run


class TestMain:
    """Test main."""

    def test_unknown_command_prints_usage_and_exits_zero(self, run_cli, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_cli("bogus")

        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "No such command" in out
        assert "Valid options are" in out

    def test_unknown_option_prints_usage_and_exits_zero(self, run_cli, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            run_cli("list", "--bogus")

        assert exc_info.value.code == 0
        assert "Valid options are" in capsys.readouterr().out

    def test_no_command_returns_normally(self, run_cli, capsys) -> None:
        run_cli()

        assert "You need to specify something to do" in capsys.readouterr().out

    def test_failed_fetch_exits_one(self, run_cli, monkeypatch, capsys) -> None:
        monkeypatch.setattr("deadsbd.cli.app.DownloadManager", FailingManager)

        with pytest.raises(SystemExit) as exc_info:
            run_cli("fetch", "Nowhere")

        assert exc_info.value.code == 1
        assert "No shows found" in capsys.readouterr().out
