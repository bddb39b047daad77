"""Unit tests for the command-line interface."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from ruamel.yaml import YAML

from src.main import configure_logging, main, parse_arguments, show_banner


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Drop the stderr handler installed by configure_logging after each test."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)


class TestParseArguments:
    def test_defaults(self) -> None:
        args = parse_arguments([])
        assert args.only is None
        assert args.config is None
        assert args.report is None
        assert args.no_banner is False

    def test_list_scenarios_exits(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments(["--list-scenarios"])

        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "Available Scenarios:" in out
        assert " 1. read-file" in out
        assert "11. parse-number" in out

    def test_unknown_only_key(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments(["--only", "nope"])
        assert exc_info.value.code == 2
        assert "Unknown scenario(s): nope" in capsys.readouterr().err

    def test_report_suffix_checked(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            parse_arguments(["--report", "out.txt"])
        assert exc_info.value.code == 2


class TestMain:
    def run_main(
        self, monkeypatch: pytest.MonkeyPatch, stdin: str, *argv: str
    ) -> int | str | None:
        monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
        with pytest.raises(SystemExit) as exc_info:
            main(list(argv))
        return exc_info.value.code

    def test_runs_selected_scenarios(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = self.run_main(
            monkeypatch, "42\n", "--no-banner", "--only", "parse-number"
        )

        assert code == 0
        assert capsys.readouterr().out == "Enter a number: Parsed number: 42\n"

    def test_failures_keep_exit_code_zero(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = self.run_main(
            monkeypatch, "10 0\n", "--no-banner", "--only", "divide", "--only", "cast-value"
        )

        assert code == 0
        lines = capsys.readouterr().out.splitlines()
        assert lines[0].endswith("ZeroDivisionError caught: division by zero")
        assert lines[1] == "TypeError caught: int object cannot be cast to str"

    def test_banner_shown_by_default(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        self.run_main(monkeypatch, "", "--only", "cast-value")
        assert "EXCEPTION CATALOGUE" in capsys.readouterr().out

    def test_writes_report(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        report = tmp_path / "out" / "run.yaml"
        code = self.run_main(
            monkeypatch, "", "--no-banner", "--only", "deserialize", "--report", str(report)
        )

        assert code == 0
        data = YAML(typ="safe").load(report.read_text(encoding="utf-8"))
        assert data["entries"][0]["scenario"] == "deserialize"
        assert data["entries"][0]["label"] == "EOFError"

    def test_config_file_applied(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
    ) -> None:
        cfg = tmp_path / "cfg.yaml"
        cfg.write_text("max_sleep_ms: 5\n")

        code = self.run_main(
            monkeypatch, "6\n", "--no-banner", "--only", "sleep", "--config", str(cfg)
        )

        assert code == 0
        assert "Duration cannot exceed 5 ms." in capsys.readouterr().out

    def test_bad_config_exits_one(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], tmp_path: Path
    ) -> None:
        code = self.run_main(
            monkeypatch, "", "--no-banner", "--config", str(tmp_path / "missing.yaml")
        )

        assert code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Configuration error" in captured.err

    def test_exhausted_input_exits_zero(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = self.run_main(monkeypatch, "", "--no-banner")

        assert code == 0
        assert "Input exhausted" in capsys.readouterr().out


def test_show_banner_to_stream() -> None:
    out = io.StringIO()
    show_banner(out)
    assert "EXCEPTION CATALOGUE" in out.getvalue()


def test_configure_logging_levels() -> None:
    configure_logging(debug=True)
    assert logging.getLogger().level == logging.DEBUG
    configure_logging(verbose=True)
    assert logging.getLogger().level == logging.INFO
    configure_logging()
    assert logging.getLogger().level == logging.WARNING
