"""Tests for the skanzer command line."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from skanzer import __version__
from skanzer.cli.main import _parse_output_formats, build_parser, main
from skanzer.exceptions import FetchError


def test_parser_scan_defaults() -> None:
    args = build_parser().parse_args(["scan", "-r", "."])

    assert args.command == "scan"
    assert args.root == Path(".")
    assert args.output_dir is None
    assert args.output_format == "json"
    assert args.fail_on is None
    assert not args.no_stdout
    assert not args.verbose


def test_parser_rejects_unknown_fail_on() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["scan", "-r", ".", "--fail-on", "severe"])


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])

    assert excinfo.value.code == 0
    assert __version__ in capsys.readouterr().out


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("json", ("json",)),
        ("json, csv", ("json", "csv")),
    ],
)
def test_parse_output_formats(raw: str, expected: tuple[str, ...]) -> None:
    assert _parse_output_formats(raw) == expected


@pytest.mark.parametrize("raw", ["", "json,", "json,,csv", "sarif"])
def test_parse_output_formats_errors(raw: str) -> None:
    assert isinstance(_parse_output_formats(raw), str)


def test_scan_prints_summary(skill_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(["scan", "-r", str(skill_root), "--no-color"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "HIGH RISK" in out
    assert "2 scanned" in out


def test_scan_no_stdout_writes_outputs(skill_root: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out_dir = tmp_path / "reports"

    exit_code = main(
        ["scan", "-r", str(skill_root), "-o", str(out_dir), "--output-format", "json,csv", "--no-stdout"]
    )

    assert exit_code == 0
    assert capsys.readouterr().out == ""
    assert (out_dir / "findings.csv").is_file()
    summary = json.loads((out_dir / "helper" / "summary.json").read_text(encoding="utf-8"))
    assert summary["risk_level"] == "high_risk"


@pytest.mark.parametrize(("fail_on", "expected"), [("critical", 1), ("low", 1)])
def test_scan_fail_on_gates_exit_code(skill_root: Path, fail_on: str, expected: int) -> None:
    assert main(["scan", "-r", str(skill_root), "--no-stdout", "--fail-on", fail_on]) == expected


def test_scan_fail_on_passes_clean_workspace(tmp_path: Path) -> None:
    (tmp_path / "notes").mkdir()
    (tmp_path / "notes" / "SKILL.md").write_text("---\nname: notes\n---\n# Notes\n\nTake notes.\n", encoding="utf-8")

    assert main(["scan", "-r", str(tmp_path), "--no-stdout", "--fail-on", "low"]) == 0


@pytest.mark.parametrize(
    "extra",
    [
        ["--output-format", "sarif"],
        ["--output-format", "json,"],
        ["--max-workers", "0"],
        ["--max-file-mb", "-1"],
    ],
)
def test_scan_rejects_bad_flags(skill_root: Path, extra: list[str], capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["scan", "-r", str(skill_root), "--no-stdout", *extra]) == 2
    assert "Configuration error" in capsys.readouterr().err


def test_scan_missing_root_is_config_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["scan", "-r", str(tmp_path / "missing"), "--no-stdout"]) == 2
    assert "CFG008" in capsys.readouterr().err


def test_scan_invalid_config_is_config_error(skill_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (skill_root / "skanzer.yaml").write_text("rulez: {}\n", encoding="utf-8")

    assert main(["scan", "-r", str(skill_root), "--no-stdout"]) == 2
    assert "CFG004" in capsys.readouterr().err


def test_validate_config_ok(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "skanzer.yaml").write_text("max_workers: 4\n", encoding="utf-8")

    assert main(["validate-config", "-r", str(tmp_path)]) == 0
    assert "Configuration is valid." in capsys.readouterr().out


def test_validate_config_reports_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "custom.yaml"
    config.write_text("rules:\n  NOT_A_RULE: false\n", encoding="utf-8")

    assert main(["validate-config", "-r", str(tmp_path), "-c", str(config)]) == 2
    assert "CFG007" in capsys.readouterr().err


def test_validate_config_missing_explicit_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["validate-config", "-r", str(tmp_path), "-c", str(tmp_path / "nope.yaml")]) == 2
    assert "CFG001" in capsys.readouterr().err


def test_scan_scanner_error_exits_one(skill_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    failing = MagicMock(side_effect=FetchError("skills", "permission denied"))

    with patch("skanzer.cli.main.scan_workspace", failing):
        exit_code = main(["scan", "-r", str(skill_root), "--no-stdout"])

    assert exit_code == 1
    assert "Scanner error: Failed to fetch file skills: permission denied" in capsys.readouterr().err
    failing.assert_called_once()


def test_scan_enables_color_only_for_tty(skill_root: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with patch("skanzer.cli.main.sys.stdout") as stdout:
        stdout.isatty.return_value = True
        main(["scan", "-r", str(skill_root)])

    printed = "".join(str(call.args[0]) for call in stdout.write.call_args_list if call.args)
    assert "\033[" in printed
