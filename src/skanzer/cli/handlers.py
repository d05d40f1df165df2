"""CLI subcommand handlers and threshold evaluation."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from skanzer.config import validate_config_file
from skanzer.constants.scoring import SEVERITY_RANK
from skanzer.constants.validation import CFG008
from skanzer.exceptions.validation import ValidationError, format_errors, sort_errors
from skanzer.model import ScanResult


def preflight_validate(root: Path, config_path: Path | None = None) -> list[ValidationError]:
    """Validate the scan root and config file; shared by ``scan`` and ``validate-config``."""
    resolved_root = root.resolve()
    if not resolved_root.is_dir():
        return [
            ValidationError(
                code=CFG008,
                path=str(resolved_root),
                field="",
                message=f"root directory does not exist: {resolved_root}",
            )
        ]
    return sort_errors(validate_config_file(root, config_path, config_explicit=config_path is not None))


def evaluate_fail_thresholds(result: ScanResult, *, fail_on: str | None) -> int:
    """Return 1 if any finding is at or above ``fail_on`` severity, 0 otherwise."""
    if fail_on is None:
        return 0
    threshold = SEVERITY_RANK[fail_on]
    return 1 if any(SEVERITY_RANK[finding.severity] >= threshold for finding in result.findings) else 0


def handle_validate_config(args: argparse.Namespace) -> int:
    errors = preflight_validate(args.root, args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0
