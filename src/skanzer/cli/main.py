"""CLI entrypoint for the Skanzer scanner."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from skanzer import __version__
from skanzer.cli.handlers import evaluate_fail_thresholds, handle_validate_config, preflight_validate
from skanzer.constants.branding import CLI_DESCRIPTION
from skanzer.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS
from skanzer.constants.scoring import SEVERITY_ORDER
from skanzer.exceptions import ConfigError, SkanzerError
from skanzer.exceptions.validation import format_errors
from skanzer.reporting.stdout import StdoutReporter
from skanzer.scanner import scan_workspace


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="skanzer",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    scan = subparsers.add_parser("scan", help="Scan a workspace for malicious skill patterns")
    scan.add_argument("-r", "--root", type=Path, required=True, help="Workspace root path")
    scan.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory root (no files written if omitted)",
    )
    scan.add_argument("-c", "--config", type=Path, help="Explicit config file")
    scan.add_argument(
        "--output-format",
        default=DEFAULT_OUTPUT_FORMAT,
        help="Comma-separated output formats: json, csv (default: json)",
    )
    scan.add_argument(
        "--fail-on",
        choices=list(reversed(SEVERITY_ORDER)),
        default=None,
        help="Exit with code 1 when any finding is at or above this severity",
    )
    scan.add_argument("--max-file-mb", type=int, help="Skip skill files larger than this size")
    scan.add_argument("--max-workers", type=int, help="Concurrent file fetches (default from config)")
    scan.add_argument("--no-stdout", action="store_true", help="Silence stdout output")
    scan.add_argument("--no-color", action="store_true", help="Disable colored output")
    scan.add_argument("-v", "--verbose", action="store_true", help="List every finding and enable debug logs")

    validate = subparsers.add_parser("validate-config", help="Validate configuration without scanning")
    validate.add_argument("-r", "--root", type=Path, required=True, help="Workspace root path")
    validate.add_argument("-c", "--config", type=Path, help="Explicit config file")

    return parser


def _parse_output_formats(raw: str) -> tuple[str, ...] | str:
    """Return the parsed formats, or an error message for malformed input."""
    raw_tokens = raw.split(",")
    output_formats = tuple(fmt for fmt in (token.strip() for token in raw_tokens) if fmt)
    if not output_formats or len(output_formats) != len(raw_tokens):
        return "--output-format contains empty or malformed tokens"
    invalid_formats = set(output_formats) - VALID_OUTPUT_FORMATS
    if invalid_formats:
        return (
            f"unknown output format(s): {', '.join(sorted(invalid_formats))}. "
            f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}"
        )
    return output_formats


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    verbose = getattr(args, "verbose", False)
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return handle_validate_config(args)

    if args.command != "scan":
        parser.error(f"Unsupported command: {args.command}")

    output_formats = _parse_output_formats(args.output_format)
    if isinstance(output_formats, str):
        print(f"Configuration error: {output_formats}", file=sys.stderr)
        return 2

    for flag, value in (("--max-file-mb", args.max_file_mb), ("--max-workers", args.max_workers)):
        if value is not None and value < 1:
            print(f"Configuration error: {flag} must be a positive integer", file=sys.stderr)
            return 2

    validation_errors = preflight_validate(args.root, args.config)
    if validation_errors:
        print(format_errors(validation_errors), file=sys.stderr)
        return 2

    try:
        result = scan_workspace(
            root=args.root,
            out=args.output_dir,
            config_path=args.config,
            max_file_mb=args.max_file_mb,
            max_workers=args.max_workers,
            output_formats=output_formats,
        )
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SkanzerError as exc:
        print(f"Scanner error: {exc}", file=sys.stderr)
        return 1

    exit_code = evaluate_fail_thresholds(result, fail_on=args.fail_on)

    if not args.no_stdout:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = StdoutReporter(
            result,
            color=use_color,
            verbose=args.verbose,
            fail_on=args.fail_on,
            exit_code=exit_code,
        )
        print(reporter.render())

    return exit_code


if __name__ == "__main__":
    raise SystemExit(main())
