"""End-to-end workspace scan: discover, batch-scan, summarize, and write reports."""

from __future__ import annotations

import logging
import time
from dataclasses import replace
from pathlib import Path

from skanzer.config import load_config
from skanzer.constants.reporting import VALID_OUTPUT_FORMATS
from skanzer.exceptions import ConfigError
from skanzer.model import ScanResult, SkillReport
from skanzer.scanner.batch import scan_batch
from skanzer.scanner.discovery import discover_skill_files
from skanzer.scanner.score import category_counts, severity_counts, sort_reports_by_risk, worst_risk_level
from skanzer.scanner.sources import LocalFileSource
from skanzer.scanner.store import InMemoryScanStore, ScanStore

logger = logging.getLogger(__name__)


def scan_workspace(
    *,
    root: Path,
    out: Path | None = None,
    config_path: Path | None = None,
    max_file_mb: int | None = None,
    max_workers: int | None = None,
    output_formats: tuple[str, ...] = ("json",),
    store: ScanStore | None = None,
) -> ScanResult:
    """Scan every skill file under ``root`` and optionally write reports to ``out``."""
    invalid_formats = set(output_formats) - VALID_OUTPUT_FORMATS
    if invalid_formats:
        raise ConfigError(
            f"Unknown output format(s): {', '.join(sorted(invalid_formats))}. "
            f"Valid formats: {', '.join(sorted(VALID_OUTPUT_FORMATS))}"
        )

    started_at = time.perf_counter()
    root = root.resolve()
    if not root.is_dir():
        raise ConfigError(f"Scan root does not exist or is not a directory: {root}")

    if out is not None:
        out = out.resolve()
        try:
            out.mkdir(parents=True, exist_ok=True)
            probe = out / ".skanzer_write_probe"
            probe.touch()
            probe.unlink()
        except OSError as exc:
            raise ConfigError(f"Output directory is not writable: {out} ({exc})") from exc

    config = load_config(root, config_path)
    if max_file_mb is not None:
        config = replace(config, max_file_mb=max_file_mb)
    if max_workers is not None:
        config = replace(config, max_workers=max_workers)

    paths = discover_skill_files(root, config.skill_globs, config.max_file_mb)
    logger.info("Discovered %d skill file(s) under %s", len(paths), root)

    batch = scan_batch(
        paths,
        source=LocalFileSource(root, max_file_mb=config.max_file_mb),
        store=store or InMemoryScanStore(),
        config=config,
    )
    warnings = [
        f"Scan failed for {report.skill.file_path}: {report.scan.error_message}"
        for report in batch.reports
        if report.scan.status == "failed"
    ]

    reports = tuple(sort_reports_by_risk(batch.reports))
    if out is not None:
        _write_outputs(out, reports, output_formats)

    all_findings = [finding for report in reports for finding in report.findings]
    return ScanResult(
        scanned_files=len(paths),
        total_findings=len(all_findings),
        risk_level=worst_risk_level(report.risk_level for report in reports),
        counts_by_severity=severity_counts(all_findings),
        counts_by_category=category_counts(all_findings),
        reports=reports,
        duration_seconds=time.perf_counter() - started_at,
        warnings=tuple(warnings),
    )


def _write_outputs(out: Path, reports: tuple[SkillReport, ...], output_formats: tuple[str, ...]) -> None:
    from skanzer.reporting.writer import assign_output_names, write_skill_reports

    if "json" in output_formats:
        output_names = assign_output_names(reports)
        for report in reports:
            write_skill_reports(out, output_names[report.skill.id], report)

    if "csv" in output_formats:
        from skanzer.reporting.csv_writer import write_csv_findings

        write_csv_findings(out, reports)
