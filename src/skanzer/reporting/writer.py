"""Output writers for per-skill findings and summary JSON artifacts."""

from __future__ import annotations

import hashlib
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from skanzer.constants.discovery import SKILL_NAME_DISAMBIGUATION_HASH_LENGTH
from skanzer.constants.reporting import (
    FINDINGS_FILENAME,
    REPORT_TEMP_PREFIX,
    REPORT_TEMP_SUFFIX,
    SCHEMA_VERSION,
    SUMMARY_FILENAME,
)
from skanzer.io import write_json_atomic
from skanzer.model import SkillReport
from skanzer.scanner.score import category_counts, rule_counts, severity_counts, sorted_top_risks
from skanzer.utils import sanitize_output_name


def assign_output_names(reports: Sequence[SkillReport]) -> dict[str, str]:
    """Map each report's skill id to a unique output directory name.

    Skills sharing a sanitized name are suffixed with a short hash of their
    file path so directories stay one-to-one with files.
    """
    by_name: dict[str, list[SkillReport]] = {}
    for report in reports:
        by_name.setdefault(sanitize_output_name(report.skill.name), []).append(report)

    names: dict[str, str] = {}
    for base_name, group in by_name.items():
        for report in group:
            if len(group) == 1:
                names[report.skill.id] = base_name
                continue
            seed = (report.skill.file_path or report.skill.id).encode("utf-8")
            digest = hashlib.sha256(seed).hexdigest()[:SKILL_NAME_DISAMBIGUATION_HASH_LENGTH]
            names[report.skill.id] = f"{base_name}-{digest}"
    return names


def build_summary(report: SkillReport) -> dict[str, Any]:
    """Build a deterministic per-skill summary payload."""
    findings = list(report.findings)
    return {
        "schema_version": SCHEMA_VERSION,
        "skill": report.skill.name,
        "file_path": report.skill.file_path,
        "scan": report.scan.to_dict(),
        "risk_level": report.risk_level,
        "finding_count": len(findings),
        "counts_by_severity": severity_counts(findings),
        "counts_by_category": category_counts(findings),
        "counts_by_rule": rule_counts(findings),
        "top_risks": [
            {
                "rule_id": finding.rule_id,
                "title": finding.title,
                "severity": finding.severity,
                "confidence": finding.confidence,
                "line": finding.line_number,
                "snippet": finding.code_snippet,
            }
            for finding in sorted_top_risks(findings)
        ],
    }


def write_skill_reports(out_root: Path, output_name: str, report: SkillReport) -> dict[str, Any]:
    """Write findings and summary JSON for one skill and return the summary."""
    skill_dir = out_root / output_name
    skill_dir.mkdir(parents=True, exist_ok=True)

    write_json_atomic(
        path=skill_dir / FINDINGS_FILENAME,
        payload=[finding.to_dict() for finding in report.findings],
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )

    summary = build_summary(report)
    write_json_atomic(
        path=skill_dir / SUMMARY_FILENAME,
        payload=summary,
        temp_prefix=REPORT_TEMP_PREFIX,
        temp_suffix=REPORT_TEMP_SUFFIX,
    )
    return summary
