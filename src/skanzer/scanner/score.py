"""Risk levels and finding counts for reports and CI gating."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

from skanzer.constants.scoring import (
    CATEGORIES,
    MALWARE_CATEGORY,
    RISK_ORDER,
    SEVERITY_ORDER,
    SEVERITY_RANK,
    TOP_RISKS_DEFAULT_LIMIT,
)
from skanzer.model import Finding, SkillReport
from skanzer.types import Category, RiskLevel, Severity


def risk_level(findings: Sequence[Finding]) -> RiskLevel:
    """Map a skill's findings to a four-step risk level.

    No findings pass. Any critical or malware finding is high risk, any
    medium or high finding calls for caution, and lows alone are low risk.
    """
    if not findings:
        return "passed"
    if any(finding.severity == "critical" or finding.category == MALWARE_CATEGORY for finding in findings):
        return "high_risk"
    if any(finding.severity in ("high", "medium") for finding in findings):
        return "caution"
    return "low_risk"


def worst_risk_level(levels: Iterable[RiskLevel]) -> RiskLevel:
    """Return the most severe level in ``levels`` (``passed`` when empty)."""
    return min(levels, key=RISK_ORDER.__getitem__, default="passed")


def severity_counts(findings: Sequence[Finding]) -> dict[Severity, int]:
    """Count findings by severity with all four keys present."""
    counts = Counter(finding.severity for finding in findings)
    return {severity: int(counts.get(severity, 0)) for severity in SEVERITY_ORDER}  # type: ignore[misc]


def category_counts(findings: Sequence[Finding]) -> dict[Category, int]:
    counts = Counter(finding.category for finding in findings)
    return {category: int(counts.get(category, 0)) for category in CATEGORIES}  # type: ignore[misc]


def rule_counts(findings: Sequence[Finding]) -> dict[str, int]:
    counts = Counter(finding.rule_id for finding in findings)
    return {rule_id: int(count) for rule_id, count in sorted(counts.items())}


def sorted_top_risks(findings: Sequence[Finding], limit: int = TOP_RISKS_DEFAULT_LIMIT) -> list[Finding]:
    """Return the most severe findings, most confident first, ties broken by line."""
    return sorted(
        findings,
        key=lambda finding: (
            -SEVERITY_RANK[finding.severity],
            -finding.confidence,
            finding.line_number if finding.line_number is not None else 0,
            finding.rule_id,
        ),
    )[:limit]


def sort_reports_by_risk(reports: Iterable[SkillReport]) -> list[SkillReport]:
    """Order skill reports worst-first, then by finding count and path."""
    return sorted(
        reports,
        key=lambda report: (
            RISK_ORDER[report.risk_level],
            -len(report.findings),
            report.skill.file_path or report.skill.name,
        ),
    )
