"""Dataclasses shared by the engine, the scan pipeline, and reporters."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from skanzer.types import Category, RiskLevel, ScanStatus, Severity


@dataclass(frozen=True)
class DocumentLine:
    """One physical line of a skill document with its fenced-code state."""

    number: int
    text: str
    stripped: str
    in_code_block: bool
    is_fence: bool = False

    @property
    def is_blank(self) -> bool:
        return not self.stripped


@dataclass(frozen=True)
class ParsedSkillDocument:
    """A skill document split into classified lines plus structural facts."""

    raw_text: str
    lines: tuple[DocumentLine, ...]
    has_frontmatter: bool
    heading_count: int

    @property
    def non_blank_lines(self) -> tuple[DocumentLine, ...]:
        return tuple(line for line in self.lines if not line.is_blank)

    @property
    def code_line_count(self) -> int:
        """Non-blank lines inside fenced code blocks, fence markers excluded."""
        return sum(1 for line in self.lines if line.in_code_block and not line.is_fence and not line.is_blank)


@dataclass(frozen=True)
class FindingCandidate:
    """A finding produced by a rule, before scan and skill identity are attached."""

    rule_id: str
    category: Category
    severity: Severity
    title: str
    description: str
    confidence: float
    line_number: int | None = None
    code_snippet: str | None = None

    def to_finding(self, *, skill_id: Any, scan_id: Any) -> Finding:
        return Finding(
            scan_id=scan_id,
            skill_id=skill_id,
            rule_id=self.rule_id,
            category=self.category,
            severity=self.severity,
            title=self.title,
            description=self.description,
            confidence=self.confidence,
            line_number=self.line_number,
            code_snippet=self.code_snippet,
        )


@dataclass(frozen=True)
class Finding:
    """One detected issue attached to a scan of a skill."""

    scan_id: Any
    skill_id: Any
    rule_id: str
    category: Category
    severity: Severity
    title: str
    description: str
    confidence: float
    line_number: int | None = None
    code_snippet: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted finding row shape."""
        return {
            "scan_id": self.scan_id,
            "skill_id": self.skill_id,
            "rule_id": self.rule_id,
            "category": self.category,
            "severity": self.severity,
            "title": self.title,
            "description": self.description,
            "line_number": self.line_number,
            "code_snippet": self.code_snippet,
            "confidence": self.confidence,
        }


@dataclass(frozen=True)
class SkillRecord:
    """A stored skill document."""

    id: str
    name: str
    content: str
    file_path: str | None = None
    description: str | None = None


@dataclass(frozen=True)
class ScanRecord:
    """Lifecycle state of one analysis run over one skill."""

    id: str
    skill_id: str
    status: ScanStatus
    started_at: datetime
    completed_at: datetime | None = None
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "skill_id": self.skill_id,
            "status": self.status,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "error_message": self.error_message,
        }


@dataclass(frozen=True)
class FetchResult:
    """Outcome of retrieving one file: content on success, error text on failure."""

    path: str
    content: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.content is not None


@dataclass(frozen=True)
class SkillReport:
    """A skill, its scan, and the findings persisted for that scan."""

    skill: SkillRecord
    scan: ScanRecord
    findings: tuple[Finding, ...]
    risk_level: RiskLevel


@dataclass(frozen=True)
class BatchResult:
    """Per-file reports from a batch plus the paths that could not be fetched."""

    reports: tuple[SkillReport, ...]
    failed_paths: tuple[str, ...] = ()
    fetch_attempts: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class ScanResult:
    """Top-level result for a workspace scan."""

    scanned_files: int
    total_findings: int
    risk_level: RiskLevel
    counts_by_severity: dict[Severity, int]
    counts_by_category: dict[Category, int]
    reports: tuple[SkillReport, ...]
    duration_seconds: float
    warnings: tuple[str, ...] = ()

    @property
    def findings(self) -> tuple[Finding, ...]:
        return tuple(finding for report in self.reports for finding in report.findings)

    @property
    def failed_scans(self) -> tuple[SkillReport, ...]:
        return tuple(report for report in self.reports if report.scan.status == "failed")
