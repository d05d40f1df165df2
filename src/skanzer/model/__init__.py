"""Core data models for Skanzer."""

from .entities import (
    BatchResult,
    DocumentLine,
    FetchResult,
    Finding,
    FindingCandidate,
    ParsedSkillDocument,
    ScanRecord,
    ScanResult,
    SkillRecord,
    SkillReport,
)

__all__ = [
    "BatchResult",
    "DocumentLine",
    "FetchResult",
    "Finding",
    "FindingCandidate",
    "ParsedSkillDocument",
    "ScanRecord",
    "ScanResult",
    "SkillRecord",
    "SkillReport",
]
