"""Constants for severity ordering, verdict aggregation, and risk levels."""

from __future__ import annotations

SEVERITY_RANK: dict[str, int] = {"low": 0, "medium": 1, "high": 2, "critical": 3}
SEVERITY_ORDER: tuple[str, ...] = ("critical", "high", "medium", "low")

CATEGORIES: tuple[str, ...] = (
    "malware",
    "data_exfiltration",
    "privilege_escalation",
    "behavior_mismatch",
    "other",
)

MALWARE_CATEGORY: str = "malware"
MISSING_STRUCTURE_TITLE: str = "Missing skill structure"

# Verdict: unstructured file with this many high-confidence criticals is malware.
VERDICT_UNSTRUCTURED_CRITICAL_MIN: int = 2
# Verdict: structured file needs both counts to earn "malware characteristics".
VERDICT_STRUCTURED_CRITICAL_MIN: int = 3
VERDICT_STRUCTURED_MALWARE_MIN: int = 2

SAFETY_CLAIM_PHRASES: tuple[str, ...] = ("safe", "harmless", "no risk")

RISK_ORDER: dict[str, int] = {"high_risk": 0, "caution": 1, "low_risk": 2, "passed": 3}
TOP_RISKS_DEFAULT_LIMIT: int = 5
