"""Constants for report file names, atomic writing, and stdout formatting."""

from __future__ import annotations

FINDINGS_FILENAME: str = "findings.json"
SUMMARY_FILENAME: str = "summary.json"
CSV_FINDINGS_FILENAME: str = "findings.csv"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"json", "csv"})
DEFAULT_OUTPUT_FORMAT: str = "json"

CSV_COLUMNS: tuple[str, ...] = (
    "skill",
    "path",
    "scan_id",
    "rule_id",
    "category",
    "severity",
    "confidence",
    "line",
    "title",
    "description",
    "snippet",
)

# ANSI escape codes for terminal colouring.
ANSI_RESET: str = "\033[0m"
ANSI_RED: str = "\033[31;1m"
ANSI_MAGENTA: str = "\033[35;1m"
ANSI_YELLOW: str = "\033[33;1m"
ANSI_GREEN: str = "\033[32;1m"

SEVERITY_COLORS: dict[str, str] = {
    "critical": ANSI_MAGENTA,
    "high": ANSI_RED,
    "medium": ANSI_YELLOW,
    "low": ANSI_GREEN,
}

RISK_COLORS: dict[str, str] = {
    "high_risk": ANSI_RED,
    "caution": ANSI_YELLOW,
    "low_risk": ANSI_GREEN,
    "passed": ANSI_GREEN,
}

RISK_LABELS: dict[str, str] = {
    "high_risk": "HIGH RISK",
    "caution": "CAUTION",
    "low_risk": "LOW RISK",
    "passed": "PASSED",
}
