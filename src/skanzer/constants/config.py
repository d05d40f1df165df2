"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "skanzer.yaml"
DEFAULT_MAX_FILE_MB: int = 2
DEFAULT_SKILL_GLOBS: tuple[str, ...] = ("**/SKILL.md",)

# Bound on concurrent fetches; mirrors the batch size used by the hosted service.
DEFAULT_MAX_WORKERS: int = 10
DEFAULT_FETCH_RETRIES: int = 1
# Failed fetches are retried at most once before being reported.
MAX_FETCH_RETRIES: int = 1

DEFAULT_CODE_RATIO: float = 0.85
DEFAULT_CODE_RATIO_MIN_LINES: int = 10
DEFAULT_SHELL_RATIO: float = 0.65
DEFAULT_SHELL_RATIO_MIN_LINES: int = 5
DEFAULT_BLOB_MIN_LENGTH: int = 200
DEFAULT_HEX_ESCAPE_MIN: int = 10
DEFAULT_CHARCODE_MIN: int = 5
DEFAULT_VERDICT_CONFIDENCE_MIN: float = 0.85
DEFAULT_SNIPPET_MAX_LENGTH: int = 100

THRESHOLD_RATIO_KEYS: frozenset[str] = frozenset({"code_ratio", "shell_ratio", "verdict_confidence_min"})
THRESHOLD_COUNT_KEYS: frozenset[str] = frozenset(
    {
        "code_ratio_min_lines",
        "shell_ratio_min_lines",
        "blob_min_length",
        "hex_escape_min",
        "charcode_min",
        "snippet_max_length",
    }
)
