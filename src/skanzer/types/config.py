"""Typed configuration structures for Skanzer scanner settings."""

from __future__ import annotations

from dataclasses import dataclass

from skanzer.constants.config import (
    DEFAULT_BLOB_MIN_LENGTH,
    DEFAULT_CHARCODE_MIN,
    DEFAULT_CODE_RATIO,
    DEFAULT_CODE_RATIO_MIN_LINES,
    DEFAULT_HEX_ESCAPE_MIN,
    DEFAULT_SHELL_RATIO,
    DEFAULT_SHELL_RATIO_MIN_LINES,
    DEFAULT_SNIPPET_MAX_LENGTH,
    DEFAULT_VERDICT_CONFIDENCE_MIN,
)


@dataclass(frozen=True)
class ThresholdConfig:
    """Heuristic cut-offs used by the structure, malware, and verdict phases."""

    code_ratio: float = DEFAULT_CODE_RATIO
    code_ratio_min_lines: int = DEFAULT_CODE_RATIO_MIN_LINES
    shell_ratio: float = DEFAULT_SHELL_RATIO
    shell_ratio_min_lines: int = DEFAULT_SHELL_RATIO_MIN_LINES
    blob_min_length: int = DEFAULT_BLOB_MIN_LENGTH
    hex_escape_min: int = DEFAULT_HEX_ESCAPE_MIN
    charcode_min: int = DEFAULT_CHARCODE_MIN
    verdict_confidence_min: float = DEFAULT_VERDICT_CONFIDENCE_MIN
    snippet_max_length: int = DEFAULT_SNIPPET_MAX_LENGTH
