"""String normalization for report directory names."""

from __future__ import annotations

from skanzer.constants.discovery import SKILL_NAME_FALLBACK
from skanzer.constants.naming import COLLAPSE_DASH_PATTERN, NON_OUTPUT_NAME_PATTERN


def sanitize_output_name(raw_name: str) -> str:
    """Lowercase a skill name and reduce it to ``[a-z0-9._-]`` for use as a path segment."""
    normalized = NON_OUTPUT_NAME_PATTERN.sub("-", raw_name.strip().lower())
    normalized = COLLAPSE_DASH_PATTERN.sub("-", normalized).strip("-._")
    return normalized or SKILL_NAME_FALLBACK
