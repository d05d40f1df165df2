"""Discovery and naming constants."""

from __future__ import annotations

SKILL_MARKDOWN_FILENAME: str = "SKILL.md"
SKILL_NAME_FALLBACK: str = "skill"
MARKDOWN_SUFFIX: str = ".md"
SKILL_NAME_DISAMBIGUATION_HASH_LENGTH: int = 8
