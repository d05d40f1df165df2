"""Line classification and name extraction for skill markdown documents."""

from __future__ import annotations

from typing import Any

import yaml

from skanzer.constants.parsing import (
    BYTE_ORDER_MARK,
    FENCE_MARKER,
    FRONTMATTER_ALT_DELIMITER,
    FRONTMATTER_DELIMITER,
    FRONTMATTER_NAME_PATTERN,
    HEADING_PATTERN,
)
from skanzer.model import DocumentLine, ParsedSkillDocument


class CodeFenceTracker:
    """Two-state (prose/code) machine driven by triple-backtick lines.

    Fences are not nested and never skipped: an unmatched opening fence keeps
    the tracker in the code state for the rest of the document.
    """

    def __init__(self) -> None:
        self.in_code_block = False

    @staticmethod
    def is_fence(line: str) -> bool:
        return line.strip().startswith(FENCE_MARKER)

    def feed(self, line: str) -> bool:
        """Advance over one line and return True when it was a fence marker."""
        if self.is_fence(line):
            self.in_code_block = not self.in_code_block
            return True
        return False


def parse_skill_markdown(content: str) -> ParsedSkillDocument:
    """Split a skill document into classified lines and structural facts."""
    raw_lines = content.split("\n")
    tracker = CodeFenceTracker()
    lines: list[DocumentLine] = []
    heading_count = 0

    for index, text in enumerate(raw_lines, start=1):
        if tracker.feed(text):
            # The closing fence belongs to the block it closes.
            lines.append(DocumentLine(index, text, text.strip(), in_code_block=True, is_fence=True))
            continue
        stripped = text.strip()
        if not tracker.in_code_block and HEADING_PATTERN.match(stripped):
            heading_count += 1
        lines.append(DocumentLine(index, text, stripped, in_code_block=tracker.in_code_block))

    return ParsedSkillDocument(
        raw_text=content,
        lines=tuple(lines),
        has_frontmatter=_frontmatter_end(raw_lines) is not None,
        heading_count=heading_count,
    )


def extract_name(content: str) -> str | None:
    """Return a display name from frontmatter ``name:`` or the first heading."""
    lines = content.split("\n")
    end = _frontmatter_end(lines)
    if end is not None:
        name = _frontmatter_name(lines[1:end])
        if name:
            return name

    tracker = CodeFenceTracker()
    for line in lines[end + 1 if end is not None else 0 :]:
        if tracker.feed(line) or tracker.in_code_block:
            continue
        match = HEADING_PATTERN.match(line.strip())
        if match:
            heading = match.group(1).strip().rstrip("#").strip()
            if heading:
                return heading
    return None


def _frontmatter_end(lines: list[str]) -> int | None:
    """Index of the closing frontmatter delimiter, or None when there is no block."""
    if not lines or lines[0].lstrip(BYTE_ORDER_MARK).strip() != FRONTMATTER_DELIMITER:
        return None
    for index in range(1, len(lines)):
        if lines[index].strip() in {FRONTMATTER_DELIMITER, FRONTMATTER_ALT_DELIMITER}:
            return index
    return None


def _frontmatter_name(block: list[str]) -> str | None:
    try:
        payload: Any = yaml.safe_load("\n".join(block))
    except yaml.YAMLError:
        payload = None

    if isinstance(payload, dict):
        value = payload.get("name")
        if isinstance(value, bool) or not isinstance(value, (str, int, float)):
            return None
        name = str(value).strip()
        return name or None

    # Malformed YAML: fall back to a plain `name:` line.
    for line in block:
        match = FRONTMATTER_NAME_PATTERN.match(line.strip())
        if match:
            name = match.group(1).strip().strip("\"'").strip()
            return name or None
    return None
