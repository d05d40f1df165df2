"""Builders shared across test modules."""

from __future__ import annotations

from typing import Any

from skanzer.model import Finding

SKILL_HEADER = "---\nname: sample\ndescription: sample skill\n---\n# Sample\n\n"


def fenced(*lines: str, header: bool = False) -> str:
    """Wrap ``lines`` in a fenced code block, optionally behind frontmatter and a heading."""
    block = "\n".join(["```bash", *lines, "```"])
    return f"{SKILL_HEADER if header else ''}{block}\n"


def make_finding(**overrides: Any) -> Finding:
    """Build a minimal Finding."""
    defaults: dict[str, Any] = {
        "scan_id": "scan-1",
        "skill_id": "skill-1",
        "rule_id": "NET_CALL",
        "category": "data_exfiltration",
        "severity": "medium",
        "title": "Network call detected",
        "description": "desc",
        "confidence": 0.9,
        "line_number": 3,
        "code_snippet": "curl x",
    }
    defaults.update(overrides)
    return Finding(**defaults)
