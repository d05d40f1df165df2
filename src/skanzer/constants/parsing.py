"""Markdown parsing constants."""

from __future__ import annotations

import re
from re import Pattern

FRONTMATTER_DELIMITER: str = "---"
FRONTMATTER_ALT_DELIMITER: str = "..."
FENCE_MARKER: str = "```"
BYTE_ORDER_MARK: str = "\ufeff"

HEADING_PATTERN: Pattern[str] = re.compile(r"^#{1,6}\s+(.+)$")
FRONTMATTER_NAME_PATTERN: Pattern[str] = re.compile(r"^name\s*:\s*(.+?)\s*$")

# Leading `$ ` prompt, shebang, bare assignment, or a chained command at line start.
SHELL_LINE_PATTERN: Pattern[str] = re.compile(r"^\s*(?:\$\s+|#!\s*/|[a-z_]+\s*=|&&|;\s*[a-z])")

SNIPPET_ELLIPSIS: str = "..."
