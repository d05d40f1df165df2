"""Skill file discovery and display-name derivation."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath

from skanzer.constants.discovery import MARKDOWN_SUFFIX, SKILL_MARKDOWN_FILENAME, SKILL_NAME_FALLBACK

logger = logging.getLogger(__name__)


def discover_skill_files(root: Path, skill_globs: tuple[str, ...], max_file_mb: int) -> list[str]:
    """Return root-relative POSIX paths of markdown files matching ``skill_globs``.

    Files over ``max_file_mb`` are skipped with a debug log. Output is sorted
    so scans are deterministic.
    """
    discovered: set[str] = set()
    size_limit_bytes = max_file_mb * 1024 * 1024
    resolved_root = root.resolve()

    for pattern in skill_globs:
        for path in resolved_root.glob(pattern):
            if not path.is_file() or path.suffix.lower() != MARKDOWN_SUFFIX:
                continue
            try:
                if path.stat().st_size > size_limit_bytes:
                    logger.debug("Skipping oversized file: %s", path)
                    continue
            except OSError:
                continue
            discovered.add(path.relative_to(resolved_root).as_posix())

    return sorted(discovered)


def derive_skill_name(path: str, *, declared_name: str | None = None) -> str:
    """Pick a display name: the declared name, else the skill folder, else the file stem."""
    if declared_name:
        return declared_name
    posix = PurePosixPath(path)
    if posix.name.lower() == SKILL_MARKDOWN_FILENAME.lower() and posix.parent.name:
        return posix.parent.name
    return posix.stem or SKILL_NAME_FALLBACK
