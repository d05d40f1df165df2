"""File sources: where skill documents are fetched from."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Protocol, runtime_checkable

from skanzer.constants.config import DEFAULT_MAX_FILE_MB, DEFAULT_MAX_WORKERS
from skanzer.exceptions import FetchError
from skanzer.model import FetchResult

logger = logging.getLogger(__name__)


@runtime_checkable
class FileSource(Protocol):
    """Anything that can return the text of a skill file by path."""

    def fetch(self, path: str) -> str:
        """Return file content, raising ``FetchError`` when it cannot be read."""
        ...


class LocalFileSource:
    """Read skill files from a directory on the local filesystem."""

    def __init__(self, root: Path, *, max_file_mb: int = DEFAULT_MAX_FILE_MB) -> None:
        self.root = root.resolve()
        self.max_bytes = max_file_mb * 1024 * 1024

    def fetch(self, path: str) -> str:
        target = (self.root / path).resolve()
        if not target.is_relative_to(self.root):
            raise FetchError(path, "path escapes the source root")
        try:
            if target.stat().st_size > self.max_bytes:
                raise FetchError(path, f"file exceeds {self.max_bytes} bytes")
            return target.read_text(encoding="utf-8")
        except FileNotFoundError as exc:
            raise FetchError(path, "file not found") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise FetchError(path, str(exc)) from exc


def _fetch_one(source: FileSource, path: str) -> FetchResult:
    try:
        return FetchResult(path=path, content=source.fetch(path))
    except FetchError as exc:
        return FetchResult(path=path, error=str(exc))


def fetch_all(source: FileSource, paths: Sequence[str], *, max_workers: int = DEFAULT_MAX_WORKERS) -> list[FetchResult]:
    """Fetch ``paths`` concurrently and return one result per path, in input order.

    A failing path yields a result with ``error`` set; it never aborts the others.
    """
    if not paths:
        return []
    with ThreadPoolExecutor(max_workers=max(1, min(max_workers, len(paths)))) as pool:
        results = list(pool.map(lambda path: _fetch_one(source, path), paths))
    for result in results:
        if not result.ok:
            logger.debug("Fetch failed for %s: %s", result.path, result.error)
    return results
