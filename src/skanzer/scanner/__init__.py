"""Scanner orchestration package."""

from __future__ import annotations

from typing import Any

__all__ = ["InMemoryScanStore", "LocalFileSource", "scan_batch", "scan_workspace"]


def __getattr__(name: str) -> Any:
    """Lazily expose scanner APIs; the batch scanner imports the engine."""
    if name == "scan_workspace":
        from .orchestrator import scan_workspace

        return scan_workspace
    if name == "scan_batch":
        from .batch import scan_batch

        return scan_batch
    if name == "InMemoryScanStore":
        from .store import InMemoryScanStore

        return InMemoryScanStore
    if name == "LocalFileSource":
        from .sources import LocalFileSource

        return LocalFileSource
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
