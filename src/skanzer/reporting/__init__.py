"""Reporting package for Skanzer outputs."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS: dict[str, str] = {
    "assign_output_names": ".writer",
    "build_summary": ".writer",
    "write_skill_reports": ".writer",
    "render_csv_string": ".csv_writer",
    "write_csv_findings": ".csv_writer",
    "StdoutReporter": ".stdout",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> Any:
    """Resolve reporting APIs on first access; the writers import the scanner package."""
    module_name = _EXPORTS.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module_name, __name__), name)
