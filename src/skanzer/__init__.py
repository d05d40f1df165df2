"""Skanzer: static analysis for agent skill markdown files."""

from __future__ import annotations

from skanzer.engine import analyze
from skanzer.parsers import extract_name

__version__ = "0.1.0"

__all__ = ["__version__", "analyze", "extract_name"]
