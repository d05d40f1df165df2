"""Root exception type for Skanzer."""

from __future__ import annotations


class SkanzerError(Exception):
    """Base class for all errors raised deliberately by Skanzer."""
