"""Shared exception hierarchy for Skanzer."""

from __future__ import annotations

from .base import SkanzerError
from .config import ConfigError
from .io import FetchError, PersistenceError

__all__ = [
    "ConfigError",
    "FetchError",
    "PersistenceError",
    "SkanzerError",
]
