"""Configuration-related exceptions."""

from __future__ import annotations

from skanzer.exceptions.base import SkanzerError


class ConfigError(SkanzerError, ValueError):
    """Raised when scanner configuration is invalid."""
