"""Configuration loading, validation, and normalization for Skanzer scans."""

from __future__ import annotations

from skanzer.config.loader import load_config
from skanzer.config.model import SkanzerConfig
from skanzer.config.validator import validate_config_file, validate_config_payload

__all__ = [
    "SkanzerConfig",
    "load_config",
    "validate_config_file",
    "validate_config_payload",
]
