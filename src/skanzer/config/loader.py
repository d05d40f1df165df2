"""Config loading and normalization for Skanzer scans."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from skanzer.config.model import SkanzerConfig
from skanzer.config.validator import validate_config_payload
from skanzer.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_FETCH_RETRIES,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_MAX_WORKERS,
    DEFAULT_SKILL_GLOBS,
)
from skanzer.exceptions import ConfigError
from skanzer.exceptions.validation import format_errors
from skanzer.types import ThresholdConfig


def load_config(root: Path, config_path: Path | None = None) -> SkanzerConfig:
    """Load and validate scanner config from ``skanzer.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkanzerConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    errors = validate_config_payload(raw, str(path))
    if errors:
        raise ConfigError(format_errors(errors))

    return config_from_mapping(raw or {})


def config_from_mapping(raw: dict[str, Any]) -> SkanzerConfig:
    """Build a config from a mapping that has already passed validation."""
    thresholds_raw = raw.get("thresholds") or {}
    return SkanzerConfig(
        thresholds=ThresholdConfig(**thresholds_raw),
        allowlist_domains=_normalize_domains(raw.get("allowlist_domains") or []),
        ignore_default_allowlist=raw.get("ignore_default_allowlist", False),
        rules=dict(raw.get("rules") or {}),
        skill_globs=tuple(raw.get("skill_globs") or DEFAULT_SKILL_GLOBS),
        max_file_mb=raw.get("max_file_mb", DEFAULT_MAX_FILE_MB),
        max_workers=raw.get("max_workers", DEFAULT_MAX_WORKERS),
        fetch_retries=raw.get("fetch_retries", DEFAULT_FETCH_RETRIES),
    )


def _normalize_domains(domains: list[str]) -> tuple[str, ...]:
    """Lowercase, strip, deduplicate and sort a list of domain strings."""
    normalized = [domain.strip().lower() for domain in domains if domain.strip()]
    return tuple(sorted(set(normalized)))
