"""Config data model for Skanzer scans."""

from __future__ import annotations

from dataclasses import dataclass, field

from skanzer.constants.config import (
    DEFAULT_FETCH_RETRIES,
    DEFAULT_MAX_FILE_MB,
    DEFAULT_MAX_WORKERS,
    DEFAULT_SKILL_GLOBS,
)
from skanzer.constants.domains import DEFAULT_ALLOWLISTED_DOMAINS
from skanzer.types import ThresholdConfig


def _merge_domains(*domain_sets: tuple[str, ...]) -> tuple[str, ...]:
    """Merge and sort multiple domain tuples into a single deduplicated tuple."""
    merged: set[str] = set()
    for domains in domain_sets:
        merged.update(domains)
    return tuple(sorted(merged))


@dataclass(frozen=True)
class SkanzerConfig:
    """Resolved scanner config.

    ``rules`` maps a rule id to its enabled flag; ids not present are enabled.
    """

    thresholds: ThresholdConfig = ThresholdConfig()
    allowlist_domains: tuple[str, ...] = ()
    ignore_default_allowlist: bool = False
    rules: dict[str, bool] = field(default_factory=dict)
    skill_globs: tuple[str, ...] = DEFAULT_SKILL_GLOBS
    max_file_mb: int = DEFAULT_MAX_FILE_MB
    max_workers: int = DEFAULT_MAX_WORKERS
    fetch_retries: int = DEFAULT_FETCH_RETRIES

    @property
    def effective_allowlist_domains(self) -> tuple[str, ...]:
        """Domain allowlist used by detectors after applying defaults."""
        if self.ignore_default_allowlist:
            return self.allowlist_domains
        return _merge_domains(DEFAULT_ALLOWLISTED_DOMAINS, self.allowlist_domains)

    @property
    def disabled_rules(self) -> tuple[str, ...]:
        return tuple(sorted(rule_id for rule_id, enabled in self.rules.items() if not enabled))

    def is_rule_enabled(self, rule_id: str) -> bool:
        return self.rules.get(rule_id, True)
