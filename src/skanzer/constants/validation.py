"""Config validation codes and allowed key sets."""

from __future__ import annotations

CFG001: str = "CFG001"  # config file not found
CFG002: str = "CFG002"  # invalid YAML
CFG003: str = "CFG003"  # top level is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # wrong type
CFG006: str = "CFG006"  # value out of range
CFG007: str = "CFG007"  # unknown rule id
CFG008: str = "CFG008"  # scan root missing

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "allowlist_domains",
        "ignore_default_allowlist",
        "rules",
        "thresholds",
        "skill_globs",
        "max_file_mb",
        "max_workers",
        "fetch_retries",
    }
)

LIST_OF_STRINGS_KEYS: frozenset[str] = frozenset({"allowlist_domains", "skill_globs"})
POSITIVE_INT_KEYS: frozenset[str] = frozenset({"max_file_mb", "max_workers"})
