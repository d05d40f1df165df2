"""Medium-confidence line rules: network, environment, file, permission, and destructive patterns."""

from __future__ import annotations

from skanzer.config import SkanzerConfig
from skanzer.constants.detectors import (
    DESTRUCTIVE_PATTERN,
    ENV_ACCESS_PATTERN,
    FILE_WRITE_PATTERN,
    LISTENER_PATTERN,
    NETWORK_CALL_PATTERN,
    NETWORK_SIGNAL_PATTERN,
    PERMISSION_CHANGE_PATTERN,
    PRIV_ESCALATION_PATTERN,
    SENSITIVE_WRITE_PATTERN,
    SETUID_CHMOD_PATTERN,
)
from skanzer.detectors.base import LineRule
from skanzer.detectors.common import extract_domain, extract_urls, is_allowlisted


def has_network_signal(line: str, config: SkanzerConfig) -> bool:
    return NETWORK_SIGNAL_PATTERN.search(line) is not None


def _unlisted_url_descriptions(line: str, config: SkanzerConfig) -> list[str]:
    allowlist = config.effective_allowlist_domains
    descriptions: list[str] = []
    for url in extract_urls(line):
        domain = extract_domain(url)
        if domain is not None and is_allowlisted(domain, allowlist):
            continue
        descriptions.append(f"URL detected: {url}")
    return descriptions


def _env_exfil(line: str, config: SkanzerConfig) -> bool:
    return ENV_ACCESS_PATTERN.search(line) is not None and has_network_signal(line, config)


def _env_read(line: str, config: SkanzerConfig) -> bool:
    return ENV_ACCESS_PATTERN.search(line) is not None and not has_network_signal(line, config)


def _privilege_escalation(line: str, config: SkanzerConfig) -> bool:
    return PRIV_ESCALATION_PATTERN.search(line) is not None or SETUID_CHMOD_PATTERN.search(line) is not None


def _permission_change(line: str, config: SkanzerConfig) -> bool:
    return PERMISSION_CHANGE_PATTERN.search(line) is not None and SETUID_CHMOD_PATTERN.search(line) is None


LINE_RULES: tuple[LineRule, ...] = (
    LineRule(
        rule_id="NET_URL",
        category="data_exfiltration",
        severity="medium",
        title="Network communication detected",
        description="URL detected",
        confidence=0.7,
        predicate=has_network_signal,
        expand=_unlisted_url_descriptions,
    ),
    LineRule(
        rule_id="NET_CALL",
        category="data_exfiltration",
        severity="medium",
        title="Network call detected",
        description="The skill contains network calls which could be used for data exfiltration.",
        confidence=0.9,
        predicate=lambda line, _config: NETWORK_CALL_PATTERN.search(line) is not None,
    ),
    LineRule(
        rule_id="ENV_ACCESS_EXFIL",
        category="data_exfiltration",
        severity="high",
        title="Environment variable exfiltration",
        description="Environment variables are read on the same line as a network call and may be sent off-host.",
        confidence=0.85,
        predicate=_env_exfil,
    ),
    LineRule(
        rule_id="ENV_ACCESS",
        category="data_exfiltration",
        severity="low",
        title="Environment variable access",
        description="Skill reads environment variables, which may contain sensitive information.",
        confidence=0.5,
        predicate=_env_read,
    ),
    LineRule(
        rule_id="FILE_WRITE",
        category="data_exfiltration",
        severity="high",
        title="File write operation",
        description="The skill writes to files which could be used to exfiltrate data.",
        confidence=0.7,
        predicate=lambda line, _config: FILE_WRITE_PATTERN.search(line) is not None,
    ),
    LineRule(
        rule_id="FILE_WRITE_SENSITIVE",
        category="data_exfiltration",
        severity="high",
        title="Potentially dangerous file operation",
        description="Skill performs file write to a sensitive system directory.",
        confidence=0.7,
        predicate=lambda line, _config: SENSITIVE_WRITE_PATTERN.search(line) is not None,
    ),
    LineRule(
        rule_id="PRIV_ESCALATION",
        category="privilege_escalation",
        severity="critical",
        title="Privilege escalation attempt",
        description="Skill uses commands that may elevate privileges.",
        confidence=0.95,
        predicate=_privilege_escalation,
    ),
    LineRule(
        rule_id="PERMISSION_CHANGE",
        category="privilege_escalation",
        severity="medium",
        title="Permission modification",
        description="The skill modifies file permissions or ownership.",
        confidence=0.6,
        predicate=_permission_change,
    ),
    LineRule(
        rule_id="DESTRUCTIVE_OP",
        category="behavior_mismatch",
        severity="critical",
        title="Destructive operation",
        description="The skill contains potentially destructive commands that may not match a typical skill description.",
        confidence=0.9,
        predicate=lambda line, _config: DESTRUCTIVE_PATTERN.search(line) is not None,
    ),
    LineRule(
        rule_id="NET_LISTENER",
        category="behavior_mismatch",
        severity="high",
        title="Network listener",
        description="The skill sets up network listeners which may indicate unexpected behavior.",
        confidence=0.9,
        predicate=lambda line, _config: LISTENER_PATTERN.search(line) is not None,
    ),
)
