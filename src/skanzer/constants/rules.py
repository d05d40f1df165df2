"""Stable rule identifiers for every detection the engine can emit."""

from __future__ import annotations

STRUCTURE_RULE_IDS: tuple[str, ...] = (
    "STRUCTURE_MISSING",
    "STRUCTURE_CODE_RATIO",
    "STRUCTURE_SHELL_RATIO",
)

LINE_RULE_IDS: tuple[str, ...] = (
    "NET_URL",
    "NET_CALL",
    "ENV_ACCESS_EXFIL",
    "ENV_ACCESS",
    "FILE_WRITE",
    "FILE_WRITE_SENSITIVE",
    "PRIV_ESCALATION",
    "PERMISSION_CHANGE",
    "DESTRUCTIVE_OP",
    "NET_LISTENER",
)

MALWARE_RULE_IDS: tuple[str, ...] = (
    "REVERSE_SHELL",
    "DROPPER",
    "ENCODED_EXEC",
    "DYNAMIC_EVAL",
    "ENCODED_BLOB",
    "HEX_PAYLOAD",
    "CRYPTO_MINER",
    "PERSIST_SCHEDULER",
    "PERSIST_SERVICE",
    "PERSIST_SHELL_PROFILE",
    "CRED_SHADOW",
    "CRED_EXFIL",
    "CRED_FILE",
    "CRED_HELPER",
    "SECURITY_TAMPERING",
)

AGGREGATE_RULE_IDS: tuple[str, ...] = (
    "BEHAVIOR_MISMATCH",
    "MALWARE_VERDICT",
)

ALL_RULE_IDS: tuple[str, ...] = (
    *STRUCTURE_RULE_IDS,
    *LINE_RULE_IDS,
    *MALWARE_RULE_IDS,
    *AGGREGATE_RULE_IDS,
)
