"""High-severity line rules for known malware techniques."""

from __future__ import annotations

from skanzer.config import SkanzerConfig
from skanzer.constants.detectors import (
    BASE64_DECODE_PATTERN,
    CREDENTIAL_FILE_PATTERN,
    CREDENTIAL_HELPER_PATTERN,
    DATA_URI_IMAGE_PATTERN,
    DOWNLOAD_COMMAND_PATTERN,
    DOWNLOAD_SUBSHELL_PATTERN,
    DYNAMIC_EVAL_PATTERN,
    EXECUTION_SIGNAL_PATTERN,
    INTERPRETER_VERSION_SUFFIX,
    MINER_PATTERN,
    PIPELINE_END_PATTERN,
    PIPE_INTERPRETERS,
    PIPE_STAGE_COMMAND_PATTERN,
    REVERSE_SHELL_PATTERN,
    SCHEDULER_PERSISTENCE_PATTERN,
    SECURITY_TAMPERING_PATTERN,
    SERVICE_PERSISTENCE_PATTERN,
    SHADOW_FILE_PATTERN,
    SHELL_PROFILE_WRITE_PATTERN,
    URL_PATTERN,
)
from skanzer.detectors.base import LineRule
from skanzer.detectors.common import base64_run_pattern, charcode_pattern, hex_escape_pattern
from skanzer.detectors.line_rules import has_network_signal


def _pipe_target_name(target: str) -> str:
    basename = target.rsplit("/", 1)[-1].lower()
    return INTERPRETER_VERSION_SUFFIX.sub("", basename)


def _pipes_into_interpreter(pipeline: str) -> bool:
    """True when any stage after the first of ``pipeline`` runs an interpreter."""
    for stage in pipeline.split("|")[1:]:
        match = PIPE_STAGE_COMMAND_PATTERN.match(stage)
        if match and _pipe_target_name(match.group("target")) in PIPE_INTERPRETERS:
            return True
    return False


def _is_dropper(line: str, config: SkanzerConfig) -> bool:
    if DOWNLOAD_SUBSHELL_PATTERN.search(line):
        return True
    for match in DOWNLOAD_COMMAND_PATTERN.finditer(line):
        pipeline = PIPELINE_END_PATTERN.split(line[match.end() :], maxsplit=1)[0]
        if _pipes_into_interpreter(pipeline):
            return True
    return False


def _is_encoded_exec(line: str, config: SkanzerConfig) -> bool:
    return BASE64_DECODE_PATTERN.search(line) is not None and EXECUTION_SIGNAL_PATTERN.search(line) is not None


def _is_encoded_blob(line: str, config: SkanzerConfig) -> bool:
    if URL_PATTERN.search(line) or DATA_URI_IMAGE_PATTERN.search(line):
        return False
    return base64_run_pattern(config.thresholds.blob_min_length).search(line) is not None


def _is_hex_payload(line: str, config: SkanzerConfig) -> bool:
    thresholds = config.thresholds
    return (
        hex_escape_pattern(thresholds.hex_escape_min).search(line) is not None
        or charcode_pattern(thresholds.charcode_min).search(line) is not None
    )


def _is_profile_write(line: str, config: SkanzerConfig) -> bool:
    return SHELL_PROFILE_WRITE_PATTERN.search(line) is not None


def _touches_credential_file(line: str) -> bool:
    return CREDENTIAL_FILE_PATTERN.search(line) is not None


def _credential_exfil(line: str, config: SkanzerConfig) -> bool:
    return _touches_credential_file(line) and has_network_signal(line, config)


def _credential_read(line: str, config: SkanzerConfig) -> bool:
    return _touches_credential_file(line) and not has_network_signal(line, config)


def _credential_helper(line: str, config: SkanzerConfig) -> bool:
    if SHADOW_FILE_PATTERN.search(line) or _touches_credential_file(line):
        return False
    return CREDENTIAL_HELPER_PATTERN.search(line) is not None


MALWARE_RULES: tuple[LineRule, ...] = (
    LineRule(
        rule_id="REVERSE_SHELL",
        category="malware",
        severity="critical",
        title="Reverse shell detected",
        description="This line contains a reverse shell pattern commonly used to establish unauthorized remote access.",
        confidence=0.95,
        predicate=lambda line, _config: REVERSE_SHELL_PATTERN.search(line) is not None,
    ),
    LineRule(
        rule_id="DROPPER",
        category="malware",
        severity="critical",
        title="Download-and-execute pattern",
        description=(
            "Downloads remote content and pipes it directly to an interpreter. "
            "This is a classic malware dropper technique."
        ),
        confidence=0.95,
        predicate=_is_dropper,
    ),
    LineRule(
        rule_id="ENCODED_EXEC",
        category="malware",
        severity="critical",
        title="Encoded payload execution",
        description=(
            "Base64 content is decoded and executed. "
            "This is a common obfuscation technique to hide malicious commands."
        ),
        confidence=0.9,
        predicate=_is_encoded_exec,
    ),
    LineRule(
        rule_id="DYNAMIC_EVAL",
        category="malware",
        severity="critical",
        title="Dynamic code execution",
        description="Uses eval() or exec() with constructed strings, a common technique to hide malicious intent.",
        confidence=0.85,
        predicate=lambda line, _config: DYNAMIC_EVAL_PATTERN.search(line) is not None,
    ),
    LineRule(
        rule_id="ENCODED_BLOB",
        category="malware",
        severity="medium",
        title="Embedded encoded blob",
        description="Contains a large base64-encoded string that may be an embedded binary or obfuscated payload.",
        confidence=0.6,
        predicate=_is_encoded_blob,
    ),
    LineRule(
        rule_id="HEX_PAYLOAD",
        category="malware",
        severity="high",
        title="Hex-encoded or charcode payload",
        description=(
            "Contains hex-encoded bytes or String.fromCharCode sequences "
            "commonly used to obfuscate malicious code."
        ),
        confidence=0.8,
        predicate=_is_hex_payload,
    ),
    LineRule(
        rule_id="CRYPTO_MINER",
        category="malware",
        severity="critical",
        title="Cryptocurrency mining detected",
        description="References mining software, protocols, or algorithms. This is not a legitimate skill function.",
        confidence=0.95,
        predicate=lambda line, _config: MINER_PATTERN.search(line) is not None,
    ),
    LineRule(
        rule_id="PERSIST_SCHEDULER",
        category="malware",
        severity="high",
        title="Persistence mechanism",
        description="Installs cron jobs or launchd agents so code survives reboots.",
        confidence=0.8,
        predicate=lambda line, _config: SCHEDULER_PERSISTENCE_PATTERN.search(line) is not None,
    ),
    LineRule(
        rule_id="PERSIST_SERVICE",
        category="behavior_mismatch",
        severity="medium",
        title="Service enablement",
        description="Enables or starts a systemd service. Common in deployment docs, unusual for a skill.",
        confidence=0.6,
        predicate=lambda line, _config: SERVICE_PERSISTENCE_PATTERN.search(line) is not None,
    ),
    LineRule(
        rule_id="PERSIST_SHELL_PROFILE",
        category="behavior_mismatch",
        severity="medium",
        title="Shell profile modification",
        description="Appends to or overwrites a shell startup file, which runs on every new shell.",
        confidence=0.65,
        predicate=_is_profile_write,
    ),
    LineRule(
        rule_id="CRED_SHADOW",
        category="malware",
        severity="critical",
        title="Shadow password file access",
        description="Reads the system shadow password database. Legitimate skills never need it.",
        confidence=0.95,
        predicate=lambda line, _config: SHADOW_FILE_PATTERN.search(line) is not None,
    ),
    LineRule(
        rule_id="CRED_EXFIL",
        category="malware",
        severity="critical",
        title="Credential exfiltration",
        description="Accesses credential files on the same line as a network call, which suggests they are sent off-host.",
        confidence=0.9,
        predicate=_credential_exfil,
    ),
    LineRule(
        rule_id="CRED_FILE",
        category="data_exfiltration",
        severity="high",
        title="Credential file access",
        description="Accesses known credential storage locations (SSH keys, cloud or package-manager credentials).",
        confidence=0.7,
        predicate=_credential_read,
    ),
    LineRule(
        rule_id="CRED_HELPER",
        category="data_exfiltration",
        severity="medium",
        title="Credential helper reference",
        description="Mentions a credential helper or keychain, which can expose stored secrets.",
        confidence=0.5,
        predicate=_credential_helper,
    ),
    LineRule(
        rule_id="SECURITY_TAMPERING",
        category="malware",
        severity="critical",
        title="Security tool tampering",
        description=(
            "Attempts to disable firewalls, SELinux, AppArmor, or security software. "
            "This is a hallmark of malware."
        ),
        confidence=0.95,
        predicate=lambda line, _config: SECURITY_TAMPERING_PATTERN.search(line) is not None,
    ),
)
