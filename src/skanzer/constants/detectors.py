"""Detector-specific regex tables and keyword sets."""

from __future__ import annotations

import re
from re import Pattern

URL_PATTERN: Pattern[str] = re.compile(r"https?://[^\s)>\"'`\]]+", re.IGNORECASE)
DATA_URI_IMAGE_PATTERN: Pattern[str] = re.compile(r"data:image/", re.IGNORECASE)

# Anything on a line that actually moves bytes over the network.
NETWORK_SIGNAL_PATTERN: Pattern[str] = re.compile(
    r"\b(?:curl|wget)\b"
    r"|\bfetch\s*\("
    r"|\baxios\."
    r"|\brequests\.(?:get|post|put|patch|delete|head|request)\b"
    r"|\burllib\b"
    r"|\bhttpx\."
    r"|\bhttps?\.(?:get|request)\b"
    r"|\bInvoke-(?:WebRequest|RestMethod)\b"
    r"|\b(?:nc|ncat|netcat)\s",
    re.IGNORECASE,
)

NETWORK_CALL_PATTERN: Pattern[str] = re.compile(r"fetch\(|axios\.|\bcurl\s+|\bwget\s+", re.IGNORECASE)

# Shell `$VAR` references are matched case-sensitively so lowercase shell locals stay quiet.
ENV_ACCESS_PATTERN: Pattern[str] = re.compile(
    r"(?i:process\.env|os\.getenv|\bgetenv\s*\(|os\.environ|System\.getenv)"
    r"|\bENV\["
    r"|\$\{?[A-Z_][A-Z0-9_]+\b"
)

FILE_WRITE_PATTERN: Pattern[str] = re.compile(
    r"writeFile"
    r"|\bopen\s*\([^)]*['\"][wa]b?\+?['\"]"
    r"|(?<![-=<>&0-9])>>?\s*(?:/(?!dev/null\b)[A-Za-z]|~/)",
    re.IGNORECASE,
)

SENSITIVE_WRITE_PATTERN: Pattern[str] = re.compile(
    r"\b(?:write|create|copy|move|mv|cp|tee)\b.*(?:/etc/|/root/|/home/[^/\s]+/|/var/|/usr/)",
    re.IGNORECASE,
)

SETUID_CHMOD_PATTERN: Pattern[str] = re.compile(
    r"\bchmod\s+(?:-\w+\s+)*(?:[ugoa]*\+[rwxXt]*s|[2467][0-7]{3}\b)",
    re.IGNORECASE,
)

PRIV_ESCALATION_PATTERN: Pattern[str] = re.compile(
    r"\bsudo\s+|\bsu\s+-|\bsetuid\b|\bsetgid\b|\bpkexec\b|\bdoas\s+",
    re.IGNORECASE,
)

PERMISSION_CHANGE_PATTERN: Pattern[str] = re.compile(r"\b(?:chmod|chown)\s+", re.IGNORECASE)

DESTRUCTIVE_PATTERN: Pattern[str] = re.compile(
    r"\brm\s+-[a-z]*(?:rf|fr)[a-z]*\b"
    r"|\brm\s+--recursive\s+--force\b"
    r"|\bdd\s+if="
    r"|\bmkfs(?:\.\w+)?\b"
    r"|\bformat\s+[a-z]:",
    re.IGNORECASE,
)

LISTENER_PATTERN: Pattern[str] = re.compile(
    r"\b(?:nc|ncat|netcat)\s+-[a-z]*[el]|\bsocat\s+",
    re.IGNORECASE,
)

REVERSE_SHELL_PATTERN: Pattern[str] = re.compile(
    r"/dev/(?:tcp|udp)/"
    r"|\bbash\s+-i\s+>&?\s*/dev/"
    r"|\bpython[23]?\s+-c\s+.*import\s+socket"
    r"|\bperl\s+-e\s+.*socket"
    r"|\bruby\s+-rsocket"
    r"|\bphp\s+-r\s+.*fsockopen"
    r"|\bmkfifo\b.*\b(?:nc|ncat|netcat)\b"
    r"|\b(?:nc|ncat|netcat)\b.*\s-e\s+/bin/(?:ba)?sh\b"
    r"|System\.Net\.Sockets\.TCPClient",
    re.IGNORECASE,
)

DOWNLOAD_COMMAND_PATTERN: Pattern[str] = re.compile(r"\b(?:curl|wget)\b", re.IGNORECASE)

# A pipeline ends at a command separator; only `|` joins its stages.
PIPELINE_END_PATTERN: Pattern[str] = re.compile(r"\|\||&&|;")
PIPE_STAGE_COMMAND_PATTERN: Pattern[str] = re.compile(
    r"^\s*(?:sudo\s+(?:-\S+\s+)*)?(?:env\s+(?:\w+=\S*\s+)*)?(?P<target>[\w./+-]+)",
    re.IGNORECASE,
)

DOWNLOAD_SUBSHELL_PATTERN: Pattern[str] = re.compile(
    r"\b(?:ba|z|da)?sh\s+(?:-c\s+)?[\"']?\$\(\s*(?:curl|wget)\b"
    r"|\b(?:ba|z)?sh\s+<\(\s*(?:curl|wget)\b"
    r"|\beval\s+[\"']?(?:\$\(|`)\s*(?:curl|wget)\b"
    r"|\b(?:iex|Invoke-Expression)\b.*\b(?:iwr|Invoke-WebRequest|DownloadString)\b",
    re.IGNORECASE,
)

PIPE_INTERPRETERS: frozenset[str] = frozenset(
    {
        "sh",
        "bash",
        "zsh",
        "dash",
        "ksh",
        "fish",
        "python",
        "perl",
        "ruby",
        "node",
        "php",
        "pwsh",
        "powershell",
        "iex",
    }
)

INTERPRETER_VERSION_SUFFIX: Pattern[str] = re.compile(r"[\d.]+$")

BASE64_DECODE_PATTERN: Pattern[str] = re.compile(
    r"\bbase64\s+(?:-d|-D|--decode)\b"
    r"|b64decode"
    r"|\batob\s*\("
    r"|Buffer\.from\s*\([^)]*,\s*['\"]base64['\"]\s*\)"
    r"|FromBase64String",
    re.IGNORECASE,
)

EXECUTION_SIGNAL_PATTERN: Pattern[str] = re.compile(
    r"\|\s*(?:ba|z)?sh\b|\beval\b|\bexec\b|\bpython|\bpowershell\b|\biex\b|Invoke-Expression",
    re.IGNORECASE,
)

# `eval(`/`exec(` fed a literal, template, variable, or decoder; method calls like `re.exec(` are excluded.
DYNAMIC_EVAL_PATTERN: Pattern[str] = re.compile(
    r"(?<![.\w])(?:eval|exec)\s*\(\s*"
    r"(?:[\"'`$]|atob\b|Buffer\b|String\.fromCharCode|base64|b64decode|[A-Za-z_]\w*\s*[)+])",
    re.IGNORECASE,
)

MINER_PATTERN: Pattern[str] = re.compile(
    r"stratum\+(?:tcp|ssl|tls)://"
    r"|\b(?:xmrig|minerd|cgminer|bfgminer|cpuminer|ethminer|nbminer)\b"
    r"|\b(?:cryptonight|randomx|ethash|kawpow)\b",
    re.IGNORECASE,
)

SCHEDULER_PERSISTENCE_PATTERN: Pattern[str] = re.compile(
    r"\bcrontab\s+|/etc/cron|\blaunchctl\s+load\b|\bschtasks\s+/create\b",
    re.IGNORECASE,
)

SERVICE_PERSISTENCE_PATTERN: Pattern[str] = re.compile(
    r"\bsystemctl\s+(?:--\S+\s+)*(?:enable|start)\b",
    re.IGNORECASE,
)

_PROFILE_FILES = r"\.(?:bashrc|bash_profile|bash_login|zshrc|zprofile|profile)\b"

SHELL_PROFILE_WRITE_PATTERN: Pattern[str] = re.compile(
    r"(?:>>?|\btee\b(?:\s+-a|\s+--append)?)\s*[\"']?[~${}\w/.-]*" + _PROFILE_FILES
    + r"|\b(?:appendFile|writeFile)\w*\s*\([^)]*" + _PROFILE_FILES
    + r"|\bopen\s*\([^)]*" + _PROFILE_FILES + r"[^)]*['\"][aw]",
    re.IGNORECASE,
)

SHADOW_FILE_PATTERN: Pattern[str] = re.compile(r"/etc/g?shadow\b", re.IGNORECASE)

CREDENTIAL_FILE_PATTERN: Pattern[str] = re.compile(
    r"/etc/passwd\b"
    r"|\.ssh/(?:id_[a-z0-9]+|authorized_keys)"
    r"|\.aws/credentials"
    r"|\.config/gcloud"
    r"|\.azure/"
    r"|\.kube/config"
    r"|\.npmrc\b"
    r"|\.pypirc\b"
    r"|\.netrc\b"
    r"|\.docker/config\.json"
    r"|\.git-credentials",
    re.IGNORECASE,
)

CREDENTIAL_HELPER_PATTERN: Pattern[str] = re.compile(
    r"credential[._-]helper|\bkeychain\b|\bsecurity\s+find-(?:generic|internet)-password\b",
    re.IGNORECASE,
)

_SECURITY_PROCESSES = r"(?:antivirus|defender|clamd|falcon|crowdstrike|sentinel|osquery)"

SECURITY_TAMPERING_PATTERN: Pattern[str] = re.compile(
    r"\bufw\s+disable\b"
    r"|\bsetenforce\s+0\b"
    r"|\biptables\s+-F\b"
    r"|\bsystemctl\s+(?:stop|disable|mask)\s+(?:firewalld|apparmor|selinux|auditd|ufw)\b"
    r"|\b(?:kill|killall|pkill)\b.*" + _SECURITY_PROCESSES
    + r"|\bSet-MpPreference\b.*-Disable\w+"
    r"|\baa-teardown\b",
    re.IGNORECASE,
)
