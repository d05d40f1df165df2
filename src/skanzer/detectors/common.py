"""Shared helpers for detector implementations."""

from __future__ import annotations

import re
from functools import lru_cache
from urllib.parse import urlparse

from skanzer.constants.detectors import URL_PATTERN
from skanzer.constants.domains import ALLOWLISTED_HOST_PREFIXES
from skanzer.constants.parsing import SNIPPET_ELLIPSIS

# Characters commonly appended by markdown syntax that are not valid URL endings.
_TRAILING_PUNCT_RE = re.compile(r"[)`*.,;:!?\]]+$")


def make_snippet(line: str, max_length: int) -> str:
    """Trim a line and cap it at ``max_length`` characters plus an ellipsis."""
    trimmed = line.strip()
    if len(trimmed) > max_length:
        return trimmed[:max_length] + SNIPPET_ELLIPSIS
    return trimmed


def normalize_url(url: str) -> str:
    """Strip trailing markdown punctuation from an extracted URL."""
    return _TRAILING_PUNCT_RE.sub("", url)


def extract_urls(line: str) -> list[str]:
    return [normalize_url(url) for url in URL_PATTERN.findall(line)]


def extract_domain(url: str) -> str | None:
    """Extract and normalize hostname from a URL string."""
    try:
        host = urlparse(normalize_url(url)).hostname
    except ValueError:
        return None
    if not host:
        return None
    return host.lower().strip()


def is_allowlisted(domain: str, allowlist: tuple[str, ...]) -> bool:
    """Return True when a domain, one of its parents, or a docs host prefix is allowlisted."""
    if domain.startswith(ALLOWLISTED_HOST_PREFIXES):
        return True
    return any(domain == allowed or domain.endswith(f".{allowed}") for allowed in allowlist)


@lru_cache(maxsize=32)
def base64_run_pattern(min_length: int) -> re.Pattern[str]:
    return re.compile(rf"[A-Za-z0-9+/]{{{min_length},}}={{0,2}}")


@lru_cache(maxsize=32)
def hex_escape_pattern(min_count: int) -> re.Pattern[str]:
    return re.compile(rf"(?:\\x[0-9a-fA-F]{{2}}){{{min_count},}}")


@lru_cache(maxsize=32)
def charcode_pattern(min_codes: int) -> re.Pattern[str]:
    extra = max(min_codes - 1, 0)
    return re.compile(rf"String\.fromCharCode\s*\(\s*\d+\s*(?:,\s*\d+\s*){{{extra},}}\)")
