"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "SKANZER"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ SKANZER",
    "     // malware checks for agent skills",
)
SCAN_SUMMARY_TITLE: str = "Scan summary"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", f"{BRAND_NAME} skill scanner"))
