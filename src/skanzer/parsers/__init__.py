"""Markdown parsing for skill documents."""

from __future__ import annotations

from .skill_markdown import CodeFenceTracker, extract_name, parse_skill_markdown

__all__ = ["CodeFenceTracker", "extract_name", "parse_skill_markdown"]
