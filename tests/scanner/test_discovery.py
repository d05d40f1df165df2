"""Tests for skill file discovery and naming."""

from __future__ import annotations

from pathlib import Path

import pytest

from skanzer.scanner.discovery import derive_skill_name, discover_skill_files


def _touch(path: Path, content: str = "# Skill\n") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_discover_returns_sorted_relative_paths(tmp_path: Path) -> None:
    _touch(tmp_path / "b" / "SKILL.md")
    _touch(tmp_path / "a" / "nested" / "SKILL.md")
    _touch(tmp_path / "a" / "README.md")

    assert discover_skill_files(tmp_path, ("**/SKILL.md",), 2) == ["a/nested/SKILL.md", "b/SKILL.md"]


def test_discover_skips_oversized_files(tmp_path: Path) -> None:
    _touch(tmp_path / "big" / "SKILL.md", "x" * (1024 * 1024 + 1))
    _touch(tmp_path / "small" / "SKILL.md")

    assert discover_skill_files(tmp_path, ("**/SKILL.md",), 1) == ["small/SKILL.md"]


def test_discover_supports_custom_globs_and_skips_non_markdown(tmp_path: Path) -> None:
    _touch(tmp_path / "skills" / "deploy.md")
    _touch(tmp_path / "skills" / "deploy.txt")

    assert discover_skill_files(tmp_path, ("skills/*",), 2) == ["skills/deploy.md"]


def test_discover_deduplicates_overlapping_globs(tmp_path: Path) -> None:
    _touch(tmp_path / "x" / "SKILL.md")

    assert discover_skill_files(tmp_path, ("**/SKILL.md", "x/*.md"), 2) == ["x/SKILL.md"]


@pytest.mark.parametrize(
    ("path", "declared", "expected"),
    [
        ("skills/deploy/SKILL.md", "Deploy Helper", "Deploy Helper"),
        ("skills/deploy/SKILL.md", None, "deploy"),
        ("skills/deploy/skill.md", None, "deploy"),
        ("tools/build.md", None, "build"),
        ("SKILL.md", None, "SKILL"),
    ],
)
def test_derive_skill_name(path: str, declared: str | None, expected: str) -> None:
    assert derive_skill_name(path, declared_name=declared) == expected
