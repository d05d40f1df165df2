"""Tests for whole-document structure detectors."""

from __future__ import annotations

from helpers import fenced
from skanzer.config import SkanzerConfig
from skanzer.detectors.structure import (
    CodeRatioDetector,
    MissingStructureDetector,
    ShellRatioDetector,
    code_ratio,
    shell_ratio,
)
from skanzer.model import FindingCandidate
from skanzer.parsers import parse_skill_markdown
from skanzer.types import ThresholdConfig


def _run(detector: MissingStructureDetector | CodeRatioDetector | ShellRatioDetector, content: str, **config: object):
    return detector.run(
        document=parse_skill_markdown(content),
        candidates=(),
        config=SkanzerConfig(**config),  # type: ignore[arg-type]
    )


def test_missing_structure_flags_bare_prose() -> None:
    findings = _run(MissingStructureDetector(), "just some text\nmore text\n")

    assert findings == [
        FindingCandidate(
            rule_id="STRUCTURE_MISSING",
            category="other",
            severity="medium",
            title="Missing skill structure",
            description=findings[0].description,
            confidence=0.7,
        )
    ]


def test_missing_structure_accepts_heading_or_frontmatter() -> None:
    assert _run(MissingStructureDetector(), "# Title\ntext\n") == []
    assert _run(MissingStructureDetector(), "---\nname: x\n---\ntext\n") == []


def test_structure_detectors_skip_empty_documents() -> None:
    for detector in (MissingStructureDetector(), CodeRatioDetector(), ShellRatioDetector()):
        assert _run(detector, "") == []
        assert _run(detector, "\n  \n") == []


def test_code_ratio_fires_above_threshold() -> None:
    content = fenced(*(f"echo step {index}" for index in range(12)))

    findings = _run(CodeRatioDetector(), content)

    assert len(findings) == 1
    assert findings[0].rule_id == "STRUCTURE_CODE_RATIO"
    assert findings[0].category == "malware"
    assert findings[0].confidence == 0.6
    assert findings[0].description.startswith("86% of non-empty lines are inside code blocks.")


def test_code_ratio_requires_enough_lines() -> None:
    content = fenced(*(f"echo step {index}" for index in range(7)))

    assert code_ratio(parse_skill_markdown(content)) > 0.7
    assert _run(CodeRatioDetector(), content) == []


def test_code_ratio_threshold_is_configurable() -> None:
    content = "Intro line.\n" + fenced(*(f"echo step {index}" for index in range(11)))

    assert _run(CodeRatioDetector(), content) == []
    assert _run(CodeRatioDetector(), content, thresholds=ThresholdConfig(code_ratio=0.5))


def test_code_ratio_excludes_fences_and_blank_lines() -> None:
    document = parse_skill_markdown("prose\n```\ncode\n\n```\n")

    assert document.code_line_count == 1
    assert code_ratio(document) == 1 / 4


def test_shell_ratio_fires_for_script_like_documents() -> None:
    content = "$ apt-get update\n$ make\n#!/bin/bash\nx=1\n&& echo done\n; rm tmp\n"

    findings = _run(ShellRatioDetector(), content)

    assert shell_ratio(parse_skill_markdown(content)) == 1.0
    assert len(findings) == 1
    assert findings[0].title == "Predominantly shell commands"
    assert findings[0].description.startswith("100% of lines look like bare shell commands")


def test_shell_ratio_requires_more_than_min_lines() -> None:
    content = "$ apt-get update\n$ make\n#!/bin/bash\nx=1\n&& echo done\n"

    assert _run(ShellRatioDetector(), content) == []


def test_shell_ratio_ignores_lines_inside_code_blocks() -> None:
    content = "# Title\n" + fenced("$ make", "x=1", "$ make install", "y=2", "$ run")

    assert shell_ratio(parse_skill_markdown(content)) == 0.0
    assert _run(ShellRatioDetector(), content) == []
