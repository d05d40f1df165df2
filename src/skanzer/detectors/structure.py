"""Whole-document structure checks: does this look like a skill or a payload?"""

from __future__ import annotations

from collections.abc import Sequence

from skanzer.config import SkanzerConfig
from skanzer.constants.parsing import SHELL_LINE_PATTERN
from skanzer.constants.scoring import MISSING_STRUCTURE_TITLE
from skanzer.detectors.base import Detector
from skanzer.model import FindingCandidate, ParsedSkillDocument


def code_ratio(document: ParsedSkillDocument) -> float:
    """Share of non-blank lines that sit inside fenced code blocks."""
    total = len(document.non_blank_lines)
    return document.code_line_count / total if total else 0.0


def shell_ratio(document: ParsedSkillDocument) -> float:
    """Share of non-blank lines that look like bare shell commands outside code blocks."""
    total = len(document.non_blank_lines)
    if not total:
        return 0.0
    shell_lines = sum(
        1
        for line in document.lines
        if not line.in_code_block and not line.is_blank and SHELL_LINE_PATTERN.match(line.text)
    )
    return shell_lines / total


class MissingStructureDetector(Detector):
    """Flag documents with neither YAML frontmatter nor markdown headings."""

    rule_id = "STRUCTURE_MISSING"

    def run(
        self,
        *,
        document: ParsedSkillDocument,
        candidates: Sequence[FindingCandidate],
        config: SkanzerConfig,
    ) -> list[FindingCandidate]:
        if not document.non_blank_lines or document.has_frontmatter or document.heading_count:
            return []
        return [
            FindingCandidate(
                rule_id=self.rule_id,
                category="other",
                severity="medium",
                title=MISSING_STRUCTURE_TITLE,
                description=(
                    "File has no YAML frontmatter and no markdown headings. Legitimate skills use "
                    "frontmatter (---) with name/description fields and markdown structure."
                ),
                confidence=0.7,
            )
        ]


class CodeRatioDetector(Detector):
    """Flag documents that are mostly fenced code with little prose."""

    rule_id = "STRUCTURE_CODE_RATIO"

    def run(
        self,
        *,
        document: ParsedSkillDocument,
        candidates: Sequence[FindingCandidate],
        config: SkanzerConfig,
    ) -> list[FindingCandidate]:
        thresholds = config.thresholds
        ratio = code_ratio(document)
        if len(document.non_blank_lines) <= thresholds.code_ratio_min_lines or ratio <= thresholds.code_ratio:
            return []
        return [
            FindingCandidate(
                rule_id=self.rule_id,
                category="malware",
                severity="medium",
                title="Unusually high code-to-prose ratio",
                description=(
                    f"{round(ratio * 100)}% of non-empty lines are inside code blocks. Skills should be "
                    "mostly natural-language instructions, not executable payloads."
                ),
                confidence=0.6,
            )
        ]


class ShellRatioDetector(Detector):
    """Flag documents that read like a shell script rather than instructions."""

    rule_id = "STRUCTURE_SHELL_RATIO"

    def run(
        self,
        *,
        document: ParsedSkillDocument,
        candidates: Sequence[FindingCandidate],
        config: SkanzerConfig,
    ) -> list[FindingCandidate]:
        thresholds = config.thresholds
        ratio = shell_ratio(document)
        if len(document.non_blank_lines) <= thresholds.shell_ratio_min_lines or ratio <= thresholds.shell_ratio:
            return []
        return [
            FindingCandidate(
                rule_id=self.rule_id,
                category="malware",
                severity="medium",
                title="Predominantly shell commands",
                description=(
                    f"{round(ratio * 100)}% of lines look like bare shell commands outside code blocks. "
                    "This resembles a shell script, not a skill file."
                ),
                confidence=0.65,
            )
        ]


STRUCTURE_DETECTORS: tuple[Detector, ...] = (
    MissingStructureDetector(),
    CodeRatioDetector(),
    ShellRatioDetector(),
)
