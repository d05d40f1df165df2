"""Content analysis engine: turns one skill document into an ordered list of findings."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from skanzer.config import SkanzerConfig
from skanzer.detectors import AGGREGATE_DETECTORS, LINE_RULES, MALWARE_RULES, STRUCTURE_DETECTORS
from skanzer.detectors.base import Detector, LineRule
from skanzer.detectors.common import make_snippet
from skanzer.model import Finding, FindingCandidate, ParsedSkillDocument
from skanzer.parsers import parse_skill_markdown

logger = logging.getLogger(__name__)


@dataclass
class AnalysisContext:
    """Per-call state: the classified lines and the findings collected so far."""

    document: ParsedSkillDocument
    config: SkanzerConfig
    candidates: list[FindingCandidate] = field(default_factory=list)

    def run_detectors(self, detectors: Sequence[Detector]) -> None:
        for detector in detectors:
            if not self.config.is_rule_enabled(detector.rule_id):
                continue
            self.candidates.extend(
                detector.run(document=self.document, candidates=tuple(self.candidates), config=self.config)
            )

    def run_line_rules(self, rules: Sequence[LineRule]) -> None:
        """Apply ``rules`` to every scannable line, in line order."""
        active = [rule for rule in rules if self.config.is_rule_enabled(rule.rule_id)]
        snippet_max_length = self.config.thresholds.snippet_max_length
        for line in self.document.lines:
            if line.is_fence or line.is_blank:
                continue
            for rule in active:
                if not rule.applies_to(line.in_code_block):
                    continue
                for description in rule.evaluate(line.text, self.config):
                    self.candidates.append(
                        FindingCandidate(
                            rule_id=rule.rule_id,
                            category=rule.category,
                            severity=rule.severity,
                            title=rule.title,
                            description=description,
                            confidence=rule.confidence,
                            line_number=line.number,
                            code_snippet=make_snippet(line.text, snippet_max_length),
                        )
                    )


def analyze(
    content: str,
    skill_id: Any,
    scan_id: Any,
    *,
    config: SkanzerConfig | None = None,
) -> list[Finding]:
    """Analyze one skill document and return its findings in phase order.

    Structure findings come first, then line-rule findings in line order, then
    malware-rule findings in line order, then the mismatch and verdict
    aggregates. The call has no side effects and is safe to run concurrently.
    """
    if not isinstance(content, str):
        raise TypeError(f"content must be str, got {type(content).__name__}")

    context = AnalysisContext(document=parse_skill_markdown(content), config=config or SkanzerConfig())
    context.run_detectors(STRUCTURE_DETECTORS)
    context.run_line_rules(LINE_RULES)
    context.run_line_rules(MALWARE_RULES)
    context.run_detectors(AGGREGATE_DETECTORS)

    logger.debug(
        "Analyzed skill %s: %d lines, %d findings", skill_id, len(context.document.lines), len(context.candidates)
    )
    return [candidate.to_finding(skill_id=skill_id, scan_id=scan_id) for candidate in context.candidates]
