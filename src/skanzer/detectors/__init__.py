"""Detector package for Skanzer."""

from .aggregate import BehaviorMismatchDetector, OverallVerdictDetector
from .base import Detector, LineRule
from .line_rules import LINE_RULES
from .malware_rules import MALWARE_RULES
from .structure import STRUCTURE_DETECTORS, CodeRatioDetector, MissingStructureDetector, ShellRatioDetector

AGGREGATE_DETECTORS: tuple[Detector, ...] = (
    BehaviorMismatchDetector(),
    OverallVerdictDetector(),
)


def registered_rule_ids() -> tuple[str, ...]:
    """Return every rule id the engine can emit, in evaluation order."""
    return (
        *(detector.rule_id for detector in STRUCTURE_DETECTORS),
        *(rule.rule_id for rule in LINE_RULES),
        *(rule.rule_id for rule in MALWARE_RULES),
        *(detector.rule_id for detector in AGGREGATE_DETECTORS),
    )


__all__ = [
    "AGGREGATE_DETECTORS",
    "LINE_RULES",
    "MALWARE_RULES",
    "STRUCTURE_DETECTORS",
    "BehaviorMismatchDetector",
    "CodeRatioDetector",
    "Detector",
    "LineRule",
    "MissingStructureDetector",
    "OverallVerdictDetector",
    "ShellRatioDetector",
    "registered_rule_ids",
]
