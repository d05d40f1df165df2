"""Post-hoc detectors that judge the findings collected for a whole document."""

from __future__ import annotations

from collections.abc import Sequence

from skanzer.config import SkanzerConfig
from skanzer.constants.scoring import (
    MALWARE_CATEGORY,
    MISSING_STRUCTURE_TITLE,
    SAFETY_CLAIM_PHRASES,
    VERDICT_STRUCTURED_CRITICAL_MIN,
    VERDICT_STRUCTURED_MALWARE_MIN,
    VERDICT_UNSTRUCTURED_CRITICAL_MIN,
)
from skanzer.detectors.base import Detector
from skanzer.model import FindingCandidate, ParsedSkillDocument


class BehaviorMismatchDetector(Detector):
    """Flag documents that claim to be safe while tripping any other rule."""

    rule_id = "BEHAVIOR_MISMATCH"

    def run(
        self,
        *,
        document: ParsedSkillDocument,
        candidates: Sequence[FindingCandidate],
        config: SkanzerConfig,
    ) -> list[FindingCandidate]:
        if not candidates:
            return []
        lowered = document.raw_text.lower()
        if not any(phrase in lowered for phrase in SAFETY_CLAIM_PHRASES):
            return []
        return [
            FindingCandidate(
                rule_id=self.rule_id,
                category="behavior_mismatch",
                severity="medium",
                title="Behavior vs description mismatch",
                description="Skill claims to be safe but contains potentially dangerous patterns.",
                confidence=0.6,
            )
        ]


class OverallVerdictDetector(Detector):
    """Escalate to a single malware verdict when critical findings pile up.

    An unstructured file needs two high-confidence criticals; a structured
    one needs three plus at least two malware-category findings. The first
    condition wins, so at most one verdict is emitted.
    """

    rule_id = "MALWARE_VERDICT"

    def run(
        self,
        *,
        document: ParsedSkillDocument,
        candidates: Sequence[FindingCandidate],
        config: SkanzerConfig,
    ) -> list[FindingCandidate]:
        min_confidence = config.thresholds.verdict_confidence_min
        critical_count = sum(
            1 for candidate in candidates if candidate.severity == "critical" and candidate.confidence >= min_confidence
        )
        malware_count = sum(1 for candidate in candidates if candidate.category == MALWARE_CATEGORY)
        has_structure = all(candidate.title != MISSING_STRUCTURE_TITLE for candidate in candidates)

        if not has_structure and critical_count >= VERDICT_UNSTRUCTURED_CRITICAL_MIN:
            return [
                FindingCandidate(
                    rule_id=self.rule_id,
                    category="malware",
                    severity="critical",
                    title="File appears to be malware, not a skill",
                    description=(
                        f"This file lacks skill structure and contains {critical_count} high-confidence critical "
                        f"findings including {malware_count} malware indicators. It is likely a malicious payload "
                        "disguised as a skill file."
                    ),
                    confidence=0.9,
                )
            ]
        if critical_count >= VERDICT_STRUCTURED_CRITICAL_MIN and malware_count >= VERDICT_STRUCTURED_MALWARE_MIN:
            return [
                FindingCandidate(
                    rule_id=self.rule_id,
                    category="malware",
                    severity="critical",
                    title="Skill file has malware characteristics",
                    description=(
                        f"Despite having some markdown structure, this file contains {critical_count} high-confidence "
                        f"critical findings and {malware_count} malware-category indicators. It may be a malicious "
                        "skill."
                    ),
                    confidence=0.8,
                )
            ]
        return []
