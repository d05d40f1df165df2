"""Rule descriptors and detector interfaces for the analysis engine."""

from __future__ import annotations

import inspect
import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import ClassVar, TypeAlias

from skanzer.config import SkanzerConfig
from skanzer.model import FindingCandidate, ParsedSkillDocument
from skanzer.types import Category, LineContext, Severity

_RULE_ID_PATTERN: re.Pattern[str] = re.compile(r"^[A-Z][A-Z0-9_]+$")

LinePredicate: TypeAlias = Callable[[str, SkanzerConfig], bool]
LineExpander: TypeAlias = Callable[[str, SkanzerConfig], list[str]]


def _check_rule_id(owner: str, rule_id: object) -> None:
    if not isinstance(rule_id, str) or not _RULE_ID_PATTERN.match(rule_id):
        raise TypeError(f"{owner} rule_id must be UPPER_SNAKE_CASE (got {rule_id!r})")


@dataclass(frozen=True)
class LineRule:
    """Declarative per-line rule evaluated uniformly by the engine.

    ``predicate`` decides whether the line matches. When ``expand`` is set the
    rule emits one finding per description it returns instead of a single
    finding with the fixed ``description``.
    """

    rule_id: str
    category: Category
    severity: Severity
    title: str
    description: str
    confidence: float
    predicate: LinePredicate
    context: LineContext = "code"
    expand: LineExpander | None = None

    def __post_init__(self) -> None:
        _check_rule_id(f"LineRule {self.title!r}", self.rule_id)
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"{self.rule_id} confidence must be within [0, 1] (got {self.confidence})")

    def applies_to(self, in_code_block: bool) -> bool:
        return self.context == "any" or in_code_block

    def evaluate(self, line: str, config: SkanzerConfig) -> list[str]:
        """Return one description per hit on ``line``."""
        if not self.predicate(line, config):
            return []
        if self.expand is not None:
            return self.expand(line, config)
        return [self.description]


class Detector(ABC):
    """Abstract base class for whole-document detectors."""

    rule_id: ClassVar[str]

    def __init_subclass__(cls, **kwargs: object) -> None:
        """Validate detector subclasses define a valid UPPER_SNAKE_CASE `rule_id`."""
        super().__init_subclass__(**kwargs)
        if inspect.isabstract(cls):
            return
        _check_rule_id(cls.__name__, getattr(cls, "rule_id", None))

    @abstractmethod
    def run(
        self,
        *,
        document: ParsedSkillDocument,
        candidates: Sequence[FindingCandidate],
        config: SkanzerConfig,
    ) -> list[FindingCandidate]:
        """Run the detector over a parsed document and the findings collected so far."""
