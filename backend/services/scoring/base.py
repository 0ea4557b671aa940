"""Shared building blocks for the factor extractors."""

import math
import re
from typing import Callable, Iterable

from models.schemas.factor import (
    FactorResult,
    FactorScore,
    Finding,
    FindingKind,
    ImprovementItem,
    Priority,
)
from models.schemas.resume_text import ResumeText
from services.vocabulary import ScoringVocabulary

# Every extractor is a pure function of the resume and the vocabulary
FactorExtractor = Callable[[ResumeText, ScoringVocabulary], FactorResult]


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3)."""
    return math.floor(value + 0.5)


def word_pattern(term: str) -> re.Pattern:
    """Case-insensitive whole-word pattern for a vocabulary term."""
    return re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)


def find_terms(text: str, terms: Iterable[str]) -> list[str]:
    """Distinct vocabulary terms present in text as whole words, in vocabulary order."""
    return [term for term in terms if word_pattern(term).search(text)]


def strength(text: str) -> Finding:
    return Finding(kind=FindingKind.STRENGTH, text=text)


def warning(text: str) -> Finding:
    return Finding(kind=FindingKind.WARNING, text=text)


def insight(text: str) -> Finding:
    return Finding(kind=FindingKind.INSIGHT, text=text)


def improvement(field: str, description: str, priority: Priority) -> ImprovementItem:
    return ImprovementItem(field=field, description=description, priority=priority)


def factor_result(
    name: str,
    score: int,
    max_points: int,
    findings: Iterable[Finding] = (),
    improvements: Iterable[ImprovementItem] = (),
    metrics: dict[str, int | float] | None = None,
) -> FactorResult:
    return FactorResult(
        factor=FactorScore(factor=name, score=score, max=max_points),
        findings=tuple(findings),
        improvements=tuple(improvements),
        metrics=metrics or {},
    )
