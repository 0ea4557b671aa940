"""Pydantic contracts shared by the scoring engine stages."""

from models.schemas.factor import (
    FactorResult,
    FactorScore,
    Finding,
    FindingKind,
    ImprovementItem,
    Priority,
)
from models.schemas.resume_text import ResumeText

__all__ = [
    "FactorResult",
    "FactorScore",
    "Finding",
    "FindingKind",
    "ImprovementItem",
    "Priority",
    "ResumeText",
]
