"""Per-factor outputs: scores, findings and improvement suggestions."""

from enum import Enum
from functools import total_ordering

from pydantic import BaseModel, ConfigDict, model_validator


@total_ordering
class Priority(Enum):
    """Improvement priority, ordered LOW < MEDIUM < HIGH."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.rank < other.rank


_PRIORITY_RANK = {Priority.HIGH: 3, Priority.MEDIUM: 2, Priority.LOW: 1}


class FindingKind(str, Enum):
    STRENGTH = "strength"
    WARNING = "warning"
    INSIGHT = "insight"


class FactorScore(BaseModel):
    """Points earned on one scored dimension."""
    model_config = ConfigDict(frozen=True)

    factor: str
    score: int
    max: int

    @model_validator(mode="after")
    def _check_bounds(self) -> "FactorScore":
        if not 0 <= self.score <= self.max:
            raise ValueError(
                f"{self.factor}: score {self.score} outside 0..{self.max}"
            )
        return self


class Finding(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: FindingKind
    text: str


class ImprovementItem(BaseModel):
    """An actionable suggestion tied to one area of the resume."""
    model_config = ConfigDict(frozen=True)

    field: str
    description: str
    priority: Priority


class FactorResult(BaseModel):
    """Everything a single factor extractor reports."""
    model_config = ConfigDict(frozen=True)

    factor: FactorScore
    findings: tuple[Finding, ...] = ()
    improvements: tuple[ImprovementItem, ...] = ()
    metrics: dict[str, int | float] = {}
