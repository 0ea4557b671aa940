"""Reduce independent factor scores into the raw composite score."""

from typing import Iterable

from models.schemas.factor import FactorScore
from services.scoring.base import round_half_up


def aggregate(factors: Iterable[FactorScore]) -> int:
    """Sum factor scores, clamp to 0-100 and round."""
    total = sum(f.score for f in factors)
    return round_half_up(max(0, min(100, total)))
