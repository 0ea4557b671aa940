from pydantic import BaseModel, ConfigDict

from models.schemas.factor import FactorScore, ImprovementItem


class AtsReport(BaseModel):
    """Outcome of one ATS compatibility analysis."""
    model_config = ConfigDict(frozen=True)

    ats_score: int = 0
    raw_score: int = 0
    factors: list[FactorScore] = []
    improvements: list[ImprovementItem] = []
    strengths: list[str] = []
    insights: list[str] = []
    warnings: list[str] = []
    summary: str = ""
    metrics: dict[str, int | float] = {}
    analyzed_by: str = "ats_heuristic_engine"
    sections_found: int = 0
    word_count: int = 0


class AnalysisPayload(AtsReport):
    timestamp: str = ""


class AnalyzeResponse(BaseModel):
    success: bool = True
    analysis: AnalysisPayload


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
    message: str
