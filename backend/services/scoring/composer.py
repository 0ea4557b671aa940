"""Turn factor results into the user-facing report.

Template-based: improvements are ranked by priority, findings are capped
per category, and the narrative summary is assembled from fixed band
sentences plus the top strengths and the most important fix.
"""

from models.responses import AtsReport
from models.schemas.factor import FactorResult, FindingKind, ImprovementItem
from models.schemas.resume_text import ResumeText

MAX_IMPROVEMENTS = 10
MAX_STRENGTHS = 8
MAX_INSIGHTS = 5
MAX_WARNINGS = 3

# Metrics surfaced in the report, keyed by the extractor metric name
REPORT_METRICS = ("keyword_density", "achievement_count", "action_verb_count", "section_count")

# (minimum published score, insights), highest band first
_BAND_INSIGHTS: tuple[tuple[int, tuple[str, ...]], ...] = (
    (90, ("Will pass 95%+ of ATS systems", "Meets Fortune 500 company standards")),
    (80, ("Will pass 85%+ of ATS systems", "Strong candidate for most companies")),
    (70, ("Will pass 70%+ of ATS systems", "Some ATS systems may have issues")),
)

_SUMMARY_BANDS: tuple[tuple[int, str], ...] = (
    (95, "EXCEPTIONAL: Resume is ATS-optimized to professional standards. "
         "Will pass 98%+ of applicant tracking systems."),
    (90, "EXCELLENT: Highly optimized for ATS with strong structure and content. "
         "Expected to pass 95%+ of systems."),
    (85, "VERY STRONG: Well-optimized resume with minor areas for improvement. "
         "Should pass 90%+ of ATS filters."),
    (80, "STRONG: Good ATS compatibility with clear structure. "
         "Will pass 85%+ of systems with minor tweaks."),
    (75, "GOOD: Solid foundation with several optimization opportunities. "
         "Expected to pass 75%+ of ATS."),
    (70, "FAIR: Needs improvements in key areas for better ATS performance. "
         "May have issues with 30%+ of systems."),
)
_SUMMARY_FALLBACK = (
    "NEEDS WORK: Significant improvements required for ATS compatibility. "
    "High risk of rejection by tracking systems."
)


def rank_improvements(items: list[ImprovementItem]) -> list[ImprovementItem]:
    """High before medium before low; equal priorities keep detection order."""
    return sorted(items, key=lambda item: item.priority.rank, reverse=True)


def band_insights(ats_score: int) -> list[str]:
    for minimum, insights in _BAND_INSIGHTS:
        if ats_score >= minimum:
            return list(insights)
    return []


def build_summary(
    ats_score: int,
    strengths: list[str],
    ranked_improvements: list[ImprovementItem],
) -> str:
    parts = [_SUMMARY_FALLBACK]
    for minimum, sentence in _SUMMARY_BANDS:
        if ats_score >= minimum:
            parts = [sentence]
            break

    if strengths:
        parts.append(f"Strengths: {', '.join(strengths[:3])}.")
    if ranked_improvements:
        parts.append(f"Priority fix: {ranked_improvements[0].description}.")
    return " ".join(parts)


def compose_report(
    resume: ResumeText,
    results: list[FactorResult],
    raw_score: int,
    ats_score: int,
) -> AtsReport:
    findings: dict[FindingKind, list[str]] = {kind: [] for kind in FindingKind}
    improvements: list[ImprovementItem] = []
    collected_metrics: dict[str, int | float] = {}
    for result in results:
        for finding in result.findings:
            findings[finding.kind].append(finding.text)
        improvements.extend(result.improvements)
        collected_metrics.update(result.metrics)

    ranked = rank_improvements(improvements)
    strengths = findings[FindingKind.STRENGTH]
    insights = findings[FindingKind.INSIGHT] + band_insights(ats_score)

    metrics = {name: collected_metrics.get(name, 0) for name in REPORT_METRICS}
    metrics.update(
        word_count=resume.word_count,
        line_count=resume.line_count,
        char_count=resume.char_count,
    )
    section_count = int(collected_metrics.get("section_count", 0))

    return AtsReport(
        ats_score=ats_score,
        raw_score=raw_score,
        factors=[result.factor for result in results],
        improvements=ranked[:MAX_IMPROVEMENTS],
        strengths=strengths[:MAX_STRENGTHS],
        insights=insights[:MAX_INSIGHTS],
        warnings=findings[FindingKind.WARNING][:MAX_WARNINGS],
        summary=build_summary(ats_score, strengths, ranked),
        metrics=metrics,
        sections_found=section_count,
        word_count=resume.word_count,
    )
