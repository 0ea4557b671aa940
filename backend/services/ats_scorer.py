"""ATS compatibility scoring engine.

Pipeline:
1. Factor extraction (15 independent heuristics, 100 points in total)
2. Aggregation into a clamped raw score
3. Grading curve -> published ATS score
4. Report composition (ranked improvements, capped findings, summary)

The engine is a pure function of its text input: no I/O and no shared
mutable state. Given the same text and reference year it returns the same
report.
"""

from models.responses import AtsReport
from models.schemas.resume_text import ResumeText
from services.scoring.aggregator import aggregate
from services.scoring.composer import compose_report
from services.scoring.extractors import run_extractors
from services.scoring.grading import apply_grading_curve
from services.scoring.reporter import AnalysisReporter, LoggingReporter
from services.vocabulary import DEFAULT_VOCABULARY, ScoringVocabulary


def analyze(
    resume_text: str,
    vocabulary: ScoringVocabulary | None = None,
    reporter: AnalysisReporter | None = None,
    reference_year: int | None = None,
) -> AtsReport:
    """Score already-extracted resume text for ATS compatibility.

    reference_year defaults to the current calendar year and sets the latest
    date the chronology check accepts. Raises TypeError if resume_text is
    not a string.
    """
    vocabulary = vocabulary or DEFAULT_VOCABULARY
    reporter = reporter or LoggingReporter()

    resume = ResumeText.from_text(resume_text, reference_year)

    # --- Phase 1: Factor extraction ---
    results = run_extractors(resume, vocabulary)
    factors = [result.factor for result in results]
    reporter.phase("extract", factors=len(factors), word_count=resume.word_count)

    # --- Phase 2: Aggregation ---
    raw_score = aggregate(factors)
    reporter.phase("aggregate", raw_score=raw_score)

    # --- Phase 3: Grading curve ---
    ats_score = apply_grading_curve(raw_score)
    reporter.phase("grade", raw_score=raw_score, ats_score=ats_score)

    # --- Phase 4: Report ---
    report = compose_report(resume, results, raw_score, ats_score)
    reporter.phase(
        "compose",
        ats_score=report.ats_score,
        improvements=len(report.improvements),
        strengths=len(report.strengths),
    )
    return report
