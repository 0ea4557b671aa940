"""Registry of factor extractors and the points each one is worth.

Registry order is the order factors appear in the report. Extractors share
no state, so the order they run in has no effect on their results.
"""

from typing import NamedTuple

from models.schemas.factor import FactorResult
from models.schemas.resume_text import ResumeText
from services.scoring import content, parsability, structure
from services.scoring.base import FactorExtractor
from services.vocabulary import ScoringVocabulary


class RegisteredFactor(NamedTuple):
    name: str
    max_points: int
    extract: FactorExtractor


FACTOR_EXTRACTORS: tuple[RegisteredFactor, ...] = (
    # Parsability
    RegisteredFactor("ATS-Friendly Format", 5, parsability.score_format),
    RegisteredFactor("Text Readability", 5, parsability.score_readability),
    RegisteredFactor("Section Headers", 5, parsability.score_section_headers),
    RegisteredFactor("Format Consistency", 5, parsability.score_bullet_consistency),
    RegisteredFactor("Table-Free", 5, parsability.score_tables),
    # Content
    RegisteredFactor("Keyword Optimization", 10, content.score_keywords),
    RegisteredFactor("Action Verbs", 10, content.score_action_verbs),
    RegisteredFactor("Quantifiable Results", 10, content.score_achievements),
    RegisteredFactor("Professional Tone", 5, content.score_tone),
    RegisteredFactor("Buzzword Balance", 5, content.score_buzzwords),
    # Structure
    RegisteredFactor("Contact Information", 10, structure.score_contact),
    RegisteredFactor("Section Completeness", 10, structure.score_section_completeness),
    RegisteredFactor("Length Optimization", 5, structure.score_length),
    RegisteredFactor("Chronological Order", 5, structure.score_chronology),
    RegisteredFactor("File Optimization", 5, structure.score_file),
)

TOTAL_POINTS = 100

if sum(f.max_points for f in FACTOR_EXTRACTORS) != TOTAL_POINTS:
    raise RuntimeError("Factor max points must sum to 100")


def run_extractors(
    resume: ResumeText,
    vocabulary: ScoringVocabulary,
    factors: tuple[RegisteredFactor, ...] = FACTOR_EXTRACTORS,
) -> list[FactorResult]:
    """Run every extractor and return their results in registry order."""
    results = []
    for registered in factors:
        result = registered.extract(resume, vocabulary)
        if (result.factor.factor, result.factor.max) != (registered.name, registered.max_points):
            raise RuntimeError(
                f"Extractor {registered.extract.__name__} reported "
                f"{result.factor.factor}/{result.factor.max}, "
                f"registered as {registered.name}/{registered.max_points}"
            )
        results.append(result)
    return results
