"""Structure factors: contact details, sections, length and ordering."""

import re
from models.schemas.factor import FactorResult, Priority
from models.schemas.resume_text import ResumeText
from services.scoring.base import (
    factor_result,
    find_terms,
    improvement,
    round_half_up,
    strength,
)
from services.vocabulary import ScoringVocabulary

# Contact info patterns
EMAIL_RE = re.compile(r"(?<![a-zA-Z0-9._%+-])[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
PHONE_RE = re.compile(r"(?:\+\d{1,3}[-. ]?)?\(?\d{3}\)?[-. ]?\d{3}[-. ]?\d{4}")
LINKEDIN_RE = re.compile(r"linkedin\.com/(?:in|pub)/", re.IGNORECASE)
# Last word of the city is enough: "San Francisco, CA" matches at "Francisco, CA"
LOCATION_RE = re.compile(r"\b[A-Z][a-z]+,[ \t]*[A-Z]{2}\b")
PORTFOLIO_RE = re.compile(r"github\.com|gitlab\.com|behance\.net|portfolio|\.com/~", re.IGNORECASE)

# (pattern, points, label used in the "Add ..." suggestion)
_REQUIRED_CONTACT: tuple[tuple[re.Pattern, int, str], ...] = (
    (EMAIL_RE, 3, "professional email"),
    (PHONE_RE, 3, "phone number"),
    (LINKEDIN_RE, 2, "LinkedIn profile"),
    (LOCATION_RE, 1, "location/city"),
)

# Missing one of these is a high-priority gap
_CORE_SECTIONS = frozenset({"experience", "skills"})

_MONTHS = r"(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)"
DATE_TOKEN_RE = re.compile(
    rf"\b{_MONTHS}[a-z]*\.?\s+\d{{4}}"
    r"|\d{4}\s*[-–]\s*\d{4}"
    r"|\d{1,2}/\d{4}",
    re.IGNORECASE,
)
_YEAR_RE = re.compile(r"\d{4}")


def score_contact(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    score = 0
    improvements = []
    for pattern, points, label in _REQUIRED_CONTACT:
        if pattern.search(resume.text):
            score += points
        else:
            improvements.append(improvement("Contact Info", f"Add {label}", Priority.HIGH))

    # Portfolio/code host is a bonus point; absence is not penalised
    if PORTFOLIO_RE.search(resume.text):
        score += 1

    findings = [strength("Complete contact information")] if score >= 9 else []
    return factor_result(
        "Contact Information", score, 10,
        findings=findings,
        improvements=improvements,
    )


def score_section_completeness(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    found = find_terms(resume.text, vocabulary.required_sections)
    improvements = [
        improvement(
            "Structure",
            f'Add "{section.capitalize()}" section',
            Priority.HIGH if section in _CORE_SECTIONS else Priority.MEDIUM,
        )
        for section in vocabulary.required_sections
        if section not in found
    ]
    return factor_result(
        "Section Completeness", round_half_up(min(len(found) * 1.67, 10)), 10,
        improvements=improvements,
        metrics={"sections_present": len(found)},
    )


def assess_length(word_count: int) -> tuple[int, bool, str]:
    """Return (score, optimal, suggestion) for a resume of word_count words."""
    if 400 <= word_count <= 800:
        return 5, True, "Optimal length for ATS"
    if 300 <= word_count <= 1000:
        if word_count < 400:
            return 3, False, "Consider adding more detail"
        return 3, False, "Consider being more concise"
    if word_count < 300:
        return 1, False, "Too short - add more experience details"
    return 1, False, "Too long - condense to 2 pages maximum"


def score_length(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    score, optimal, suggestion = assess_length(resume.word_count)
    if optimal:
        return factor_result(
            "Length Optimization", score, 5,
            findings=[strength("Optimal resume length")],
        )
    return factor_result(
        "Length Optimization", score, 5,
        improvements=[improvement("Length", suggestion, Priority.MEDIUM)],
    )


def extract_years(text: str, current_year: int) -> list[int]:
    """Years of each date-like token, in document order, limited to plausible values."""
    latest = current_year + 1
    years = []
    for token in DATE_TOKEN_RE.findall(text):
        year = int(_YEAR_RE.search(token).group())
        if 1900 < year <= latest:
            years.append(year)
    return years


def is_reverse_chronological(years: list[int]) -> bool:
    """True when more than 70% of consecutive years are non-increasing.

    Fewer than two dates is not enough evidence to fail a resume.
    """
    if len(years) < 2:
        return True
    descending = sum(1 for prev, cur in zip(years, years[1:]) if cur <= prev)
    return descending / (len(years) - 1) > 0.7


def score_chronology(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    years = extract_years(resume.text, resume.reference_year)
    if is_reverse_chronological(years):
        return factor_result(
            "Chronological Order", 5, 5,
            findings=[strength("Reverse-chronological order (industry standard)")],
        )
    return factor_result(
        "Chronological Order", 2, 5,
        improvements=[improvement(
            "Structure",
            "Use reverse-chronological order (most recent first)",
            Priority.MEDIUM,
        )],
    )


def score_file(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    # Only extracted text reaches the engine, so file size/type is already handled
    return factor_result("File Optimization", 5, 5)
