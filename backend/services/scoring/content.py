"""Content factors: what the resume says and how it says it."""

import re

from models.schemas.factor import FactorResult, Priority
from models.schemas.resume_text import ResumeText
from services.scoring.base import (
    factor_result,
    find_terms,
    improvement,
    insight,
    round_half_up,
    strength,
    warning,
)
from services.vocabulary import ScoringVocabulary

# Every match counts, so repeated results keep adding up
ACHIEVEMENT_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"(?<!\d)\d+%"),
    re.compile(r"\$\d+[,.\d]*k?\b", re.IGNORECASE),
    re.compile(r"(?<!\d)\d+\+"),
    re.compile(r"increased\s+by\s+\d+", re.IGNORECASE),
    re.compile(r"reduced\s+by\s+\d+", re.IGNORECASE),
    re.compile(r"improved\s+by\s+\d+", re.IGNORECASE),
    re.compile(r"saved\s+\$\d+", re.IGNORECASE),
    re.compile(r"generated\s+\$\d+", re.IGNORECASE),
    re.compile(r"grew\s+by\s+\d+", re.IGNORECASE),
    re.compile(r"achieved\s+\d+", re.IGNORECASE),
)

# One penalty per category that matches at least once
UNPROFESSIONAL_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\b(?:fuck|shit|damn|crap|hell)\b", re.IGNORECASE),
    re.compile(r"\b(?:lol|rofl|lmao|wtf)\b", re.IGNORECASE),
    re.compile(r"\b(?:awesome|cool|nice|great job)\b", re.IGNORECASE),
)
_FIRST_PERSON_RE = re.compile(r"\b(?:I|my|mine)\b", re.IGNORECASE)
_FIRST_PERSON_LIMIT = 20


def keyword_density(hits: int, word_count: int) -> float:
    """Keyword hits per 100 words."""
    if word_count <= 0:
        return 0.0
    return round(hits * 100 / word_count, 2)


def score_keywords(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    lowered = resume.lower
    found_tech = [kw for kw in vocabulary.tech_keywords if kw.lower() in lowered]
    found_soft = [kw for kw in vocabulary.soft_skills if kw.lower() in lowered]
    total = len(found_tech) + len(found_soft)

    raw = min(len(found_tech) * 0.5, 7) + min(len(found_soft) * 0.3, 3)
    score = min(10, round_half_up(raw))

    findings = [insight(f"Found {total} industry keywords")]
    improvements = []
    if total >= 10:
        findings.append(strength("Excellent keyword optimization"))
    elif total < 5:
        improvements.append(improvement(
            "Keywords",
            f"Add more industry keywords. Found only {total}/20+ recommended",
            Priority.HIGH,
        ))

    return factor_result(
        "Keyword Optimization", score, 10,
        findings=findings,
        improvements=improvements,
        metrics={
            "keyword_count": total,
            "keyword_density": keyword_density(total, resume.word_count),
        },
    )


def score_action_verbs(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    strong = find_terms(resume.text, vocabulary.strong_verbs)
    weak = find_terms(resume.text, vocabulary.weak_verbs)

    raw = max(0.0, min(len(strong) * 1.2, 8) - min(len(weak) * 0.5, 3))
    score = min(10, round_half_up(raw))

    findings = []
    improvements = []
    if len(strong) >= 8:
        findings.append(strength("Powerful action verbs throughout"))
    elif len(strong) < 4:
        improvements.append(improvement(
            "Writing Style",
            "Use more strong action verbs (Managed, Developed, Created, Implemented)",
            Priority.MEDIUM,
        ))

    return factor_result(
        "Action Verbs", score, 10,
        findings=findings,
        improvements=improvements,
        metrics={"action_verb_count": len(strong), "weak_verb_count": len(weak)},
    )


def count_achievements(text: str) -> int:
    """Total occurrences of quantified-result patterns."""
    return sum(len(pattern.findall(text)) for pattern in ACHIEVEMENT_PATTERNS)


def score_achievements(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    count = count_achievements(resume.text)

    findings = []
    improvements = []
    if count >= 5:
        findings.append(strength(
            f"Strong results orientation ({count} quantifiable achievements)"
        ))
    elif count < 2:
        improvements.append(improvement(
            "Achievements",
            "Add more measurable results with numbers and percentages",
            Priority.HIGH,
        ))

    return factor_result(
        "Quantifiable Results", min(count * 2, 10), 10,
        findings=findings,
        improvements=improvements,
        metrics={"achievement_count": count},
    )


def score_tone(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    score = 5
    for pattern in UNPROFESSIONAL_PATTERNS:
        if pattern.search(resume.text):
            score -= 2

    first_person = len(_FIRST_PERSON_RE.findall(resume.text))
    if first_person > _FIRST_PERSON_LIMIT:
        score -= 1
    score = max(0, score)

    if score >= 4:
        findings = [strength("Professional writing style maintained")]
    else:
        findings = [warning("Informal language or heavy first-person phrasing detected")]

    return factor_result(
        "Professional Tone", score, 5,
        findings=findings,
        metrics={"first_person_count": first_person},
    )


def score_buzzwords(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    overused = find_terms(resume.text, vocabulary.buzzwords)
    score = max(0, 5 - max(0, len(overused) - 2))

    improvements = []
    if overused:
        improvements.append(improvement(
            "Word Choice",
            f"Reduce overused buzzwords: {', '.join(overused[:3])}",
            Priority.LOW,
        ))

    return factor_result(
        "Buzzword Balance", score, 5,
        improvements=improvements,
        metrics={"buzzword_count": len(overused)},
    )
