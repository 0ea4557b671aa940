"""Parsability factors: can an ATS read the document's layout at all?

Five factors worth 5 points each: format glyphs, text readability,
section headers, bullet consistency and table usage.
"""

import re
from collections import Counter
from functools import lru_cache

from models.schemas.factor import FactorResult, Priority
from models.schemas.resume_text import ResumeText
from services.scoring.base import factor_result, improvement, strength, warning
from services.vocabulary import ScoringVocabulary

# Geometric glyphs that commonly come out of icon fonts and decorative templates
_SPECIAL_GLYPH_RE = re.compile(r"[□■▢▣▤▥▦▧▨▩▪▫▬▭▮▯]")
_IMAGE_REFERENCE_RE = re.compile(r"graphic|image|photo|picture|img", re.IGNORECASE)

_NON_TEXT_RE = re.compile(r"[^a-zA-Z0-9\s]")

_ALL_CAPS_HEADER_RE = re.compile(r"^[A-Z][A-Z\s]+:?$")
_TITLE_CASE_HEADER_RE = re.compile(r"^[A-Z][a-z]+(?:\s[A-Z][a-z]+)*:?$")

BULLET_STYLES: dict[str, re.Pattern] = {
    "dash": re.compile(r"^\s*-\s+"),
    "asterisk": re.compile(r"^\s*\*\s+"),
    "dot": re.compile(r"^\s*•\s+"),
    "number": re.compile(r"^\s*\d+\.\s+"),
}

_BOX_DRAWING_RE = re.compile(r"[┌┬┐├┼┤└┴┘╔╦╗╠╬╣╚╩╝]")
_ASCII_BORDER_RE = re.compile(r"\+-+\+")
_MAX_PIPES = 10


def score_format(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    clean = not _SPECIAL_GLYPH_RE.search(resume.text) and not _IMAGE_REFERENCE_RE.search(resume.text)
    if clean:
        return factor_result(
            "ATS-Friendly Format", 5, 5,
            findings=[strength("No ATS-breaking characters detected")],
        )
    return factor_result(
        "ATS-Friendly Format", 0, 5,
        findings=[warning("Contains special characters that may break ATS parsing")],
    )


def readable_ratio(text: str) -> float:
    """Percentage of characters that are ASCII letters, digits or whitespace."""
    if not text:
        return 0.0
    return len(_NON_TEXT_RE.sub("", text)) / len(text) * 100


def score_readability(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    ratio = readable_ratio(resume.text)
    metrics = {"readable_ratio": round(ratio, 2)}
    if ratio >= 85:
        return factor_result(
            "Text Readability", 5, 5,
            findings=[strength("High text readability for ATS")],
            metrics=metrics,
        )
    return factor_result("Text Readability", 3 if ratio >= 70 else 0, 5, metrics=metrics)


@lru_cache(maxsize=16)
def known_header_pattern(known_headers: tuple[str, ...]) -> re.Pattern | None:
    """Case-insensitive line-prefix pattern for the vocabulary's header names."""
    if not known_headers:
        return None
    return re.compile(
        r"^(?:" + "|".join(re.escape(h) for h in known_headers) + ")",
        re.IGNORECASE,
    )


def detect_section_headers(text: str, vocabulary: ScoringVocabulary) -> list[str]:
    """Unique header-like lines, in order of appearance, with colons removed."""
    patterns = [_ALL_CAPS_HEADER_RE, _TITLE_CASE_HEADER_RE]
    known = known_header_pattern(vocabulary.known_headers)
    if known is not None:
        patterns.append(known)

    headers: list[str] = []
    for line in text.split("\n"):
        stripped = line.strip()
        if not 3 < len(stripped) < 50:
            continue
        if any(p.match(stripped) for p in patterns):
            header = stripped.replace(":", "").strip()
            if header not in headers:
                headers.append(header)
    return headers


def score_section_headers(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    headers = detect_section_headers(resume.text, vocabulary)
    findings = []
    if len(headers) >= 4:
        findings.append(strength(f"Strong section structure ({len(headers)} sections)"))
    return factor_result(
        "Section Headers", min(len(headers), 5), 5,
        findings=findings,
        metrics={"section_count": len(headers)},
    )


def count_bullet_styles(text: str) -> Counter:
    """Count bulleted lines per marker style."""
    counts: Counter = Counter({style: 0 for style in BULLET_STYLES})
    for line in text.split("\n"):
        for style, pattern in BULLET_STYLES.items():
            if pattern.match(line):
                counts[style] += 1
                break
    return counts


def score_bullet_consistency(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    counts = count_bullet_styles(resume.text)
    total = sum(counts.values())
    consistent = total == 0 or max(counts.values()) / total > 0.8

    if consistent:
        return factor_result(
            "Format Consistency", 5, 5,
            findings=[strength("Consistent formatting throughout")],
        )
    return factor_result(
        "Format Consistency", 2, 5,
        improvements=[improvement(
            "Formatting",
            "Use consistent bullet point styles (all • or all -)",
            Priority.MEDIUM,
        )],
    )


def has_tables(text: str) -> bool:
    return bool(
        _BOX_DRAWING_RE.search(text)
        or _ASCII_BORDER_RE.search(text)
        or text.count("|") > _MAX_PIPES
    )


def score_tables(resume: ResumeText, vocabulary: ScoringVocabulary) -> FactorResult:
    if not has_tables(resume.text):
        return factor_result(
            "Table-Free", 5, 5,
            findings=[strength("No tables detected (good for ATS)")],
        )
    return factor_result(
        "Table-Free", 1, 5,
        findings=[warning("Tables detected - may cause ATS parsing issues")],
        improvements=[improvement(
            "Formatting",
            "Remove tables - convert to bullet points for better ATS parsing",
            Priority.HIGH,
        )],
    )
