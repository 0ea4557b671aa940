"""Tests for report composition: ranking, caps, band insights and summary."""

from models.schemas.factor import ImprovementItem, Priority
from models.schemas.resume_text import ResumeText
from services.scoring.base import factor_result, improvement, insight, strength, warning
from services.scoring.composer import (
    MAX_IMPROVEMENTS,
    band_insights,
    build_summary,
    compose_report,
    rank_improvements,
)


def _item(name: str, priority: Priority) -> ImprovementItem:
    return improvement("Field", name, priority)


def test_priority_enum_is_ordered():
    assert Priority.LOW < Priority.MEDIUM < Priority.HIGH
    assert max([Priority.MEDIUM, Priority.HIGH, Priority.LOW]) == Priority.HIGH


def test_rank_improvements_is_stable():
    items = [
        _item("low-1", Priority.LOW),
        _item("high-1", Priority.HIGH),
        _item("medium-1", Priority.MEDIUM),
        _item("high-2", Priority.HIGH),
        _item("low-2", Priority.LOW),
        _item("medium-2", Priority.MEDIUM),
    ]
    ranked = [i.description for i in rank_improvements(items)]
    assert ranked == ["high-1", "high-2", "medium-1", "medium-2", "low-1", "low-2"]


def test_band_insights():
    assert band_insights(95)[0] == "Will pass 95%+ of ATS systems"
    assert band_insights(85)[0] == "Will pass 85%+ of ATS systems"
    assert band_insights(70)[0] == "Will pass 70%+ of ATS systems"
    assert band_insights(65) == []


def test_summary_band_strengths_and_priority_fix():
    summary = build_summary(
        90,
        ["One", "Two", "Three", "Four"],
        [_item("Add phone number", Priority.HIGH)],
    )
    assert summary.startswith("EXCELLENT:")
    assert "Strengths: One, Two, Three." in summary
    assert "Four" not in summary
    assert summary.endswith("Priority fix: Add phone number.")


def test_summary_without_strengths_or_improvements():
    summary = build_summary(40, [], [])
    assert summary.startswith("NEEDS WORK:")
    assert "Strengths" not in summary
    assert "Priority fix" not in summary


def test_compose_report_caps_and_orders():
    results = [
        factor_result(
            "A", 3, 50,
            findings=[strength(f"s{i}") for i in range(12)] + [warning(f"w{i}") for i in range(5)],
            improvements=[_item(f"low{i}", Priority.LOW) for i in range(8)],
            metrics={"keyword_density": 1.5},
        ),
        factor_result(
            "B", 40, 50,
            findings=[insight(f"i{i}") for i in range(7)],
            improvements=[_item(f"high{i}", Priority.HIGH) for i in range(6)],
            metrics={"achievement_count": 4, "section_count": 3},
        ),
    ]
    resume = ResumeText.from_text("one two three\nfour")
    report = compose_report(resume, results, raw_score=43, ats_score=43)

    assert len(report.improvements) == MAX_IMPROVEMENTS
    assert [i.description for i in report.improvements[:6]] == [f"high{i}" for i in range(6)]
    assert [i.description for i in report.improvements[6:]] == ["low0", "low1", "low2", "low3"]
    assert report.strengths == [f"s{i}" for i in range(8)]
    assert report.warnings == ["w0", "w1", "w2"]
    assert report.insights == [f"i{i}" for i in range(5)]
    assert [f.factor for f in report.factors] == ["A", "B"]
    assert report.sections_found == 3
    assert report.metrics == {
        "keyword_density": 1.5,
        "achievement_count": 4,
        "action_verb_count": 0,
        "section_count": 3,
        "word_count": 4,
        "line_count": 2,
        "char_count": 18,
    }


def test_band_insights_follow_extractor_insights():
    results = [factor_result("A", 50, 50, findings=[insight("Found 12 industry keywords")])]
    resume = ResumeText.from_text("text")
    report = compose_report(resume, results, raw_score=92, ats_score=95)
    assert report.insights == [
        "Found 12 industry keywords",
        "Will pass 95%+ of ATS systems",
        "Meets Fortune 500 company standards",
    ]
