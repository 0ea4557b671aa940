"""Grading curve: raw composite score -> published ATS score.

Real ATS vendors parse the same document differently, so the published
score is quantized into 5-point bands above 50 and floored at 30 below it.
"""

# (minimum raw score, published score), highest band first
GRADING_CURVE: tuple[tuple[int, int], ...] = (
    (95, 100),
    (90, 95),
    (85, 90),
    (80, 85),
    (75, 80),
    (70, 75),
    (65, 70),
    (60, 65),
    (50, 60),
)
SCORE_FLOOR = 30

# Every value apply_grading_curve can return
PUBLISHED_SCORES: frozenset[int] = frozenset(
    [published for _, published in GRADING_CURVE] + list(range(SCORE_FLOOR, 50))
)


def apply_grading_curve(raw_score: int) -> int:
    for minimum, published in GRADING_CURVE:
        if raw_score >= minimum:
            return published
    return max(SCORE_FLOOR, raw_score)
