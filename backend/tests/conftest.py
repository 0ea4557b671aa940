"""Shared test configuration, pytest markers and sample resumes."""

import pytest

STRONG_RESUME_BODY = """John Doe
Austin, TX
john@example.com
(555) 123-4567
linkedin.com/in/john
github.com/johndoe

SUMMARY
Backend engineer focused on Python services and cloud platforms.

EXPERIENCE
Senior Software Engineer, Acme Corp, 2022 - 2024
- Led the move of billing services to Kubernetes, cutting costs by 30%
- Increased API throughput by 45% after profiling hot paths
- Reduced deployment time by 60% with automated release tooling
- Saved $250,000 in annual hosting spend
- Built a Docker based test harness used by every team
- Launched a PostgreSQL reporting service for finance

Software Engineer, Beta Labs, 2020 - 2022
- Grew active users by 20% through faster page loads
- Improved test coverage by 35% across core modules
- Designed the event schema shared by four product teams
- Implemented request tracing on AWS
- Managed on-call rotation for the payments service
- Developed internal tools and optimized slow queries

EDUCATION
B.S. Computer Science, State University, 2016 - 2020

SKILLS
Python, Docker, Kubernetes, AWS, PostgreSQL, leadership

PROJECTS
- Wrote an open source log parser
{filler}

CERTIFICATIONS
- Cloud practitioner certificate
"""

# Neutral line: matches no vocabulary, date, contact or achievement pattern
FILLER_LINE = "- Wrote clear notes for the support staff on each release."

MINIMAL_RESUME = "John Doe, Software Engineer"

TABLE_RESUME = """John Doe
+------+------+
| Name | Role |
+------+------+
| John | Dev  |
| Jane | QA   |
| Max  | PM   |
| Ann  | Ops  |
+------+------+
"""


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI application through TestClient"
    )


@pytest.fixture
def strong_resume() -> str:
    """Well-formed resume of roughly 560 words in reverse-chronological order."""
    filler = "\n".join(FILLER_LINE for _ in range(35))
    return STRONG_RESUME_BODY.format(filler=filler)


@pytest.fixture
def minimal_resume() -> str:
    return MINIMAL_RESUME


@pytest.fixture
def table_resume() -> str:
    return TABLE_RESUME
