"""Word lists the factor extractors match against.

The lists are grouped into one frozen `ScoringVocabulary` that is passed to
every extractor. `DEFAULT_VOCABULARY` covers English-language tech resumes;
a replacement can be supplied as a JSON file via `settings.vocabulary_path`.
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, ConfigDict

from config import settings

logger = logging.getLogger(__name__)


class ScoringVocabulary(BaseModel):
    model_config = ConfigDict(frozen=True)

    tech_keywords: tuple[str, ...]
    soft_skills: tuple[str, ...]
    strong_verbs: tuple[str, ...]
    weak_verbs: tuple[str, ...]
    buzzwords: tuple[str, ...]
    # Canonical sections checked for completeness (word-boundary match)
    required_sections: tuple[str, ...]
    # Header names recognised at the start of a line regardless of casing
    known_headers: tuple[str, ...]


DEFAULT_VOCABULARY = ScoringVocabulary(
    tech_keywords=(
        "javascript", "python", "java", "react", "angular", "vue", "node.js", "express",
        "mongodb", "sql", "mysql", "postgresql", "aws", "azure", "docker", "kubernetes",
        "git", "github", "gitlab", "jenkins", "agile", "scrum", "devops", "ci/cd",
        "typescript", "html5", "css3", "sass", "less", "webpack", "babel", "redux",
        "graphql", "rest api", "microservices", "terraform", "ansible", "linux",
    ),
    soft_skills=(
        "leadership", "communication", "teamwork", "problem-solving", "critical thinking",
        "time management", "adaptability", "creativity", "collaboration", "analytical",
    ),
    strong_verbs=(
        "achieved", "managed", "developed", "created", "implemented", "increased",
        "reduced", "improved", "optimized", "streamlined", "spearheaded", "led",
        "initiated", "designed", "built", "established", "generated", "secured",
        "transformed", "accelerated", "enhanced", "expanded", "launched", "orchestrated",
    ),
    weak_verbs=(
        "helped", "assisted", "participated", "worked on", "was responsible for",
    ),
    buzzwords=(
        "synergy", "leverage", "paradigm", "disrupt", "innovative", "cutting-edge",
        "game-changer", "thought leadership", "best-in-class", "world-class",
        "value-added", "robust", "seamless", "holistic", "strategic", "dynamic",
    ),
    required_sections=(
        "experience", "education", "skills", "summary", "projects", "certifications",
    ),
    known_headers=(
        "experience", "education", "skills", "summary", "projects", "certifications",
        "languages",
    ),
)


def load_vocabulary(path: str | Path) -> ScoringVocabulary:
    """Load a vocabulary from a JSON file with the same field names."""
    raw = Path(path).read_text(encoding="utf-8")
    return ScoringVocabulary.model_validate_json(raw)


@lru_cache(maxsize=1)
def get_vocabulary() -> ScoringVocabulary:
    """Vocabulary configured for this process (default unless overridden)."""
    if not settings.vocabulary_path:
        return DEFAULT_VOCABULARY
    logger.info("Loading scoring vocabulary from %s", settings.vocabulary_path)
    return load_vocabulary(settings.vocabulary_path)
