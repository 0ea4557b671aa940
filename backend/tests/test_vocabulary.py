import pytest
from pydantic import ValidationError

from config import settings
from services import vocabulary
from services.vocabulary import DEFAULT_VOCABULARY, get_vocabulary, load_vocabulary


@pytest.fixture(autouse=True)
def _clear_cache():
    get_vocabulary.cache_clear()
    yield
    get_vocabulary.cache_clear()


def test_default_vocabulary_is_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_VOCABULARY.tech_keywords = ("cobol",)


def test_default_vocabulary_used_without_override(monkeypatch):
    monkeypatch.setattr(settings, "vocabulary_path", "")
    assert get_vocabulary() is DEFAULT_VOCABULARY


def test_load_vocabulary_round_trip(tmp_path):
    path = tmp_path / "vocabulary.json"
    path.write_text(DEFAULT_VOCABULARY.model_dump_json(), encoding="utf-8")
    assert load_vocabulary(path) == DEFAULT_VOCABULARY


def test_get_vocabulary_reads_configured_file(tmp_path, monkeypatch):
    custom = DEFAULT_VOCABULARY.model_copy(update={"buzzwords": ("rockstar", "ninja")})
    path = tmp_path / "custom.json"
    path.write_text(custom.model_dump_json(), encoding="utf-8")
    monkeypatch.setattr(vocabulary.settings, "vocabulary_path", str(path))

    loaded = get_vocabulary()
    assert loaded.buzzwords == ("rockstar", "ninja")
    assert loaded.tech_keywords == DEFAULT_VOCABULARY.tech_keywords


def test_load_vocabulary_rejects_missing_fields(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"tech_keywords": ["python"]}', encoding="utf-8")
    with pytest.raises(ValidationError):
        load_vocabulary(path)
