"""Immutable analysis input: raw resume text plus derived counts."""

from datetime import date

from pydantic import BaseModel, ConfigDict


class ResumeText(BaseModel):
    """Extracted resume text as seen by every factor extractor.

    Built once per analysis with `from_text`; frozen afterwards. The
    reference year bounds which dates count as plausible, so two analyses
    of the same text with the same reference year always agree.
    """
    model_config = ConfigDict(frozen=True)

    text: str
    word_count: int = 0
    line_count: int = 0  # non-empty lines only
    char_count: int = 0
    reference_year: int

    @classmethod
    def from_text(cls, text: str, reference_year: int | None = None) -> "ResumeText":
        if not isinstance(text, str):
            raise TypeError(f"resume text must be str, got {type(text).__name__}")
        return cls(
            text=text,
            word_count=len(text.split()),
            line_count=sum(1 for line in text.split("\n") if line.strip()),
            char_count=len(text),
            reference_year=reference_year or date.today().year,
        )

    @property
    def lower(self) -> str:
        return self.text.lower()
