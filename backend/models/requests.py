from pydantic import BaseModel, Field


class AnalyzeTextRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Plain text resume content")
