from datetime import datetime
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ReviewRequest(BaseModel):
    code: str = ""
    language: str = ""

    @field_validator("code", "language", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        """Falsy values become empty; anything else is used as its text."""
        if not value:
            return ""
        return value if isinstance(value, str) else str(value)


class ComplexityReport(BaseModel):
    score: float
    details: str = ""


class PerformanceReport(BaseModel):
    score: float
    suggestions: list[str] = Field(default_factory=list)


class ReviewResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    score: float
    suggestions: list[str] = Field(default_factory=list)
    security: list[str] = Field(default_factory=list)
    best_practices: str = Field(default="", alias="bestPractices")
    complexity: ComplexityReport
    performance: PerformanceReport


class HistoryEntry(BaseModel):
    timestamp: datetime
    code: str
    review: ReviewResult
