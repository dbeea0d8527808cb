from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Tuple

from app.utils.text import coerce_text, trim_text

class DiagnoseRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    description: str = ""

    @field_validator("description", mode="before")
    @classmethod
    def _to_trimmed_text(cls, v: Any) -> str:
        return trim_text(coerce_text(v))

    @classmethod
    def from_payload(cls, payload: Any) -> "DiagnoseRequest":
        # Only JSON objects carry fields; anything else reads as {}
        if not isinstance(payload, dict):
            payload = {}
        return cls.model_validate(payload)

class DiagnosisRule(BaseModel):
    """One classification branch: keywords to look for and the canned outcome.

    A rule without keywords matches any text.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    keywords: Tuple[str, ...] = ()
    summary: str
    actions: Tuple[str, ...]
    confidence: float = Field(default=0.65, ge=0.0, le=1.0)

    def matches(self, text: str) -> bool:
        if not self.keywords:
            return True
        return any(k in text for k in self.keywords)

class DiagnosisResult(BaseModel):
    ok: bool = True
    auth_present: bool
    summary: str
    confidence: float = Field(ge=0.0, le=1.0)
    actions: List[str] = Field(default_factory=list)

class ErrorResponse(BaseModel):
    error: str
