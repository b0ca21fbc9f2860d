from typing import List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, field_validator


# Models
class RoastRequest(BaseModel):
    url: str

    @field_validator("url")
    @classmethod
    def url_must_be_present(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("url is required")
        return value


class RoastResult(BaseModel):
    """Buckets extracted from one completion; raw keeps the untouched text."""

    model_config = ConfigDict(frozen=True)

    score: str = ""
    good: Tuple[str, ...] = ()
    confusing: Tuple[str, ...] = ()
    improvements: Tuple[str, ...] = ()
    raw: str = ""

    @property
    def is_structured(self) -> bool:
        return bool(self.good or self.confusing or self.improvements)


class AdvisorySection(BaseModel):
    title: str
    items: List[str]


class RoastResponse(BaseModel):
    score: str
    good: List[str]
    confusing: List[str]
    improvements: List[str]
    raw: Optional[str] = None  # Only set when no bucket could be extracted
    advice: Optional[List[AdvisorySection]] = None  # Pro mode only


class RawRoastResponse(BaseModel):
    result: str


class ErrorResponse(BaseModel):
    error: str
