from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, model_validator

class Span(BaseModel):
    """Half-open byte range [start, end) into a parser's buffer."""
    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)

    @model_validator(mode="after")
    def _ordered(self) -> "Span":
        if self.end < self.start:
            raise ValueError(f"span end {self.end} precedes start {self.start}")
        return self

    def __len__(self) -> int:
        return self.end - self.start
