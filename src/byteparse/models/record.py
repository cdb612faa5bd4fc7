from __future__ import annotations
from pydantic import BaseModel
from typing import Optional
from .span import Span

class KeyValue(BaseModel):
    key: str
    value: str
    span: Optional[Span] = None  # the whole line in the source buffer

    def as_tuple(self) -> tuple[str, str]:
        return self.key, self.value
