from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, model_validator

class NumberKind(str, Enum):
    UINT = "uint"
    INTEGER = "integer"
    FLOAT = "float"

class Number(BaseModel):
    kind: NumberKind
    value: int | float

    @model_validator(mode="after")
    def _check_kind(self) -> "Number":
        if self.kind is NumberKind.UINT and self.value < 0:
            raise ValueError("uint cannot be negative")
        if self.kind is not NumberKind.FLOAT and not isinstance(self.value, int):
            raise ValueError(f"{self.kind.value} needs an integral value")
        return self

    @classmethod
    def uint(cls, v: int) -> "Number": return cls(kind=NumberKind.UINT, value=v)
    @classmethod
    def integer(cls, v: int) -> "Number": return cls(kind=NumberKind.INTEGER, value=v)
    @classmethod
    def float_(cls, v: float) -> "Number": return cls(kind=NumberKind.FLOAT, value=float(v))
