from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Literal

Kind = Literal["integer", "percentage"]
Method = Literal["rule", "missing"]

@dataclass(frozen=True)
class Extraction:
    field: str
    pattern: str
    kind: Kind
    value: int | Decimal | None
    method: Method
    evidence: str | None  # matched text span
    reasons: tuple[str, ...]

    @property
    def missing(self) -> bool:
        return self.value is None

    @property
    def message(self) -> str:
        return f"{self.field} not found"
