from __future__ import annotations
from dataclasses import dataclass
from .base import Kind

# Label ... value. Labels and values may wrap across lines, so every pattern
# is searched with DOTALL and the first occurrence wins.
UNITS = r"([\d,]+)"
PERCENT = r"\(([\d.]+)%\)"

@dataclass(frozen=True)
class FieldSpec:
    key: str
    name: str
    pattern: str
    kind: Kind

def _source_specs(label: str) -> list[FieldSpec]:
    low = label.lower()
    return [
        FieldSpec(f"{low}_generation", f"{label} Generation", rf"{label}.*?Generation\s*-\s*{UNITS}", "integer"),
        FieldSpec(f"{low}_aux", f"{label} Aux", rf"{label}.*?Aux.*?-\s*{UNITS}", "integer"),
        FieldSpec(f"{low}_net", f"{label} Net", rf"{label}.*?Net.*?-\s*{UNITS}", "integer"),
        FieldSpec(f"{low}_pct", f"{label} %", rf"{label}.*?{PERCENT}", "percentage"),
    ]

# Extraction order matters: the first missing field is the one reported.
FIELD_SPECS: list[FieldSpec] = [
    *_source_specs("WHRS"),
    *_source_specs("CPP"),
    FieldSpec("eb_units", "EB Units", rf"EB.*?{UNITS}", "integer"),
    FieldSpec("eb_pct", "EB %", rf"EB.*?{PERCENT}", "percentage"),
    FieldSpec("total", "Total plant consumed", rf"Total\s*plant\s*consumed.*?{UNITS}", "integer"),
]

SPECS_BY_KEY = {s.key: s for s in FIELD_SPECS}
