from __future__ import annotations
import logging
import re
from decimal import Decimal
from .base import Extraction, Kind
from .patterns import FIELD_SPECS, FieldSpec
from ..validate import parse_units, parse_percent

logger = logging.getLogger(__name__)

FLAGS = re.IGNORECASE | re.DOTALL

def _tag(field: str) -> str:
    low = field.lower().replace("%", "pct")
    return re.sub(r"[^a-z0-9]+", "_", low).strip("_") or "field"

def _extract(pattern: str, text: str, field: str, kind: Kind) -> Extraction:
    m = re.search(pattern, text, FLAGS)
    if not m:
        return Extraction(field, pattern, kind, None, "missing", None, (f"{_tag(field)}_not_found",))

    raw = m.group(1)
    value: int | Decimal | None
    if kind == "integer":
        value = parse_units(raw)
    else:
        value = parse_percent(raw)
    if value is None:
        # a matched but unusable capture counts as not found
        logger.debug("%s: could not parse %r", field, raw)
        return Extraction(field, pattern, kind, None, "missing", m.group(0), (f"{_tag(field)}_parse_failed",))
    return Extraction(field, pattern, kind, value, "rule", m.group(0), (f"{_tag(field)}_pattern_match",))

def extract_integer(pattern: str, text: str, field: str) -> Extraction:
    return _extract(pattern, text, field, "integer")

def extract_percentage(pattern: str, text: str, field: str) -> Extraction:
    return _extract(pattern, text, field, "percentage")

def extract_field(spec: FieldSpec, text: str) -> Extraction:
    if spec.kind == "integer":
        return extract_integer(spec.pattern, text, spec.name)
    return extract_percentage(spec.pattern, text, spec.name)

def extract_all(text: str, specs: list[FieldSpec] = FIELD_SPECS) -> tuple[dict[str, Extraction], Extraction | None]:
    """
    Runs every field spec in order.
    Returns (extractions_by_key, first_missing). first_missing is None only
    when every field produced a value.
    """
    out: dict[str, Extraction] = {}
    first_missing: Extraction | None = None
    for spec in specs:
        e = extract_field(spec, text)
        out[spec.key] = e
        if e.missing and first_missing is None:
            first_missing = e
    return out, first_missing
