from .base import Extraction
from .patterns import FieldSpec, FIELD_SPECS, SPECS_BY_KEY
from .numeric import extract_integer, extract_percentage, extract_field, extract_all

__all__ = [
    "Extraction",
    "FieldSpec",
    "FIELD_SPECS",
    "SPECS_BY_KEY",
    "extract_integer",
    "extract_percentage",
    "extract_field",
    "extract_all",
]
