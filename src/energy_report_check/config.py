from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os

SOURCES = ["WHRS", "CPP", "EB"]

# sources reported with gross/aux/net figures (EB is net only)
METERED_SOURCES = ["WHRS", "CPP"]

MAX_PCT_PLACES = 10

@dataclass(frozen=True)
class Settings:
    output_path: str

    # Percentage policy
    pct_tolerance: Decimal = Decimal("0.1")
    pct_places: int = 2

    # UI
    verify_delay_ms: int = 300
    server_name: str = "0.0.0.0"
    server_port: int = 7860

def _env_decimal(name: str, default: str) -> Decimal:
    raw = os.getenv(name, default).strip()
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise ValueError(f"{name} must be a decimal number, got {raw!r}") from None

def _env_int(name: str, default: str) -> int:
    raw = os.getenv(name, default).strip()
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None

def load_settings() -> Settings:
    tolerance = _env_decimal("PCT_TOLERANCE", "0.1")
    if not tolerance.is_finite() or tolerance < 0:
        raise ValueError("PCT_TOLERANCE must be a non-negative number.")
    places = _env_int("PCT_PLACES", "2")
    if not 0 <= places <= MAX_PCT_PLACES:
        raise ValueError(f"PCT_PLACES must be between 0 and {MAX_PCT_PLACES}, got {places}.")

    return Settings(
        output_path=os.getenv("OUTPUT_PATH", "outputs/verifications.jsonl").strip(),
        pct_tolerance=tolerance,
        pct_places=places,
        verify_delay_ms=_env_int("VERIFY_DELAY_MS", "300"),
        server_name=os.getenv("GRADIO_SERVER_NAME", "0.0.0.0").strip(),
        server_port=_env_int("GRADIO_SERVER_PORT", "7860"),
    )
