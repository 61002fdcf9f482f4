"""
Consistency checks for a daily generation report.

The report is free text. Eleven labelled numbers are pulled out of it
(WHRS/CPP gross, aux, net and share; EB units and share; plant total) and
then checked against each other:

  1. net = gross - aux            (WHRS, CPP; exact)
  2. WHRS + CPP + EB = total      (exact)
  3. round(net / total * 100, 2) within tolerance of the reported share

A missing field stops the run with a single message. Arithmetic mismatches
are all collected.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from .config import METERED_SOURCES, SOURCES
from .extractors import Extraction, extract_all
from .validate import percentage_share, within_tolerance

logger = logging.getLogger(__name__)

PCT_TOLERANCE = Decimal("0.1")

TOTAL_MISMATCH = "Total plant consumed units mismatch"
TOTAL_ZERO = "Total plant consumed is zero; percentage shares cannot be checked"

def net_mismatch_message(label: str) -> str:
    return f"{label} net generation calculation wrong"

def percentage_mismatch_message(label: str) -> str:
    return f"{label} percentage mismatch"


@dataclass(frozen=True)
class GenerationSource:
    label: str
    net: int
    reported_percent: Decimal
    gross: int | None = None  # None for EB
    auxiliary: int | None = None

    @property
    def metered(self) -> bool:
        return self.gross is not None and self.auxiliary is not None


@dataclass(frozen=True)
class PlantReport:
    whrs: GenerationSource
    cpp: GenerationSource
    eb: GenerationSource
    total: int

    @property
    def sources(self) -> list[GenerationSource]:
        return [self.whrs, self.cpp, self.eb]


@dataclass(frozen=True)
class VerificationResult:
    errors: tuple[str, ...]
    report: PlantReport | None = None
    extractions: dict[str, Extraction] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict[str, Any]:
        fields = {
            k: {
                "field": e.field,
                "value": None if e.value is None else str(e.value),
                "method": e.method,
                "evidence": e.evidence,
                "reasons": list(e.reasons),
            }
            for k, e in self.extractions.items()
        }
        return {"ok": self.ok, "errors": list(self.errors), "fields": fields}


def build_report(extr: dict[str, Extraction]) -> PlantReport:
    def v(key: str) -> Any:
        return extr[key].value

    metered = {
        label: GenerationSource(
            label=label,
            gross=v(f"{label.lower()}_generation"),
            auxiliary=v(f"{label.lower()}_aux"),
            net=v(f"{label.lower()}_net"),
            reported_percent=v(f"{label.lower()}_pct"),
        )
        for label in METERED_SOURCES
    }
    # EB has no gross/aux split; its units are its net
    eb = GenerationSource(label="EB", net=v("eb_units"), reported_percent=v("eb_pct"))
    return PlantReport(whrs=metered["WHRS"], cpp=metered["CPP"], eb=eb, total=v("total"))


def check_net_generation(report: PlantReport) -> list[str]:
    errors: list[str] = []
    for src in report.sources:
        if not src.metered:
            continue
        if src.gross - src.auxiliary != src.net:
            logger.debug("%s: %d - %d != %d", src.label, src.gross, src.auxiliary, src.net)
            errors.append(net_mismatch_message(src.label))
    return errors


def check_total(report: PlantReport) -> list[str]:
    summed = sum(src.net for src in report.sources)
    if summed != report.total:
        logger.debug("sum of nets %d != total %d", summed, report.total)
        return [TOTAL_MISMATCH]
    return []


def check_percentages(report: PlantReport, tolerance: Decimal = PCT_TOLERANCE, places: int = 2) -> list[str]:
    if report.total == 0:
        return [TOTAL_ZERO]

    errors: list[str] = []
    for src in report.sources:
        calculated = percentage_share(src.net, report.total, places)
        if not within_tolerance(calculated, src.reported_percent, tolerance):
            logger.debug("%s share: calculated %s, reported %s", src.label, calculated, src.reported_percent)
            errors.append(percentage_mismatch_message(src.label))
    return errors


def check_report(text: str, tolerance: Decimal = PCT_TOLERANCE, places: int = 2) -> VerificationResult:
    extr, missing = extract_all(text)
    if missing is not None:
        logger.debug("aborting: %s (%s)", missing.message, ", ".join(missing.reasons))
        return VerificationResult(errors=(missing.message,), extractions=extr)

    report = build_report(extr)
    errors = [
        *check_net_generation(report),
        *check_total(report),
        *check_percentages(report, tolerance, places),
    ]
    logger.debug("verified %s: %d violation(s)", "/".join(SOURCES), len(errors))
    return VerificationResult(errors=tuple(errors), report=report, extractions=extr)


def verify_report(text: str, tolerance: Decimal = PCT_TOLERANCE, places: int = 2) -> list[str]:
    """Violation messages for `text`; an empty list means the report is correct."""
    return list(check_report(text, tolerance, places).errors)


verify = verify_report
