from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal
from typing import Any

from .config import load_settings
from .utils import write_jsonl, read_report, bullet_list
from .verify import check_report

EMPTY_REPORT = "Please paste your report text before verifying."

CORRECT_BANNER = "REPORT IS CORRECT"
WRONG_BANNER = "REPORT IS WRONG"


def format_verdict(errors: list[str]) -> str:
    if not errors:
        return f"{CORRECT_BANNER}\nAll calculations and percentages are verified and correct."
    return f"{WRONG_BANNER}\nReasons:\n{bullet_list(errors)}"


def verify_path(path: str, tolerance: Decimal, places: int) -> dict[str, Any]:
    try:
        text = read_report(path).strip()
    except OSError as e:
        return {"report": path, "ok": False, "errors": [f"cannot read report: {e.strerror or e}"], "fields": {}}

    if not text:
        return {"report": path, "ok": False, "errors": [EMPTY_REPORT], "fields": {}}

    res = check_report(text, tolerance, places)
    return {"report": path, **res.to_dict()}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Verify WHRS/CPP/EB generation reports.")
    p.add_argument("reports", nargs="+", help="Report text files ('-' for stdin).")
    p.add_argument("--output", default=None, help="JSONL output path (default: OUTPUT_PATH).")
    p.add_argument("--verbose", "-v", action="store_true", help="Log extraction details.")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )
    settings = load_settings()
    output_path = args.output or settings.output_path

    outputs: list[dict[str, Any]] = []
    for path in args.reports:
        out = verify_path(path, settings.pct_tolerance, settings.pct_places)
        outputs.append(out)
        if len(args.reports) > 1:
            print(f"== {path}")
        print(format_verdict(out["errors"]))

    write_jsonl(output_path, outputs)

    ok_count = sum(1 for o in outputs if o["ok"])
    total = len(outputs)
    print(f"[VERIFY] reports={total} ok={ok_count} wrong={total - ok_count} output={output_path}")
    return 0 if ok_count == total else 1


if __name__ == "__main__":
    sys.exit(main())
