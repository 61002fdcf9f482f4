from __future__ import annotations

import time
from datetime import datetime
from typing import Tuple

import gradio as gr
import pandas as pd

from .config import load_settings
from .extractors import FIELD_SPECS
from .run import EMPTY_REPORT, CORRECT_BANNER, WRONG_BANNER
from .utils import bullet_list
from .verify import VerificationResult, check_report

TABLE_COLUMNS = ["field", "value", "method", "evidence"]


def render_banner(errors: list[str], checked_at: datetime | None = None) -> str:
    stamp = f"\n\n_checked {checked_at:%d %b %Y, %I:%M:%S %p}_" if checked_at else ""
    if not errors:
        return f"## ✅ {CORRECT_BANNER}\nAll calculations and percentages are verified and correct.{stamp}"
    return f"## ❌ {WRONG_BANNER}\n**Reasons:**\n\n{bullet_list(errors, bullet='-')}{stamp}"


def fields_table(result: VerificationResult) -> pd.DataFrame:
    rows = []
    for spec in FIELD_SPECS:
        e = result.extractions.get(spec.key)
        rows.append(
            {
                "field": spec.name,
                "value": None if e is None or e.value is None else str(e.value),
                "method": "missing" if e is None else e.method,
                "evidence": None if e is None else e.evidence,
            }
        )
    return pd.DataFrame(rows, columns=TABLE_COLUMNS)


def run_verification_ui(text: str) -> Tuple[str, pd.DataFrame]:
    settings = load_settings()
    text = (text or "").strip()
    if not text:
        return f"### ⚠️ {EMPTY_REPORT}", pd.DataFrame(columns=TABLE_COLUMNS)

    # cosmetic delay only
    if settings.verify_delay_ms > 0:
        time.sleep(settings.verify_delay_ms / 1000.0)

    res = check_report(text, settings.pct_tolerance, settings.pct_places)
    return render_banner(list(res.errors), datetime.now()), fields_table(res)


def build_app() -> gr.Blocks:
    with gr.Blocks(title="Generation Report Checker") as demo:
        gr.Markdown("# Generation Report Checker")
        gr.Markdown("Paste the daily WHRS / CPP / EB report → verify net generation, totals and percentage shares.")

        inp = gr.Textbox(label="Report text", lines=16, placeholder="Paste your report here...")
        run_btn = gr.Button("🔍 Verify report", variant="primary")

        with gr.Row():
            banner_out = gr.Markdown()
        with gr.Row():
            table_out = gr.Dataframe(label="Extracted fields", interactive=False, wrap=True)

        run_btn.click(
            fn=run_verification_ui,
            inputs=[inp],
            outputs=[banner_out, table_out],
        )

    return demo


def main() -> None:
    settings = load_settings()
    demo = build_app()
    # IMPORTANT for Docker: bind to 0.0.0.0 (GRADIO_SERVER_NAME)
    demo.launch(server_name=settings.server_name, server_port=settings.server_port)


if __name__ == "__main__":
    main()
