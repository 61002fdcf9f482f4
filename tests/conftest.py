"""Shared test fixtures and configuration."""
import pytest


REPORT_TEMPLATE = """Daily Power Report
WHRS Generation - {whrs_gen}
WHRS Aux - {whrs_aux}
WHRS Net - {whrs_net} ({whrs_pct}%)
CPP Generation - {cpp_gen}
CPP Aux - {cpp_aux}
CPP Net - {cpp_net} ({cpp_pct}%)
EB - {eb} ({eb_pct}%)
Total plant consumed - {total}
"""

CONSISTENT = dict(
    whrs_gen="1,000", whrs_aux="200", whrs_net="800", whrs_pct="40.0",
    cpp_gen="1,500", cpp_aux="300", cpp_net="1,200", cpp_pct="60.0",
    eb="0", eb_pct="0.0",
    total="2,000",
)


def make_report(**overrides) -> str:
    values = {**CONSISTENT, **overrides}
    return REPORT_TEMPLATE.format(**values)


@pytest.fixture
def report_text():
    """A report whose numbers all agree with each other."""
    return make_report()


@pytest.fixture
def build_report():
    """Factory: consistent report with selected values overridden."""
    return make_report


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in [
        "PCT_TOLERANCE", "PCT_PLACES", "VERIFY_DELAY_MS", "OUTPUT_PATH",
        "GRADIO_SERVER_NAME", "GRADIO_SERVER_PORT",
    ]:
        monkeypatch.delenv(name, raising=False)
