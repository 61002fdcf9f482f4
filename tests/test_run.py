"""Tests for the batch verification CLI."""
import io
import json
from decimal import Decimal

from energy_report_check.run import EMPTY_REPORT, format_verdict, main, verify_path


class TestFormatVerdict:
    def test_correct(self):
        assert format_verdict([]).startswith("REPORT IS CORRECT")

    def test_wrong_lists_reasons(self):
        out = format_verdict(["WHRS percentage mismatch", "EB percentage mismatch"])
        assert out.splitlines() == [
            "REPORT IS WRONG",
            "Reasons:",
            "• WHRS percentage mismatch",
            "• EB percentage mismatch",
        ]


class TestVerifyPath:
    def test_empty_file(self, tmp_path):
        p = tmp_path / "empty.txt"
        p.write_text("   \n", encoding="utf-8")
        out = verify_path(str(p), Decimal("0.1"), 2)
        assert out["ok"] is False
        assert out["errors"] == [EMPTY_REPORT]

    def test_unreadable_file(self, tmp_path):
        out = verify_path(str(tmp_path / "nope.txt"), Decimal("0.1"), 2)
        assert out["ok"] is False
        assert out["errors"][0].startswith("cannot read report")


class TestMain:
    def test_good_and_bad_reports(self, tmp_path, capsys, build_report):
        good = tmp_path / "good.txt"
        bad = tmp_path / "bad.txt"
        good.write_text(build_report(), encoding="utf-8")
        bad.write_text(build_report(whrs_pct="45.0"), encoding="utf-8")
        output = tmp_path / "out" / "v.jsonl"

        code = main([str(good), str(bad), "--output", str(output)])

        assert code == 1
        printed = capsys.readouterr().out
        assert "REPORT IS CORRECT" in printed
        assert "• WHRS percentage mismatch" in printed
        assert "[VERIFY] reports=2 ok=1 wrong=1" in printed

        rows = [json.loads(ln) for ln in output.read_text(encoding="utf-8").splitlines()]
        assert [r["ok"] for r in rows] == [True, False]
        assert rows[0]["report"] == str(good)
        assert rows[1]["errors"] == ["WHRS percentage mismatch"]
        assert rows[0]["fields"]["total"]["value"] == "2000"

    def test_all_ok_exit_code(self, tmp_path, monkeypatch, report_text):
        monkeypatch.setenv("OUTPUT_PATH", str(tmp_path / "v.jsonl"))
        p = tmp_path / "r.txt"
        p.write_text(report_text, encoding="utf-8")
        assert main([str(p)]) == 0
        assert (tmp_path / "v.jsonl").exists()

    def test_stdin(self, tmp_path, monkeypatch, capsys, report_text):
        monkeypatch.setattr("sys.stdin", io.StringIO(report_text))
        assert main(["-", "--output", str(tmp_path / "v.jsonl")]) == 0
        assert "REPORT IS CORRECT" in capsys.readouterr().out
