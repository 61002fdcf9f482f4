from __future__ import annotations
import json
import os
import sys
from typing import Any, Iterable

def ensure_dir(path: str) -> None:
    os.makedirs(path, exist_ok=True)

def write_jsonl(path: str, rows: Iterable[dict[str, Any]]) -> None:
    ensure_dir(os.path.dirname(path) or ".")
    with open(path, "w", encoding="utf-8") as f:
        for r in rows:
            f.write(json.dumps(r, ensure_ascii=False) + "\n")

def read_report(path: str) -> str:
    # "-" reads stdin
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()

def bullet_list(items: Iterable[str], bullet: str = "•") -> str:
    return "\n".join(f"{bullet} {it}" for it in items)
