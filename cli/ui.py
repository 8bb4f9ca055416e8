# cli/ui.py
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Iterable

from settings.config import StoreConfig
from core.results import LoadReport


def cprint(msg: str) -> None:
    # single place to control console output
    print(msg, flush=True)


def print_config(cfg: StoreConfig) -> None:
    for line in cfg.pretty_lines():
        cprint(line)


def print_document(name: str, value: Any) -> None:
    cprint(f"=== {name} ===")
    cprint(json.dumps(value, ensure_ascii=False, indent=2))


def print_collection(folder: str, files: Iterable[Path], report: LoadReport) -> None:
    failed = {f.name for f in report.failures}
    cprint(f"=== {folder} ({report.folder}) ===")
    for p in files:
        flag = "✗" if p.name in failed else "✓"
        cprint(f"{flag} {p.name}")
    cprint(f"{len(report.items)} item(s) loaded, {len(report.failures)} dropped")
