# core/results.py
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List


@dataclass
class ItemFailure:
    name: str
    error: Exception

    def __str__(self) -> str:
        return f"{self.name}: {self.error}"


@dataclass
class SaveReport:
    folder: Path
    saved: List[Path] = field(default_factory=list)
    failures: List[ItemFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


@dataclass
class LoadReport:
    folder: Path
    items: List[Any] = field(default_factory=list)
    failures: List[ItemFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
