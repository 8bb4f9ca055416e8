# core/paths.py
from __future__ import annotations
from enum import Enum
from pathlib import Path

from core.errors import SetupError


class Intention(Enum):
    READING = "reading"
    WRITING = "writing"
    # resolve under the writing root but leave folder creation to the caller (copy targets)
    WRITING_NO_CREATE_FOLDER = "writing_no_create_folder"


def ensure_folder(path: Path) -> Path:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SetupError(f"failed to create folder {path}: {e}", path) from e
    return path


class PathResolver:
    def __init__(self, reading_root: Path, writing_root: Path):
        self.reading_root = Path(reading_root)
        self.writing_root = Path(writing_root)

    def folder_for(self, intention: Intention) -> Path:
        if intention is Intention.READING:
            return self.reading_root
        return self.writing_root

    def resolve(self, name: str, intention: Intention, is_directory: bool = False) -> Path:
        path = self.folder_for(intention) / name
        if is_directory and intention is Intention.WRITING:
            ensure_folder(path)
        return path
