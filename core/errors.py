# core/errors.py
from __future__ import annotations
from pathlib import Path
from typing import Optional


class PersistenceError(Exception):
    """Base class for everything the store raises."""

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class NotFoundError(PersistenceError):
    pass


class ParseError(PersistenceError):
    pass


class EncodeError(PersistenceError):
    pass


class StoreIOError(PersistenceError):
    pass


class SaveError(PersistenceError):
    pass


class SetupError(PersistenceError):
    pass
