# core/factory.py
from __future__ import annotations
import logging
from typing import Optional

from settings.config import StoreConfig
from core.store import JsonStore


def create_standard_store(cfg: Optional[StoreConfig] = None, logger: Optional[logging.Logger] = None) -> JsonStore:
    """Store rooted in the per-user data folder (or wherever the environment points it)."""
    cfg = cfg or StoreConfig.load()
    return JsonStore(cfg.reading_root, cfg.writing_root, logger=logger)
