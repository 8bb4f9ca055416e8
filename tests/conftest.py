from __future__ import annotations

import sys
from pathlib import Path

import pytest

# make the top-level packages importable when running from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.store import JsonStore


@pytest.fixture()
def root(tmp_path):
    return tmp_path / "data"


@pytest.fixture()
def store(root):
    """Store whose reading and writing roots are the same folder."""
    return JsonStore(root, root)


@pytest.fixture()
def split_roots(tmp_path):
    return tmp_path / "read", tmp_path / "write"


@pytest.fixture()
def split_store(split_roots):
    read, write = split_roots
    return JsonStore(read, write)
