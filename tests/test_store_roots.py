from __future__ import annotations

import pytest

from core.errors import SetupError
from core.store import MISSING


def by_id(item):
    return item["id"]


def test_write_does_not_touch_reading_root(split_store, split_roots):
    read, write = split_roots
    split_store.save_document("doc.json", {"a": 1})

    assert list(read.iterdir()) == []
    assert (write / "doc.json").is_file()
    assert split_store.load_document("doc.json") is MISSING


def test_reads_come_from_reading_root(split_store, split_roots):
    read, _ = split_roots
    (read / "doc.json").write_text('{"from": "read"}')
    split_store.save_document("doc.json", {"from": "write"})
    assert split_store.load_document("doc.json") == {"from": "read"}


def test_same_root_reads_back_writes(store):
    store.save_document("doc.json", {"a": 1})
    assert store.load_document("doc.json") == {"a": 1}


def test_collections_respect_roots(split_store, split_roots):
    read, write = split_roots
    split_store.save_collection("items", [{"id": "a"}], by_id)
    assert (write / "items" / "a.json").is_file()
    assert not (read / "items").exists()
    assert split_store.load_collection("items") == []


def test_delete_only_touches_writing_root(split_store, split_roots):
    read, write = split_roots
    (read / "doc.json").write_text("{}")
    (write / "doc.json").write_text("{}")
    assert split_store.delete_document("doc.json") is True
    assert (read / "doc.json").exists()
    assert not (write / "doc.json").exists()


def test_copy_file_to_write_location(split_store, split_roots):
    read, write = split_roots
    (read / "config.json").write_text('{"v": 1}')
    dst = split_store.copy_to_write_location("config.json")
    assert dst == write / "config.json"
    assert dst.read_text() == '{"v": 1}'
    assert (read / "config.json").exists()


def test_copy_folder_to_write_location(split_store, split_roots):
    read, write = split_roots
    (read / "items").mkdir()
    (read / "items" / "a.json").write_text('{"id": "a"}')
    split_store.copy_to_write_location("items", is_directory=True)
    assert (write / "items" / "a.json").read_text() == '{"id": "a"}'


def test_copy_missing_source_is_setup_error(split_store):
    with pytest.raises(SetupError):
        split_store.copy_to_write_location("nope.json")


def test_copy_onto_existing_is_setup_error(split_store, split_roots):
    read, write = split_roots
    (read / "config.json").write_text("1")
    (write / "config.json").write_text("2")
    with pytest.raises(SetupError):
        split_store.copy_to_write_location("config.json")
    assert (write / "config.json").read_text() == "2"


def test_copy_does_not_create_destination_parent(split_store, split_roots):
    read, write = split_roots
    (read / "a").mkdir()
    (read / "a" / "doc.json").write_text("{}")
    with pytest.raises(SetupError):
        split_store.copy_to_write_location("a/doc.json")
    assert not (write / "a").exists()


def test_copy_with_shared_root_is_noop(store, root):
    (root / "doc.json").write_text("{}")
    assert store.copy_to_write_location("doc.json") == root / "doc.json"
    assert (root / "doc.json").read_text() == "{}"


def test_seed(split_store, split_roots):
    read, write = split_roots
    (read / "config.json").write_text("{}")
    (read / "projects").mkdir()
    (read / "projects" / "p.json").write_text("{}")
    (write / "accounts.json").write_text('{"kept": true}')
    (read / "accounts.json").write_text("{}")

    copied = split_store.seed([
        ("config.json", False),
        ("projects", True),
        ("accounts.json", False),
        ("absent.json", False),
    ])

    assert copied == ["config.json", "projects"]
    assert (write / "projects" / "p.json").is_file()
    assert (write / "accounts.json").read_text() == '{"kept": true}'
    assert split_store.seed([("config.json", False)]) == []


def test_copy_missing_source_with_shared_root_is_setup_error(store, root):
    with pytest.raises(SetupError):
        store.copy_to_write_location("never-existed.json")
    assert not (root / "never-existed.json").exists()
