from __future__ import annotations

import json
from pathlib import Path

import pytest

from services import cache_file
from services.note_store import NoteStore


def read_cache(path: Path) -> list:
    return json.loads(path.read_text(encoding="utf-8"))


def test_create_persists_and_rejects_duplicates(store: NoteStore, cache_path: Path) -> None:
    assert store.create("n", "t") is True
    assert store.create("n", "other") is False

    assert store.get("n") == "t"
    assert read_cache(cache_path) == [{"note_name": "n", "note": "t"}]


def test_update_and_delete_missing_note_do_not_touch_file(store: NoteStore, cache_path: Path) -> None:
    before = cache_path.read_text(encoding="utf-8")
    mtime = cache_path.stat().st_mtime_ns

    assert store.update("ghost", "x") is False
    assert store.delete("ghost") is False

    assert cache_path.read_text(encoding="utf-8") == before
    assert cache_path.stat().st_mtime_ns == mtime


def test_update_and_delete_rewrite_cache(store: NoteStore, cache_path: Path) -> None:
    store.create("a", "1")
    store.create("b", "2")

    assert store.update("a", "10") is True
    assert read_cache(cache_path) == [
        {"note_name": "a", "note": "10"},
        {"note_name": "b", "note": "2"},
    ]

    assert store.delete("a") is True
    assert "a" not in store
    assert len(store) == 1
    assert read_cache(cache_path) == [{"note_name": "b", "note": "2"}]


def test_list_notes_uses_name_and_text(store: NoteStore) -> None:
    store.create("a", "1")
    store.create("b", "2")

    assert sorted(store.list_notes(), key=lambda n: n["name"]) == [
        {"name": "a", "text": "1"},
        {"name": "b", "text": "2"},
    ]


def test_reopen_reproduces_notes(store: NoteStore, cache_path: Path) -> None:
    store.create("a", "1")
    store.create("b", "2")
    store.update("b", "22")
    store.create("c", "3")
    store.delete("a")

    again = NoteStore.open(cache_path)

    assert {n["name"]: n["text"] for n in again.list_notes()} == {"b": "22", "c": "3"}


def test_failed_save_rolls_back_memory(store: NoteStore, cache_path: Path, monkeypatch) -> None:
    store.create("keep", "v1")

    def boom(path, notes):
        raise OSError("disk full")

    monkeypatch.setattr(cache_file, "save", boom)

    with pytest.raises(OSError):
        store.create("new", "x")
    with pytest.raises(OSError):
        store.update("keep", "v2")
    with pytest.raises(OSError):
        store.delete("keep")

    assert store.get("new") is None
    assert store.get("keep") == "v1"
    assert read_cache(cache_path) == [{"note_name": "keep", "note": "v1"}]
