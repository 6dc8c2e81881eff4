from __future__ import annotations

import logging
from pathlib import Path

import pytest

from app import create_app
from services.logging_config import LOGGER_NAME
from services.note_store import NoteStore


@pytest.fixture(autouse=True)
def reset_notes_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def cache_path(tmp_path: Path) -> Path:
    return tmp_path / "notes.json"


@pytest.fixture
def store(cache_path: Path) -> NoteStore:
    return NoteStore.open(cache_path)


@pytest.fixture
def client(store: NoteStore):
    app = create_app(store)
    app.config["TESTING"] = True
    return app.test_client()
