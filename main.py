# main.py
from __future__ import annotations
import logging
import sys

from app import create_app
from services.cache_file import CacheParseError
from services.logging_config import setup_logging
from services.note_store import NoteStore
from services.settings import parse_settings

log = logging.getLogger("notes.server")


def main(argv=None) -> int:
    setup_logging()
    # sale con código 2 si falta --host/--port/--cache
    settings = parse_settings(argv)

    try:
        store = NoteStore.open(settings.cache)
    except (CacheParseError, OSError) as e:
        # sin caché válida no arrancamos
        log.error("[cache] error leyendo %s: %s", settings.cache, e)
        return 1

    app = create_app(store, settings.static_dir)
    log.info("[server] iniciando en %s:%s (caché: %s)", settings.host, settings.port, settings.cache)
    app.run(host=settings.host, port=settings.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
