"""
cache_file.py
Archivo de caché JSON donde viven las notas en disco.

Formato: lista JSON de objetos {"note_name": str, "note": str}, con indentación
de 2 espacios. Se lee una sola vez al arrancar y se reescribe completo en cada
mutación.

Funciones principales:
- load(path)         -> dict nombre -> texto (crea el archivo con [] si no existe)
- save(path, notes)  -> reescribe el archivo completo
"""

from __future__ import annotations
import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Union

log = logging.getLogger("notes.cache")

PathLike = Union[str, Path]


class CacheParseError(Exception):
    """El archivo existe pero no es una lista válida de notas."""


def _records(notes: Dict[str, str]) -> List[Dict[str, str]]:
    return [{"note_name": name, "note": text} for name, text in notes.items()]


def load(path: PathLike) -> Dict[str, str]:
    """
    Carga el archivo de caché.
    Si no existe, lo crea vacío ([]) y retorna un dict vacío.
    Lanza CacheParseError si el contenido no tiene la forma esperada.
    """
    p = Path(path)
    if not p.exists():
        p.parent.mkdir(parents=True, exist_ok=True)
        save(p, {})
        log.info("[cache] archivo creado en %s", p)
        return {}

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CacheParseError(f"{p}: JSON inválido ({e})") from e

    if not isinstance(data, list):
        raise CacheParseError(f"{p}: se esperaba una lista, llegó {type(data).__name__}")

    notes: Dict[str, str] = {}
    for i, item in enumerate(data):
        if not isinstance(item, dict) or "note_name" not in item or "note" not in item:
            raise CacheParseError(f"{p}: la entrada {i} no tiene note_name/note")
        name, text = item["note_name"], item["note"]
        if not isinstance(name, str) or not isinstance(text, str):
            raise CacheParseError(f"{p}: la entrada {i} tiene valores que no son texto")
        # duplicados: gana el último
        notes[name] = text

    log.info("[cache] %d notas cargadas desde %s", len(notes), p)
    return notes


def save(path: PathLike, notes: Dict[str, str]) -> None:
    """Reescribe el archivo completo con todas las notas."""
    p = Path(path)
    tmp = p.with_name(p.name + ".tmp")
    try:
        tmp.write_text(json.dumps(_records(notes), indent=2, ensure_ascii=False), encoding="utf-8")
        os.replace(tmp, p)
    except OSError:
        # no dejar un .tmp a medias; el archivo anterior sigue intacto
        tmp.unlink(missing_ok=True)
        raise
    log.info("[cache] guardado en %s (%d notas)", p, len(notes))
