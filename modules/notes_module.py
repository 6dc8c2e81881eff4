# modules/notes_module.py
from __future__ import annotations
import json
import logging
from typing import Any, Dict, Optional

from flask import Blueprint, Response, current_app, jsonify, request

from services.note_store import NoteStore

log = logging.getLogger("notes.http")

bp = Blueprint("notes", __name__)

# =========================
# Utilidades
# =========================
def _store() -> NoteStore:
    return current_app.extensions["note_store"]

def _body() -> Dict[str, Any]:
    """JSON si viene como objeto; si no, formulario (urlencoded o multipart)."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()

def _as_text(v: Any) -> str:
    """Texto tal cual; otros valores JSON se guardan como JSON (true, ["a"], 3)."""
    return v if isinstance(v, str) else json.dumps(v, ensure_ascii=False)

def _first(body: Dict[str, Any], *keys: str) -> Optional[str]:
    """Primer campo con valor (estilo `a || b`): los vacíos no cuentan."""
    for k in keys:
        v = body.get(k)
        if v:
            return _as_text(v)
    return None

# =========================
# Rutas
# =========================
# <path:name>: los nombres pueden llevar "/" (llega decodificado desde %2F)
@bp.get("/notes/<path:name>")
def get_note(name: str):
    text = _store().get(name)
    if text is None:
        return "Note not found", 404
    return Response(text, status=200, mimetype="text/plain")

@bp.get("/notes")
def list_notes():
    return jsonify(_store().list_notes()), 200

@bp.post("/write")
def write_note():
    body = _body()
    name = _first(body, "note_name", "name")
    text = _first(body, "note", "text") or ""
    if not name:
        return "Note name is required", 400
    if not _store().create(name, text):
        return "Note with this name already exists", 400
    return "Note created", 201

@bp.put("/notes/<path:name>")
def update_note(name: str):
    body = _body()
    if "text" not in body or body["text"] is None:
        return "Note text is required", 400
    text = _as_text(body["text"])
    if not _store().update(name, text):
        return "Note not found", 404
    return "Note updated", 200

@bp.delete("/notes/<path:name>")
def delete_note(name: str):
    if not _store().delete(name):
        return "Note not found", 404
    return "Note deleted", 200

# =========================
# Errores
# =========================
@bp.errorhandler(OSError)
def cache_write_failed(e: OSError):
    # la memoria ya volvió al estado anterior (ver NoteStore._persist)
    log.exception("[notes] no se pudo guardar la caché: %s", e)
    return "Failed to save notes", 500
