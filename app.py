from __future__ import annotations
from pathlib import Path

from flask import Flask, jsonify

from modules.notes_module import bp as notes_bp
from services.note_store import NoteStore

# Carpeta con el formulario HTML (se sirve en la raíz)
DEFAULT_STATIC_DIR = Path(__file__).parent / "web"


def create_app(store: NoteStore, static_dir=None) -> Flask:
    static_dir = Path(static_dir or DEFAULT_STATIC_DIR).resolve()
    app = Flask(__name__, static_folder=str(static_dir), static_url_path="")
    app.extensions["note_store"] = store
    app.register_blueprint(notes_bp)

    @app.get("/")
    def home():
        if (static_dir / "index.html").is_file():
            return app.send_static_file("index.html")
        return "Notes server OK"

    @app.get("/health")
    def health():
        return jsonify({"status": "ok", "app": "notes-server", "notes": len(store)})

    return app
