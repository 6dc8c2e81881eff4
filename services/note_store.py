from __future__ import annotations
import logging
import threading
from pathlib import Path
from typing import Dict, List, Optional

from services import cache_file

log = logging.getLogger("notes.store")


class NoteStore:
    """
    Notas en memoria (nombre -> texto), respaldadas por el archivo de caché.
    - Cada mutación reescribe el archivo completo antes de retornar.
    - Si la escritura falla, la memoria vuelve al estado anterior y el OSError sube.
    """
    def __init__(self, cache_path, notes: Optional[Dict[str, str]] = None):
        self.cache_path = Path(cache_path)
        self._notes: Dict[str, str] = dict(notes or {})
        self._lock = threading.Lock()

    @classmethod
    def open(cls, cache_path) -> "NoteStore":
        return cls(cache_path, cache_file.load(cache_path))

    def __len__(self) -> int:
        return len(self._notes)

    def __contains__(self, name: str) -> bool:
        return name in self._notes

    def get(self, name: str) -> Optional[str]:
        return self._notes.get(name)

    def list_notes(self) -> List[Dict[str, str]]:
        with self._lock:
            return [{"name": n, "text": t} for n, t in self._notes.items()]

    def create(self, name: str, text: str) -> bool:
        """Retorna False si ya existe una nota con ese nombre."""
        with self._lock:
            if name in self._notes:
                return False
            snapshot = dict(self._notes)
            self._notes[name] = text
            self._persist(snapshot)
        log.info("[store] nota creada: %s", name)
        return True

    def update(self, name: str, text: str) -> bool:
        """Retorna False si la nota no existe (no toca el archivo)."""
        with self._lock:
            if name not in self._notes:
                return False
            snapshot = dict(self._notes)
            self._notes[name] = text
            self._persist(snapshot)
        log.info("[store] nota actualizada: %s", name)
        return True

    def delete(self, name: str) -> bool:
        """Retorna False si la nota no existe (no toca el archivo)."""
        with self._lock:
            if name not in self._notes:
                return False
            snapshot = dict(self._notes)
            del self._notes[name]
            self._persist(snapshot)
        log.info("[store] nota borrada: %s", name)
        return True

    def _persist(self, snapshot: Dict[str, str]) -> None:
        # llamar con el lock tomado
        try:
            cache_file.save(self.cache_path, self._notes)
        except OSError:
            self._notes = snapshot
            raise
