"""
Service: id_allocator.py
Rôle :
- Fournir des identifiants joueurs croissants (0, 1, 2, ...) via un compteur durable.

Stockage :
- `id_counter.json` → {"next_id": <int>}

Notes :
- Le compteur est persisté AVANT de rendre l'id : un redémarrage ne réémet jamais
  un id déjà distribué (ids supprimés compris).
- Échec d'écriture → `StorageFault` (fatal, pas de retry à ce niveau).
"""
from __future__ import annotations

import logging
from pathlib import Path
from threading import RLock
from typing import Optional

import orjson

from .errors import StorageFault
from .io_utils import read_json, write_json

logger = logging.getLogger(__name__)

COUNTER_KEY = "next_id"


class IdAllocator:
    def __init__(self, path: Path, start: int = 0) -> None:
        self.path = Path(path)
        self.start = start
        self._lock = RLock()
        self._next: Optional[int] = None

    def _load(self) -> int:
        """Lecture paresseuse du compteur (valeur initiale `start` si absent)."""
        if self._next is None:
            try:
                raw = read_json(self.path)
            except (OSError, orjson.JSONDecodeError) as exc:
                raise StorageFault(f"Cannot read id counter {self.path}") from exc
            if raw is None:
                self._next = self.start
            elif isinstance(raw, dict) and isinstance(raw.get(COUNTER_KEY), int):
                self._next = raw[COUNTER_KEY]
            else:
                raise StorageFault(f"Corrupt id counter {self.path}")
        return self._next

    def peek(self) -> int:
        """Retourne le prochain id sans l'allouer."""
        with self._lock:
            return self._load()

    def next_id(self) -> int:
        """Retourne la valeur courante puis avance le compteur de 1 (persisté)."""
        with self._lock:
            current = self._load()
            try:
                write_json(self.path, {COUNTER_KEY: current + 1})
            except OSError as exc:
                logger.error("Cannot increment id counter %s: %s", self.path, exc)
                raise StorageFault("cannot increment id counter") from exc
            self._next = current + 1
            return current
