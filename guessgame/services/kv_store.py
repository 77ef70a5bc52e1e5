"""
Stockage clé/valeur durable (fichier JSON).

Persisted structure (`players.json`):
{
  "<id>": { record... },
  ...
}

Le fichier entier est réécrit à chaque mutation (atomique via `write_json`).
Chaque enregistrement sérialisé est borné à `max_record_size` octets; un
dépassement est une panne de stockage, pas une erreur métier.
"""
from __future__ import annotations

import logging
from pathlib import Path
from threading import RLock
from typing import Any, Dict, Optional

import orjson

from .errors import StorageFault
from .io_utils import read_json, write_json

logger = logging.getLogger(__name__)


class JsonKVStore:
    """Map durable `int -> dict` chargée à la demande (premier accès)."""

    def __init__(self, path: Path, max_record_size: int) -> None:
        self.path = Path(path)
        self.max_record_size = max_record_size
        self._lock = RLock()
        self._data: Optional[Dict[str, Dict[str, Any]]] = None

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def _records(self) -> Dict[str, Dict[str, Any]]:
        if self._data is None:
            try:
                raw = read_json(self.path)
            except (OSError, orjson.JSONDecodeError) as exc:
                logger.error("Cannot read record store %s: %s", self.path, exc)
                raise StorageFault(f"Cannot read record store {self.path}") from exc
            if raw is not None and not isinstance(raw, dict):
                raise StorageFault(f"Corrupt record store {self.path}")
            self._data = raw or {}
        return self._data

    def _flush(self, data: Dict[str, Dict[str, Any]]) -> None:
        try:
            write_json(self.path, data)
        except OSError as exc:
            logger.error("Cannot write record store %s: %s", self.path, exc)
            raise StorageFault(f"Cannot write record store {self.path}") from exc

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def get(self, key: int) -> Optional[Dict[str, Any]]:
        with self._lock:
            record = self._records().get(str(key))
            return dict(record) if record is not None else None

    def insert(self, key: int, record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Écrit (ou remplace) la valeur et retourne l'ancienne si présente."""
        try:
            size = len(orjson.dumps(record))
        except orjson.JSONEncodeError as exc:
            logger.error("Cannot encode record for key=%s: %s", key, exc)
            raise StorageFault(f"Cannot encode record for key={key}") from exc
        if size > self.max_record_size:
            raise StorageFault(
                f"Record for key={key} is {size} bytes, limit is {self.max_record_size}"
            )
        with self._lock:
            data = dict(self._records())
            previous = data.get(str(key))
            data[str(key)] = dict(record)
            self._flush(data)
            self._data = data
            return previous

    def remove(self, key: int) -> Optional[Dict[str, Any]]:
        with self._lock:
            data = dict(self._records())
            previous = data.pop(str(key), None)
            if previous is None:
                return None
            self._flush(data)
            self._data = data
            return previous

    def contains(self, key: int) -> bool:
        with self._lock:
            return str(key) in self._records()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records())
