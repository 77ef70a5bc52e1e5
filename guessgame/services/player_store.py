"""
Service: player_store.py
Rôle :
- Posséder les enregistrements `Player` indexés par id (au plus un Player par id).
- Encapsuler le stockage clé/valeur durable et l'allocateur d'ids.

Notes :
- `insert_or_replace` : upsert "dernier écrit gagne", sans fusion avec l'ancienne valeur.
- Les absences sont rendues sous forme de `None`; la traduction en `NotFoundError`
  se fait au niveau service (message propre à chaque opération).
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from guessgame.config.settings import settings
from guessgame.models.player import Player
from .id_allocator import IdAllocator
from .kv_store import JsonKVStore

PLAYERS_FILENAME = "players.json"
COUNTER_FILENAME = "id_counter.json"


class PlayerStore:
    def __init__(self, records: JsonKVStore, ids: IdAllocator) -> None:
        self.records = records
        self.ids = ids

    @classmethod
    def open(cls, data_dir: Path, max_record_size: int = settings.MAX_RECORD_SIZE) -> "PlayerStore":
        """Construit un store fichier sous `data_dir` (players.json + id_counter.json)."""
        base = Path(data_dir)
        return cls(
            records=JsonKVStore(base / PLAYERS_FILENAME, max_record_size=max_record_size),
            ids=IdAllocator(base / COUNTER_FILENAME),
        )

    def get(self, player_id: int) -> Optional[Player]:
        record = self.records.get(player_id)
        return Player.model_validate(record) if record is not None else None

    def insert_or_replace(self, player: Player) -> Optional[Player]:
        previous = self.records.insert(player.id, player.model_dump())
        return Player.model_validate(previous) if previous is not None else None

    def remove(self, player_id: int) -> Optional[Player]:
        previous = self.records.remove(player_id)
        return Player.model_validate(previous) if previous is not None else None

    def create(self, name: str, now: int) -> Player:
        """Alloue un id neuf et stocke un joueur vierge (score 0, manche non initialisée)."""
        player = Player(
            id=self.ids.next_id(),
            name=name,
            score=0,
            secret_number=0,
            attempts_left=settings.MAX_ATTEMPTS,
            created_at=now,
            updated_at=None,
        )
        self.insert_or_replace(player)
        return player

    def contains(self, player_id: int) -> bool:
        return self.records.contains(player_id)

    def count(self) -> int:
        return len(self.records)
