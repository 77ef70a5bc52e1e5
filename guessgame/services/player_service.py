"""
Service: player_service.py
Rôle :
- Exposer les opérations joueurs (création, lecture, score, suppression, proposition).
- Orchestrer PlayerStore (persistance) + GameEngine (règles) + views (projection publique).

Concurrence :
- Chaque opération s'exécute sous un verrou unique (RLock) : pas d'entrelacement entre
  deux appels, pas de mise à jour partielle visible.

Intégrations :
- `get_player_service()` : instance partagée, créée au premier accès sur `settings.DATA_DIR`.
- Les routes la reçoivent via `Depends(get_player_service)` (remplaçable en test).
"""
from __future__ import annotations

import logging
from pathlib import Path
from threading import RLock
from typing import Optional

from guessgame.config.settings import settings
from guessgame.engine.game_engine import GameEngine
from guessgame.models.player import Player, PublicPlayer
from .errors import GameOverError, NotFoundError
from .player_store import PlayerStore
from .views import project

logger = logging.getLogger(__name__)


class PlayerService:
    def __init__(self, store: PlayerStore, engine: Optional[GameEngine] = None) -> None:
        self.store = store
        self.engine = engine or GameEngine()
        self._lock = RLock()

    def create_player(self, name: str) -> PublicPlayer:
        with self._lock:
            player = self.store.create(name, now=self.engine.now())
            logger.info("player created id=%s name=%r", player.id, player.name)
            return project(player)

    def get_player(self, player_id: int) -> PublicPlayer:
        with self._lock:
            player = self.store.get(player_id)
            if player is None:
                raise NotFoundError(f"A player with id={player_id} not found")
            return project(player)

    def set_score(self, player_id: int, score: int) -> PublicPlayer:
        with self._lock:
            player = self.store.get(player_id)
            if player is None:
                raise NotFoundError(
                    f"Could not update score for player with id={player_id}. Player not found."
                )
            updated = self.engine.set_score(player, score)
            self.store.insert_or_replace(updated)
            return project(updated)

    def delete_player(self, player_id: int) -> Player:
        """Supprime et retourne l'enregistrement complet (secret inclus : ne pas l'exposer)."""
        with self._lock:
            removed = self.store.remove(player_id)
            if removed is None:
                raise NotFoundError(
                    f"Could not delete player with id={player_id}. Player not found."
                )
            logger.info("player deleted id=%s", player_id)
            return removed

    def guess(self, player_id: int, guess: int) -> PublicPlayer:
        """
        Applique une proposition et persiste le nouvel état avant de répondre.
        - Manche épuisée → la manche est réinitialisée, persistée, puis GameOverError.
        """
        with self._lock:
            player = self.store.get(player_id)
            if player is None:
                raise NotFoundError(f"Player with id={player_id} not found. No clue available.")

            outcome = self.engine.apply_guess(player, guess)
            self.store.insert_or_replace(outcome.player)

            if outcome.game_over:
                logger.info("game over id=%s, new round started", player_id)
                raise GameOverError(outcome.clue, project(outcome.player))
            if outcome.player.score > player.score:
                logger.info("round won id=%s score=%s", player_id, outcome.player.score)
            return project(outcome.player, outcome.clue)


# -----------------------------
# Instance partagée (lazy)
# -----------------------------
_instance: Optional[PlayerService] = None
_INSTANCE_LOCK = RLock()


def get_player_service() -> PlayerService:
    """Garantit une unique instance `PlayerService` pour tout le backend (lazy-load)."""
    global _instance
    with _INSTANCE_LOCK:
        if _instance is None:
            _instance = PlayerService(PlayerStore.open(Path(settings.DATA_DIR)))
        return _instance
