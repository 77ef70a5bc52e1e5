"""
Erreurs du domaine joueurs / mini-jeu.

- NotFoundError : l'id référencé n'existe pas (seule erreur "métier" typée).
- GameOverError : signal de fin de manche (tentatives épuisées), porte la vue publique
  du joueur déjà réinitialisé pour la manche suivante.
- StorageFault  : panne d'infrastructure (écriture du compteur/enregistrement impossible,
  fichier corrompu, enregistrement trop gros). Non rattrapée par les routes → 500.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from guessgame.models.player import PublicPlayer


class PlayerError(LookupError):
    """Base des erreurs typées renvoyées à l'appelant."""

    def __init__(self, msg: str) -> None:
        super().__init__(msg)
        self.msg = msg


class NotFoundError(PlayerError):
    """Aucun joueur pour l'id demandé."""


class GameOverError(PlayerError):
    """La manche est terminée faute de tentatives; une nouvelle manche a démarré."""

    def __init__(self, msg: str, player: "PublicPlayer") -> None:
        super().__init__(msg)
        self.player = player


class StorageFault(RuntimeError):
    """Erreur encapsulant un échec du stockage durable (non récupérable)."""
