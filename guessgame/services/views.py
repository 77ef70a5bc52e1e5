"""
Vues publiques des joueurs.
- project(player, clue) → PublicPlayer : ne copie jamais secret_number, created_at, updated_at.
"""
from guessgame.models.player import Player, PublicPlayer


def project(player: Player, clue: str = "") -> PublicPlayer:
    """Vue publique d'un joueur (indice vide hors réponse à une proposition)."""
    return PublicPlayer(
        id=player.id,
        name=player.name,
        score=player.score,
        attempts_left=player.attempts_left,
        clue=clue,
    )
