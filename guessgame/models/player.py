"""
Models / player.py
Rôle:
- Définir l'enregistrement joueur stocké (Player) et sa projection publique (PublicPlayer).
- Définir les payloads d'entrée des routes (création, score, proposition).

Champs Player:
- id: identifiant numérique unique (jamais réutilisé, même après suppression).
- name: nom d'affichage (saisi à la création, jamais modifié par le jeu).
- score: points cumulés (+10 par nombre trouvé, écrasable via set_score).
- secret_number: nombre à deviner dans [0, 100]; 0 = manche pas encore initialisée.
- attempts_left: tentatives restantes dans la manche courante (7 au départ).
- created_at / updated_at: horodatages en nanosecondes depuis l'epoch.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from guessgame.config.settings import settings

U64_MAX = 2**64 - 1


class Player(BaseModel):
    """Enregistrement complet (contient le nombre secret, ne jamais l'exposer tel quel)."""
    id: int = Field(..., ge=0, le=U64_MAX)
    name: str
    score: int = Field(0, ge=0, le=U64_MAX)
    secret_number: int = Field(0, ge=0)  # 0 → manche non initialisée
    attempts_left: int = Field(settings.MAX_ATTEMPTS, ge=0)
    created_at: int
    updated_at: Optional[int] = None


class PublicPlayer(BaseModel):
    """Vue publique d'un joueur (sans secret ni horodatages)."""
    id: int
    name: str
    score: int
    attempts_left: int
    clue: str = ""  # indice : vide sauf en réponse à une proposition


class PlayerPayload(BaseModel):
    name: str = Field(..., max_length=settings.PLAYER_NAME_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value


class ScorePayload(BaseModel):
    score: int = Field(..., ge=0, le=U64_MAX)


class GuessPayload(BaseModel):
    guess: int = Field(..., ge=0, le=U64_MAX)
