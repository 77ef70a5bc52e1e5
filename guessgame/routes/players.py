"""
Module routes/players.py
Rôle:
- Endpoints joueurs : création, lecture, mise à jour du score, suppression, proposition.

Intégrations:
- PlayerService via `Depends(get_player_service)`.
- NotFoundError → 404, GameOverError → 409 (detail = message + vue publique réinitialisée).

Notes:
- DELETE renvoie l'enregistrement complet (secret compris), comme l'opération de service.
"""
from fastapi import APIRouter, Depends, HTTPException, Path

from guessgame.models.player import U64_MAX, GuessPayload, Player, PlayerPayload, PublicPlayer, ScorePayload
from guessgame.services.errors import GameOverError, NotFoundError
from guessgame.services.player_service import PlayerService, get_player_service

router = APIRouter(prefix="/players", tags=["players"])


@router.post("", response_model=PublicPlayer)
async def create_player(payload: PlayerPayload, service: PlayerService = Depends(get_player_service)):
    """Inscription d'un joueur → score 0, 7 tentatives, indice vide."""
    return service.create_player(payload.name)


@router.get("/{player_id}", response_model=PublicPlayer)
async def get_player(player_id: int = Path(..., ge=0, le=U64_MAX), service: PlayerService = Depends(get_player_service)):
    try:
        return service.get_player(player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.msg)


@router.put("/{player_id}/score", response_model=PublicPlayer)
async def update_score(
    payload: ScorePayload,
    player_id: int = Path(..., ge=0, le=U64_MAX),
    service: PlayerService = Depends(get_player_service),
):
    """Écrase le score du joueur (hors flux de jeu)."""
    try:
        return service.set_score(player_id, payload.score)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.msg)


@router.delete("/{player_id}", response_model=Player)
async def delete_player(player_id: int = Path(..., ge=0, le=U64_MAX), service: PlayerService = Depends(get_player_service)):
    try:
        return service.delete_player(player_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.msg)


@router.post("/{player_id}/guess", response_model=PublicPlayer)
async def play_game(
    payload: GuessPayload,
    player_id: int = Path(..., ge=0, le=U64_MAX),
    service: PlayerService = Depends(get_player_service),
):
    """
    Soumet une proposition.
    - 200 + indice ("higher"/"lower"/gagné) tant que la manche continue,
    - 409 quand la manche était épuisée (une nouvelle manche vient de démarrer).
    """
    try:
        return service.guess(player_id, payload.guess)
    except GameOverError as e:
        raise HTTPException(status_code=409, detail={"msg": e.msg, "player": e.player.model_dump()})
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.msg)
