"""
Module routes/health.py
Rôle:
- Endpoint de santé (service OK + volumétrie du stockage).

Intégrations:
- settings: nom d'app.
- PlayerService: nombre d'enregistrements et prochain id à allouer.
"""
from fastapi import APIRouter, Depends

from guessgame.config.settings import settings
from guessgame.services.player_service import PlayerService, get_player_service

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(service: PlayerService = Depends(get_player_service)):
    """Renvoie un OK minimal avec le nom de service et l'état du stockage."""
    return {
        "ok": True,
        "service": settings.APP_NAME,
        "players": service.store.count(),
        "next_id": service.store.ids.peek(),
    }
