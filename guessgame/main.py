"""
Application FastAPI — Point d'entrée
====================================

Rôle
----
- Instancie l'app FastAPI, configure le CORS pour le front,
- Monte les routeurs (joueurs + santé),
- Journalise la liste des routes au démarrage.

Notes
-----
- ⚠️ Le middleware CORS doit être ajouté AVANT les include_router.
- Garder `settings.ALLOWED_ORIGINS` en phase avec les URLs du front.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from guessgame.routes.players import router as players_router
from guessgame.routes.health import router as health_router

from guessgame.config.settings import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Au démarrage: liste les routes (path + méthodes) dans les logs (diagnostic)."""
    logger.info("== Data dir == %s", settings.DATA_DIR)
    for r in app.routes:
        methods = getattr(r, "methods", None)
        if methods:
            logger.info("route %s %s", r.path, sorted(methods))
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(players_router)
app.include_router(health_router)


@app.get("/")
async def root():
    """Ping basique : permet de vérifier que l'app tourne."""
    return {"ok": True, "service": settings.APP_NAME}
