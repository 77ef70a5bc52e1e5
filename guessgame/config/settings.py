"""
Configuration de l'application (Settings)
=========================================

Rôle
----
- Centraliser les paramètres du service (nom, host/port, chemins, règles du jeu).
- Les valeurs par défaut conviennent pour un environnement de dev local.
- Les variables peuvent être surchargées via un fichier `.env` ou l'environnement.

Intégrations
------------
- `pydantic-settings` charge automatiquement les variables d'env et `.env`.
- Les services/routers importent `from guessgame.config.settings import settings`.

Notes
-----
- `DATA_DIR` calcule un chemin relatif au package : `<repo>/guessgame/data`.
- `MAX_RECORD_SIZE` borne la taille d'un enregistrement joueur sérialisé (octets).
- `SECRET_MODULUS=101` donne un nombre secret dans [0, 100] inclus.

Exemples de `.env`
------------------
APP_NAME="Guessing Game Backend (Staging)"
PORT=8080
DATA_DIR="/var/opt/guessgame/data"
MAX_ATTEMPTS=7
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
import os


class Settings(BaseSettings):
    # Nom du service (apparaît dans /health)
    APP_NAME: str = "Guessing Game Backend"
    # Bind réseau (FastAPI / Uvicorn)
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Répertoire des fichiers persistés (compteur d'ids + enregistrements joueurs)
    # Par défaut: <repo>/guessgame/data
    DATA_DIR: str = os.path.join(os.path.dirname(os.path.dirname(__file__)), "data")

    # Règles du mini-jeu
    MAX_ATTEMPTS: int = 7
    WIN_POINTS: int = 10
    SECRET_MODULUS: int = 101

    # Bornes de stockage
    MAX_RECORD_SIZE: int = 1024
    PLAYER_NAME_MAX_LENGTH: int = 200

    # Whitelist CORS des frontends autorisés
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Paramétrage pydantic-settings :
    # - lit le fichier .env (UTF-8) si présent
    # - ignore les clés supplémentaires pour éviter les erreurs
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


# Instance unique importable partout : `settings`
settings = Settings()
