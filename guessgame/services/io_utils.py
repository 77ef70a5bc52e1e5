"""
Utilitaires IO JSON (rapides) basés sur orjson.
- read_json(Path)  → Any | None (None si fichier manquant)
- write_json(Path, data) → écrit en binaire, de façon atomique (fichier temporaire + replace)

Attention:
- orjson renvoie/attend des bytes; on lit/écrit en mode binaire.
- write_json ne met pas d'indentation (performance/praticité).
- Les clés de dict doivent être des str (orjson refuse les clés int sans option).
"""
import orjson as json
import os
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any:
    """Lit un fichier JSON (ou None s'il n'existe pas)."""
    if not path.exists():
        return None
    with path.open("rb") as f:
        return json.loads(f.read())


def write_json(path: Path, data: Any) -> None:
    """
    Écrit un fichier JSON de manière sûre (dossier parent créé si absent).
    Le contenu est d'abord écrit dans `<nom>.tmp` puis remplacé d'un bloc,
    un crash en cours d'écriture laisse donc l'ancienne version intacte.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_name(path.name + ".tmp")
    try:
        with tmp.open("wb") as f:
            f.write(json.dumps(data))
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise
