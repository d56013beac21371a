"""Carga do arquivo `.env` local.

Variáveis já definidas no ambiente nunca são sobrescritas.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"


def load_env_file(path: str | Path | None = None) -> bool:
    """Pré-popula variáveis de ambiente ausentes a partir de um arquivo.

    Args:
        path: Caminho do arquivo. Se None, usa RELAY_ENV_FILE ou `.env`
            no diretório corrente.

    Returns:
        True se o arquivo existia e foi carregado.
    """
    env_path = Path(path or os.getenv("RELAY_ENV_FILE", DEFAULT_ENV_FILE))
    if not env_path.is_file():
        return False

    load_dotenv(env_path, override=False)
    logger.debug("env_file_loaded", extra={"path": str(env_path)})
    return True
