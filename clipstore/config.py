"""Configuración desde variables de entorno / archivo .env."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_STORE_FILE = "clipboard.json"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@dataclass
class Config:
    """Configuración de la aplicación."""
    store_file: str = DEFAULT_STORE_FILE
    log_level: str = DEFAULT_LOG_LEVEL


def load_config(env_file: Path | str | None = None) -> Config:
    """
    Carga ./.env del directorio de trabajo (las variables ya definidas ganan) y construye Config.

    Variables: CLIPBOARD_FILE, CLIPBOARD_LOG_LEVEL.
    """
    load_dotenv(dotenv_path=env_file or Path.cwd() / ".env", override=False)
    return Config(
        store_file=os.getenv("CLIPBOARD_FILE") or DEFAULT_STORE_FILE,
        log_level=(os.getenv("CLIPBOARD_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configura logging a stderr para no mezclarlo con la salida de comandos."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
