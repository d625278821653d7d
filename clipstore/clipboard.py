"""Adaptadores para el portapapeles del sistema operativo."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import pyperclip

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """No hay mecanismo de portapapeles disponible o la escritura falló."""


class ClipboardPort(ABC):
    """Contrato para escribir texto en el portapapeles."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Copia el texto al portapapeles.

        Raises:
            ClipboardError: si no hay backend de portapapeles disponible.
        """
        ...


class PyperclipClipboard(ClipboardPort):
    """Portapapeles del sistema vía pyperclip."""

    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as e:
            logger.debug("pyperclip copy failed: %s", e)
            raise ClipboardError(str(e)) from e


class MemoryClipboard(ClipboardPort):
    """Portapapeles en memoria, sin efectos en el sistema."""

    def __init__(self, fail_with: str | None = None) -> None:
        self.text: str | None = None
        self.fail_with = fail_with

    def copy(self, text: str) -> None:
        if self.fail_with is not None:
            raise ClipboardError(self.fail_with)
        self.text = text
