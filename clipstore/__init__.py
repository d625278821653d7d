"""Almacén persistente clave -> valor con copia opcional al portapapeles del sistema."""

__version__ = "0.1.0"

from clipstore.clipboard import ClipboardError, ClipboardPort, MemoryClipboard, PyperclipClipboard
from clipstore.config import Config, load_config
from clipstore.store import LoadError, SaveError, Store, StoreError
from clipstore.cli import main

__all__ = [
    "Store",
    "StoreError",
    "LoadError",
    "SaveError",
    "ClipboardPort",
    "ClipboardError",
    "PyperclipClipboard",
    "MemoryClipboard",
    "Config",
    "load_config",
    "main",
    "__version__",
]
