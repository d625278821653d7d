"""Store persistente clave -> valor respaldado por un archivo JSON."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Error base del almacén."""


class LoadError(StoreError):
    """El archivo existe pero no se puede leer o decodificar."""


class SaveError(StoreError):
    """El archivo no se puede crear o escribir."""


class Store:
    """Almacén clave -> valor persistido en un archivo JSON."""

    def __init__(self, path: Path | str, data: dict[str, str] | None = None) -> None:
        self.path = Path(path)
        self._data: dict[str, str] = dict(data or {})

    @classmethod
    def load(cls, path: Path | str) -> Store:
        """Carga el archivo; si no existe devuelve un almacén vacío."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No store file at %s, starting empty", path)
            return cls(path)
        except UnicodeDecodeError as e:
            raise LoadError(f"failed to decode clipboard data in {path}: {e}") from e
        except OSError as e:
            raise LoadError(f"failed to open clipboard file {path}: {e}") from e

        try:
            raw = json.loads(text)
        except ValueError as e:
            raise LoadError(f"failed to decode clipboard data in {path}: {e}") from e

        if not isinstance(raw, dict):
            raise LoadError(
                f"failed to decode clipboard data in {path}: "
                f"expected a JSON object, got {type(raw).__name__}"
            )
        for key, value in raw.items():
            if not isinstance(value, str):
                raise LoadError(
                    f"failed to decode clipboard data in {path}: "
                    f"value for key {key!r} is not a string"
                )

        logger.debug("Loaded %d entries from %s", len(raw), path)
        return cls(path, raw)

    def save(self) -> None:
        """Escribe todo el mapa al archivo (temporal + rename atómico)."""
        tmp_name = None
        try:
            payload = json.dumps(self._data, indent=2, ensure_ascii=False) + "\n"
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, ValueError) as e:
            raise SaveError(f"failed to write clipboard file {self.path}: {e}") from e
        finally:
            # Solo queda temporal si os.replace no llegó a ejecutarse
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        logger.debug("Saved %d entries to %s", len(self._data), self.path)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def keys(self) -> list[str]:
        return list(self._data.keys())

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data
