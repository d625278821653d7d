"""Fixtures compartidos: entorno aislado y ejecución del CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from clipstore.cli import main
from clipstore.clipboard import ClipboardPort, MemoryClipboard

ENV_VARS = ("CLIPBOARD_FILE", "CLIPBOARD_LOG_LEVEL")


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Cada test corre en su propio directorio y sin variables CLIPBOARD_*."""
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        # setenv + delenv: lo que cargue un .env también se deshace al final
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "clipboard.json"


@pytest.fixture
def clipboard() -> MemoryClipboard:
    return MemoryClipboard()


@pytest.fixture
def run_cli(
    capsys: pytest.CaptureFixture[str], clipboard: MemoryClipboard
) -> Callable[..., tuple[int, str]]:
    """Ejecuta main() como una invocación independiente y devuelve (exit, stdout)."""

    def _run(*argv: str, clipboard_port: ClipboardPort | None = None) -> tuple[int, str]:
        code = main(list(argv), clipboard=clipboard_port or clipboard)
        return code, capsys.readouterr().out

    return _run
