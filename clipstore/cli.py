"""
clipboard - CLI para guardar valores por clave y copiarlos al portapapeles del sistema.
El mapa se persiste en un archivo JSON en el directorio de trabajo.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import NoReturn

from clipstore.clipboard import ClipboardError, ClipboardPort, PyperclipClipboard
from clipstore.config import load_config, setup_logging
from clipstore.store import LoadError, SaveError, Store

logger = logging.getLogger(__name__)

USAGE = """\
Usage:
  clipboard add <key> <value>     - Store a value with the given key
  clipboard retrieve <key>        - Retrieve and display the value
  clipboard copy <key>            - Retrieve value and copy to OS clipboard
  clipboard list                  - List all stored keys

Examples:
  clipboard add mykey "Hello World"
  clipboard retrieve mykey
  clipboard copy mykey"""


class _Parser(argparse.ArgumentParser):
    """ArgumentParser que reporta errores por stdout y sale con código 1."""

    def error(self, message: str) -> NoReturn:
        print(f"Error: {message}")
        print_usage()
        sys.exit(1)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parsea opciones globales; el comando y sus argumentos se toman tal cual."""
    parser = _Parser(
        prog="clipboard",
        description="Almacén persistente clave -> valor con copia al portapapeles.",
        epilog=USAGE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-f",
        "--file",
        type=Path,
        default=None,
        help="Archivo JSON del almacén (default: CLIPBOARD_FILE o clipboard.json)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Logging de diagnóstico (DEBUG) por stderr",
    )
    parser.add_argument("command", nargs="?", help="add | retrieve | copy | list")
    parser.add_argument("args", nargs=argparse.REMAINDER, help="Argumentos del comando")
    return parser.parse_args(argv)


def print_usage() -> None:
    print(USAGE)


def add_value(store: Store, key: str, value: str) -> int:
    """Guarda key=value y persiste el almacén."""
    if key == "":
        print("Error: Key cannot be empty")
        return 1

    store.set(key, value)
    try:
        store.save()
    except SaveError as e:
        print(f"Error saving clipboard: {e}")
        return 1

    print(f"Added '{value}' with key '{key}'")
    return 0


def retrieve_value(store: Store, key: str, clipboard: ClipboardPort | None = None) -> int:
    """Imprime el valor; con clipboard intenta copiarlo antes al portapapeles."""
    if key == "":
        print("Error: Key cannot be empty")
        return 1

    value = store.get(key)
    if value is None:
        print(f"Error: No value found for key '{key}'")
        return 1

    if clipboard is not None:
        try:
            clipboard.copy(value)
        except ClipboardError as e:
            # Sin portapapeles (p. ej. headless): se cae a imprimir el valor
            logger.info("Clipboard unavailable: %s", e)
            print(f"Warning: Failed to copy to OS clipboard: {e}")
        else:
            print(f"Copied to OS clipboard: {value}")
            return 0

    print(value)
    return 0


def list_keys(store: Store) -> int:
    """Lista las claves guardadas (orden no garantizado)."""
    if len(store) == 0:
        print("Clipboard is empty")
        return 0

    print("Stored keys:")
    for key in store.keys():
        print(f"  - {key}")
    return 0


def main(argv: list[str] | None = None, clipboard: ClipboardPort | None = None) -> int:
    """Punto de entrada."""
    args = parse_args(argv)
    config = load_config()
    setup_logging("DEBUG" if args.verbose else config.log_level)

    store_path = args.file if args.file is not None else Path(config.store_file)
    try:
        store = Store.load(store_path)
    except LoadError as e:
        print(f"Error loading clipboard: {e}")
        return 1

    if args.command is None:
        print_usage()
        return 1

    command = args.command.lower()
    params: list[str] = args.args
    logger.debug("Dispatching %r with %d argument(s) against %s", command, len(params), store_path)

    if command == "add":
        if len(params) < 2:
            print("Error: 'add' command requires both key and value")
            print("Usage: clipboard add <key> <value>")
            return 1
        # Los tokens restantes forman el valor (admite espacios)
        return add_value(store, params[0], " ".join(params[1:]))

    if command in ("retrieve", "copy"):
        if not params:
            print(f"Error: '{command}' command requires a key")
            print(f"Usage: clipboard {command} <key>")
            return 1
        if command == "copy":
            return retrieve_value(store, params[0], clipboard or PyperclipClipboard())
        return retrieve_value(store, params[0])

    if command == "list":
        return list_keys(store)

    print(f"Error: Unknown command '{command}'")
    print_usage()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
