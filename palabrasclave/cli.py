"""Main menu that starts the dictionary editor or the code translator."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from palabrasclave import dictionary, translator

_MENU = (
    "==========================================\n"
    "|           --- MENU PRINCIPAL ---       |\n"
    "==========================================\n"
    "1 - Gestionar Diccionario (CRUD)\n"
    "2 - Traducir Código C++\n"
    "3 - Salir\n"
    "==========================================\n"
    "Selecciona una opción: "
)


def _next_token(infile: TextIO) -> str:
    while True:
        line = infile.readline()
        if not line:
            raise EOFError
        tokens = line.split()
        if tokens:
            return tokens[0]


def main(argv=None) -> int:
    """Run the main menu; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="palabrasclave",
        description="Diccionario de palabras clave y traductor de código.",
    )
    parser.add_argument(
        "--file",
        default=dictionary.DEFAULT_PATH,
        help="archivo del diccionario (por defecto: %(default)s)",
    )
    args = parser.parse_args(argv)
    infile, out = sys.stdin, sys.stdout

    while True:
        out.write(_MENU)
        try:
            token = _next_token(infile)
        except EOFError:
            return 0
        try:
            choice = int(token)
        except ValueError:
            out.write("Por favor, ingresa un número válido.\n")
            continue

        if choice == 1:
            out.write("\n=== GESTIONAR DICCIONARIO ===\n")
            dictionary.run(args.file, infile, out)
        elif choice == 2:
            out.write("\n=== TRADUCIR CÓDIGO C++ ===\n")
            translator.run(args.file, infile, out)
        elif choice == 3:
            out.write("Saliendo del programa...\n")
            return 0
        else:
            out.write("Opción no válida. Por favor, selecciona una opción del menú.\n")
        out.write("\n")


if __name__ == "__main__":
    sys.exit(main())