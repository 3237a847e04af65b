"""Keyword dictionary stored as a pipe-delimited table, with an interactive editor."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, TextIO

DEFAULT_PATH = "palabras.txt"
RULE = "-" * 85
_HEADERS = ("Palabra", "Traducción", "Funcionalidad")

_MENU = (
    "\n--- CRUD de Palabras ---\n"
    "1. Mostrar palabras\n"
    "2. Agregar palabra\n"
    "3. Actualizar palabra\n"
    "4. Eliminar palabra\n"
    "5. Salir\n"
    "Seleccione una opción: "
)


@dataclass
class Entry:
    """A keyword with its translation and a description of what it does."""

    word: str
    translation: str
    functionality: str


class DuplicateWordError(ValueError):
    """Raised when adding a word that is already in the dictionary."""


class WordNotFoundError(LookupError):
    """Raised when a word is not in the dictionary."""


def initial_entries() -> list[Entry]:
    """Return the entries a fresh dictionary file starts with."""
    return [
        Entry("asm", "ensamblador", "inserta código ensamblador en C++"),
        Entry("auto", "automático", "deduce automáticamente el tipo de una variable"),
        Entry("bool", "booleano", "tipo de dato verdadero/falso"),
        Entry("break", "romper", "termina un bucle o switch"),
        Entry("case", "caso", "define un caso en un switch"),
    ]


def trim(text: str) -> str:
    """Strip spaces and tabs from both ends of ``text``."""
    return text.strip(" \t")


def _file_row(word: str, translation: str, functionality: str) -> str:
    return f"{word:<20} | {translation:<20} | {functionality:<40}"


def _screen_row(word: str, translation: str, functionality: str) -> str:
    return f"{word:<20}{translation:<20}{functionality:<40}"


def save(path, entries: Iterable[Entry]) -> None:
    """Write ``entries`` to ``path`` as a table with a header and a rule."""
    lines = [_file_row(*_HEADERS), RULE]
    lines.extend(_file_row(e.word, e.translation, e.functionality) for e in entries)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write("\n".join(lines) + "\n")


def load(path) -> list[Entry]:
    """Read entries from a table written by :func:`save`.

    The first line and every line holding a dash are skipped, as are rows
    with an empty field.
    """
    entries = []
    with open(path, encoding="utf-8") as fh:
        for index, raw in enumerate(fh):
            line = raw.rstrip("\n")
            if index == 0 or "-" in line:
                continue
            parts = line.split("|") + ["", ""]
            fields = tuple(trim(part) for part in parts[:3])
            if all(fields):
                entries.append(Entry(*fields))
    return entries


def render_table(entries: Iterable[Entry]) -> str:
    """Return the on-screen table of ``entries``."""
    lines = [_screen_row(*_HEADERS), RULE]
    lines.extend(_screen_row(e.word, e.translation, e.functionality) for e in entries)
    return "\n".join(lines) + "\n"


def _find(entries: list[Entry], word: str) -> Optional[Entry]:
    return next((entry for entry in entries if entry.word == word), None)


def add_entry(entries: list[Entry], entry: Entry) -> Entry:
    """Append ``entry`` unless its word is already present."""
    if _find(entries, entry.word) is not None:
        raise DuplicateWordError(entry.word)
    entries.append(entry)
    return entry


def update_entry(entries: list[Entry], word: str, translation: str, functionality: str) -> Entry:
    """Replace the translation and functionality of the first entry for ``word``."""
    entry = _find(entries, word)
    if entry is None:
        raise WordNotFoundError(word)
    entry.translation = translation
    entry.functionality = functionality
    return entry


def remove_entry(entries: list[Entry], word: str) -> int:
    """Remove every entry for ``word`` and return how many were removed."""
    kept = [entry for entry in entries if entry.word != word]
    removed = len(entries) - len(kept)
    if not removed:
        raise WordNotFoundError(word)
    entries[:] = kept
    return removed


def _next_token(infile: TextIO) -> str:
    while True:
        line = infile.readline()
        if not line:
            raise EOFError
        tokens = line.split()
        if tokens:
            return tokens[0]


def _next_line(infile: TextIO) -> str:
    line = infile.readline()
    if not line:
        raise EOFError
    return line.rstrip("\r\n")


def _persist(path, entries: list[Entry]) -> None:
    try:
        save(path, entries)
    except OSError:
        print(f"Error al abrir el archivo para guardar: {path}", file=sys.stderr)


def _add(path, entries: list[Entry], infile: TextIO, out: TextIO) -> None:
    out.write("Ingrese la palabra: ")
    word = trim(_next_token(infile))
    if _find(entries, word) is not None:
        out.write("La palabra ya existe en el diccionario.\n")
        return
    out.write("Ingrese la traducción: ")
    translation = trim(_next_token(infile))
    out.write("Ingrese la funcionalidad: ")
    functionality = trim(_next_line(infile))
    entry = add_entry(entries, Entry(word, translation, functionality))
    _persist(path, entries)
    out.write("\nPalabra agregada correctamente:\n")
    out.write(render_table([entry]))


def _update(path, entries: list[Entry], infile: TextIO, out: TextIO) -> None:
    out.write("Ingrese la palabra a actualizar: ")
    word = trim(_next_token(infile))
    if _find(entries, word) is None:
        out.write("Palabra no encontrada.\n")
        return
    out.write("Ingrese la nueva traducción: ")
    translation = trim(_next_token(infile))
    out.write("Ingrese la nueva funcionalidad: ")
    functionality = trim(_next_line(infile))
    update_entry(entries, word, translation, functionality)
    _persist(path, entries)
    out.write("Palabra actualizada correctamente.\n")


def _remove(path, entries: list[Entry], infile: TextIO, out: TextIO) -> None:
    out.write("Ingrese la palabra a eliminar: ")
    word = trim(_next_token(infile))
    try:
        remove_entry(entries, word)
    except WordNotFoundError:
        out.write("Palabra no encontrada.\n")
        return
    _persist(path, entries)
    out.write("Palabra eliminada correctamente.\n")


def run(path=DEFAULT_PATH, infile: Optional[TextIO] = None, outfile: Optional[TextIO] = None) -> None:
    """Run the interactive dictionary editor until the user exits or input ends."""
    infile = sys.stdin if infile is None else infile
    out = sys.stdout if outfile is None else outfile

    if not Path(path).exists():
        _persist(path, initial_entries())
    try:
        entries = load(path)
    except OSError:
        print(f"Error al abrir el archivo para cargar: {path}", file=sys.stderr)
        entries = []

    actions = {2: _add, 3: _update, 4: _remove}
    try:
        while True:
            out.write(_MENU)
            token = _next_token(infile)
            try:
                choice = int(token)
            except ValueError:
                out.write("Por favor, ingrese un número válido.\n")
                continue
            if choice == 1:
                out.write(render_table(entries))
            elif choice in actions:
                actions[choice](path, entries, infile, out)
            elif choice == 5:
                out.write("Saliendo del programa.\n")
                return
            else:
                out.write("Opción no válida. Por favor, seleccione una opción del menú.\n")
    except EOFError:
        return