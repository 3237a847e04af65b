"""Word-by-word translation of source code using the keyword dictionary."""

from __future__ import annotations

import sys
from typing import Iterable, Mapping, Optional, TextIO

from palabrasclave.dictionary import DEFAULT_PATH


def load_mapping(path) -> dict[str, str]:
    """Read a word-to-translation mapping from a dictionary table file.

    Words lose trailing spaces only, so translations keep the space that
    follows the column separator.
    """
    mapping: dict[str, str] = {}
    with open(path, encoding="utf-8") as fh:
        for index, raw in enumerate(fh):
            line = raw.rstrip("\n")
            if index == 0 or "-" in line:
                continue
            parts = line.split("|") + ["", ""]
            mapping[parts[0].rstrip(" ")] = parts[1].rstrip(" ")
    return mapping


def translate_lines(lines: Iterable[str], mapping: Mapping[str, str]) -> list[str]:
    """Translate each line word by word, marking blocks outside functions.

    A word holding ``()`` opens a function; outside one, ``{`` and ``}``
    become ``inicio`` and ``fin``. Every output word is followed by a space.
    """
    in_function = False
    result = []
    for line in lines:
        pieces = []
        for word in line.split():
            if "()" in word:
                in_function = True
            if word in mapping:
                pieces.append(mapping[word])
            elif word == "{":
                pieces.append("{" if in_function else "inicio")
            elif word == "}":
                if in_function:
                    pieces.append("}")
                    in_function = False
                else:
                    pieces.append("fin")
            else:
                pieces.append(word)
        result.append("".join(piece + " " for piece in pieces))
    return result


def _read_block(infile: TextIO) -> list[str]:
    lines = []
    while True:
        raw = infile.readline()
        if not raw:
            break
        line = raw.rstrip("\r\n")
        if not line:
            break
        lines.append(line)
    return lines


def _read_answer(infile: TextIO) -> str:
    while True:
        raw = infile.readline()
        if not raw:
            return ""
        stripped = raw.strip()
        if stripped:
            return stripped[0].lower()


def run(path=DEFAULT_PATH, infile: Optional[TextIO] = None, outfile: Optional[TextIO] = None) -> None:
    """Translate code blocks read from ``infile`` until the user declines another."""
    infile = sys.stdin if infile is None else infile
    out = sys.stdout if outfile is None else outfile

    try:
        mapping = load_mapping(path)
    except OSError:
        print(f"Error al abrir el archivo para cargar el diccionario: {path}", file=sys.stderr)
        mapping = {}
    if not mapping:
        print("El diccionario está vacío. Verifique el archivo.", file=sys.stderr)
        return

    while True:
        out.write("Ingrese el código C++ a traducir (finalice con una línea vacía):\n")
        lines = _read_block(infile)
        out.write("\nCódigo traducido:\n\n")
        for translated in translate_lines(lines, mapping):
            out.write(translated + "\n")
        out.write("\n¿Desea traducir otro código? (s/n): ")
        if _read_answer(infile) != "s":
            break
    out.write("Saliendo del traductor...\n")