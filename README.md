# palabrasclave

A console tool for learning C++ keywords in Spanish. It keeps a small
dictionary of keywords in a plain-text table. Each keyword has a translation
and a short description of what it does. It can also rewrite pasted C++ code
word by word and replace every keyword with its translation.

## Installation

```
pip install .
```

## Usage

Start the interactive menu:

```
palabrasclave
```

By default the dictionary is `palabras.txt` in the current directory. Use
`--file` to choose another file:

```
palabrasclave --file mis_palabras.txt
```

The main menu has three choices:

1. **Gestionar Diccionario (CRUD)**: show, add, update or delete keywords.
   Adding or updating asks for the word and the translation as single words
   and for the description as a whole line. Every change is written back to
   the file at once.
2. **Traducir Código C++**: paste code line by line and end it with an empty
   line. Each whitespace-separated word that is in the dictionary is replaced
   by its translation. After a word that contains `()`, the next `{` and `}`
   are kept as they are. Any other braces are shown as `inicio` and `fin`.
   The tool then asks whether to translate more code (`s`/`n`).
3. **Salir**: quit.

If the dictionary file does not exist when the editor starts, the file is
created with five starter entries (`asm`, `auto`, `bool`, `break`, `case`).
If the file is missing or empty, the translator reports this on standard error
and goes back to the menu.

The file is a pipe-separated table with a header line and a rule of dashes:

```
Palabra              | Traducción           | Funcionalidad
-------------------------------------------------------------------------------------
bool                 | booleano             | tipo de dato verdadero/falso
```

When the file is read back, the first line is skipped. Any other line that
contains a `-` is treated as a separator and skipped too. Do not use hyphens
in entries. Rows with an empty field are ignored by the editor.

## Library use

The modules also work without the menu:

```python
from palabrasclave.dictionary import Entry, add_entry, initial_entries, render_table, save
from palabrasclave.translator import load_mapping, translate_lines

entries = initial_entries()
add_entry(entries, Entry("int", "entero", "tipo de dato entero"))
save("palabras.txt", entries)
print(render_table(entries))

mapping = load_mapping("palabras.txt")
for line in translate_lines(["int main() {", "}"], mapping):
    print(line)
```

`palabrasclave.dictionary` provides:

- `Entry`
- `load`, `save` and `render_table`
- `add_entry`, `update_entry` and `remove_entry`, which raise
  `DuplicateWordError` or `WordNotFoundError`
- `trim`
- `run`, the interactive editor, which takes a path and optional input and
  output streams

`palabrasclave.translator` provides `load_mapping`, `translate_lines` and
`run`.

## What it does not do

The menus are plain text. The tool does not clear the screen or change console
colours, and it does not pause for a key press between steps.

## Running the tests

```
pip install .[test]
pytest
```