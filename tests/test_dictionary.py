import io

import pytest

from palabrasclave.dictionary import (
    RULE,
    DuplicateWordError,
    Entry,
    WordNotFoundError,
    add_entry,
    initial_entries,
    load,
    remove_entry,
    render_table,
    run,
    save,
    trim,
    update_entry,
)


def _run(path, text):
    out = io.StringIO()
    run(path, io.StringIO(text), out)
    return out.getvalue()


def test_initial_entries_start_with_asm():
    entries = initial_entries()
    assert entries[0] == Entry("asm", "ensamblador", "inserta código ensamblador en C++")
    assert [e.word for e in entries] == ["asm", "auto", "bool", "break", "case"]


def test_trim_strips_spaces_and_tabs_only():
    assert trim("  \thola mundo\t ") == "hola mundo"
    assert trim(" \t ") == ""
    assert trim("\nx\n") == "\nx\n"


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "p.txt"
    save(path, initial_entries())
    assert load(path) == initial_entries()


def test_save_layout(tmp_path):
    path = tmp_path / "p.txt"
    save(path, initial_entries())
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("Palabra")
    assert lines[1] == "-" * 85
    assert lines[2].split("|")[0] == "asm".ljust(20) + " "
    assert len(lines) == 2 + len(initial_entries())


def test_load_drops_rows_with_dash(tmp_path):
    path = tmp_path / "p.txt"
    save(path, [Entry("a-b", "x", "y"), Entry("c", "d", "e")])
    assert load(path) == [Entry("c", "d", "e")]


def test_load_drops_incomplete_rows(tmp_path):
    path = tmp_path / "p.txt"
    path.write_text("header\nfoo | bar\nx | y | z\n", encoding="utf-8")
    assert load(path) == [Entry("x", "y", "z")]


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load(tmp_path / "missing.txt")


def test_render_table():
    lines = render_table(initial_entries()).splitlines()
    assert lines[1] == RULE
    assert lines[2].startswith("asm".ljust(20) + "ensamblador")
    assert "|" not in lines[2]


def test_add_entry_and_duplicate():
    entries = initial_entries()
    entry = Entry("for", "para", "bucle")
    add_entry(entries, entry)
    assert entries[-1] == entry
    with pytest.raises(DuplicateWordError):
        add_entry(entries, Entry("asm", "a", "b"))
    assert len(entries) == len(initial_entries()) + 1


def test_update_entry():
    entries = initial_entries()
    update_entry(entries, "bool", "logico", "nuevo")
    assert entries[2] == Entry("bool", "logico", "nuevo")
    with pytest.raises(WordNotFoundError):
        update_entry(entries, "nada", "a", "b")


def test_remove_entry_removes_all_matches():
    entries = [Entry("a", "b", "c"), Entry("x", "y", "z"), Entry("a", "d", "e")]
    assert remove_entry(entries, "a") == 2
    assert entries == [Entry("x", "y", "z")]
    with pytest.raises(WordNotFoundError):
        remove_entry(entries, "a")


def test_run_creates_file_and_lists(tmp_path):
    path = tmp_path / "p.txt"
    output = _run(path, "1\n5\n")
    assert path.exists()
    assert "ensamblador" in output
    assert output.rstrip().endswith("Saliendo del programa.")


def test_run_adds_word(tmp_path):
    path = tmp_path / "p.txt"
    output = _run(path, "2\nfor\npara\nrepite un bloque\n5\n")
    assert "Palabra agregada correctamente:" in output
    assert load(path)[-1] == Entry("for", "para", "repite un bloque")


def test_run_rejects_duplicate(tmp_path):
    path = tmp_path / "p.txt"
    output = _run(path, "2\nasm\n5\n")
    assert "La palabra ya existe en el diccionario." in output
    assert load(path) == initial_entries()


def test_run_updates_word(tmp_path):
    path = tmp_path / "p.txt"
    output = _run(path, "3\nauto\nauto2\nnueva desc\n5\n")
    assert "Palabra actualizada correctamente." in output
    assert load(path)[1] == Entry("auto", "auto2", "nueva desc")


def test_run_removes_word(tmp_path):
    path = tmp_path / "p.txt"
    output = _run(path, "4\ncase\n4\nzzz\n5\n")
    assert "Palabra eliminada correctamente." in output
    assert "Palabra no encontrada." in output
    assert [e.word for e in load(path)] == ["asm", "auto", "bool", "break"]


def test_run_invalid_choices(tmp_path):
    output = _run(tmp_path / "p.txt", "x\n9\n5\n")
    assert "Por favor, ingrese un número válido." in output
    assert "Opción no válida. Por favor, seleccione una opción del menú." in output


def test_run_stops_at_end_of_input(tmp_path):
    output = _run(tmp_path / "p.txt", "1\n")
    assert "ensamblador" in output
    assert "Saliendo del programa." not in output