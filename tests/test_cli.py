from pathlib import Path

import pytest

from makedoc.cli import Options, main, parse_options, process_file
from makedoc.text import FormatError


def _write_doc(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / f"{name}.d"
    path.write_bytes(text.encode("latin-1"))
    return path


def test_parse_options_defaults():
    options = parse_options([])
    assert options == Options()
    assert (options.line_size, options.left_margin, options.right_margin) == (80, 5, 5)
    assert options.cell_padding == 1
    assert options.line_ending == "\n"
    assert options.verbose is False


def test_parse_options_values_and_files():
    options = parse_options(["-ls60", "-lm3", "-rm2", "-cp4", "-v", "-w", "a", "b.d"])
    assert options.line_size == 60
    assert options.left_margin == 3
    assert options.right_margin == 2
    assert options.cell_padding == 4
    assert options.verbose is True
    assert options.line_ending == "\r\n"
    assert options.files == ["a", "b.d"]


def test_parse_options_non_numeric_value_is_zero():
    assert parse_options(["-lsabc"]).line_size == 0


def test_parse_options_last_line_ending_wins():
    assert parse_options(["-w", "-u"]).line_ending == "\n"
    assert parse_options(["-u", "-w"]).line_ending == "\r\n"


def test_process_file_writes_paragraph(tmp_path):
    _write_doc(tmp_path, "doc", "Hello world\n[=]\n")
    out = process_file(str(tmp_path / "doc"), Options())
    assert out == tmp_path / "doc.doc"
    assert out.read_text(encoding="latin-1") == "       Hello world\n     \n"


def test_process_file_accepts_d_suffix(tmp_path):
    _write_doc(tmp_path, "doc", "Some words here\n[=]\n")
    first = process_file(str(tmp_path / "doc"), Options()).read_bytes()
    second = process_file(str(tmp_path / "doc.d"), Options()).read_bytes()
    assert first == second


def test_process_file_left_margin_option(tmp_path):
    _write_doc(tmp_path, "doc", "Hello world\n[=]\n")
    out = process_file(str(tmp_path / "doc"), parse_options(["-lm0"]))
    lines = out.read_text(encoding="latin-1").split("\n")
    assert lines[0] == "  Hello world"


def test_process_file_windows_line_endings(tmp_path):
    _write_doc(tmp_path, "doc", "Hello world\n[=]\n")
    out = process_file(str(tmp_path / "doc"), parse_options(["-w"]))
    data = out.read_bytes()
    assert data.count(b"\r\n") == 2
    assert data.endswith(b"\r\n")


def test_process_file_unformatted_block_copied(tmp_path):
    _write_doc(tmp_path, "doc", "[UB]\n  keep   spacing\n[UE]\n")
    out = process_file(str(tmp_path / "doc"), Options())
    assert out.read_text(encoding="latin-1") == "  keep   spacing\n"


def test_process_file_missing_input(tmp_path, capsys):
    missing = tmp_path / "nothing"
    assert process_file(str(missing), Options()) is None
    assert f"Could not open {missing}.d. Aborting this file." in capsys.readouterr().out
    assert not (tmp_path / "nothing.doc").exists()


def test_process_file_unknown_tag_raises(tmp_path):
    _write_doc(tmp_path, "doc", "[XYZ] text\n")
    with pytest.raises(FormatError):
        process_file(str(tmp_path / "doc"), Options())


def test_process_file_verbose_announces(tmp_path, capsys):
    _write_doc(tmp_path, "doc", "[=]\n")
    name = str(tmp_path / "doc")
    process_file(name, parse_options(["-v"]))
    assert f"Processing {name}" in capsys.readouterr().out


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage: makedoc filename" in capsys.readouterr().out


def test_main_processes_all_files(tmp_path):
    _write_doc(tmp_path, "one", "First\n[=]\n")
    _write_doc(tmp_path, "two", "Second\n[=]\n")
    assert main([str(tmp_path / "one"), str(tmp_path / "two")]) == 0
    assert "First" in (tmp_path / "one.doc").read_text(encoding="latin-1")
    assert "Second" in (tmp_path / "two.doc").read_text(encoding="latin-1")


def test_main_unknown_tag_fails(tmp_path, capsys):
    _write_doc(tmp_path, "doc", "[XYZ] text\n")
    assert main([str(tmp_path / "doc")]) == 1
    assert "Unknown tag found: [XYZ] text" in capsys.readouterr().out


def test_main_table_error_reports_line(tmp_path, capsys):
    _write_doc(tmp_path, "doc", "[TB]\n| a | b |\n")
    assert main([str(tmp_path / "doc")]) == 1
    out = capsys.readouterr().out
    assert out.startswith("Error: Unexpected end of file at line:")