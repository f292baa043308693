import pytest

from makedoc.tables import field_mode, prepare_field, read_table, render_table
from makedoc.text import FormatError


@pytest.mark.parametrize(
    "field,expected",
    [
        ("###", "#"),
        (">>>", ">"),
        ("<<<", "<"),
        ("><<", "%"),
        ("# #", "#"),
        ("abc", " "),
        ("", " "),
        ("#>", " "),
        ("<>", " "),
    ],
)
def test_field_mode(field, expected):
    assert field_mode(field) == expected


def test_prepare_field_right():
    assert prepare_field("ab", ">", 5) == "ab".rjust(5)


def test_prepare_field_left_modes_pad():
    assert prepare_field("ab", "#", 5) == "ab".ljust(5)
    assert prepare_field("ab", " ", 5) == "ab".ljust(5)


def test_prepare_field_center():
    assert prepare_field("ab", "%", 6) == "  ab  "


def test_read_table_rows():
    lines = ["| a | b |", "| c | d |\n", "[TE]"]
    assert read_table(lines) == [["a", "b"], ["c", "d"]]


def test_read_table_ignores_text_before_first_bar():
    assert read_table(["row | x | y |", "[te]"]) == [["x", "y"]]


def test_read_table_continuation_line():
    assert read_table(["| a | long", "text |", "[TE]"]) == [["a", "long text"]]


def test_read_table_stops_at_end_tag():
    source = iter(["| a |", "[TE]", "after"])
    assert read_table(source) == [["a"]]
    assert list(source) == ["after"]


def test_read_table_missing_end_tag():
    with pytest.raises(FormatError, match="Unexpected end of file"):
        read_table(["| a | b |"])


def test_read_table_line_without_bar():
    with pytest.raises(FormatError, match="Unexpected end of line"):
        read_table(["no bars here", "[TE]"])


def test_read_table_column_mismatch():
    with pytest.raises(FormatError, match="Column count mismatch in table"):
        read_table(["| a | b |", "| c |", "[TE]"])


def test_render_table_empty():
    assert render_table([], 1, 80, 2) == []


def test_render_table_plain_rows():
    rows = [["a", "bb"], ["ccc", "d"]]
    lines = render_table(rows, 1, 80, 2)
    assert len(lines) == len(rows)
    for line, row in zip(lines, rows):
        assert line.split() == row
        assert len(line) == len("ccc") + len("bb") + 2


def test_render_table_format_row_hidden_and_aligned():
    lines = render_table([[">>>>", "##"], ["x", "y"]], 1, 80, 2)
    assert len(lines) == 1
    assert lines[0].split() == ["x", "y"]
    assert lines[0].startswith("x".rjust(4))


def test_render_table_wraps_last_column():
    text = "one two three"
    lines = render_table([["a", text]], 1, 10, 2)
    assert len(lines) > 1
    assert all(len(line) <= 10 for line in lines)
    assert " ".join(lines).split() == ["a"] + text.split()


def test_render_table_rejects_ragged_rows():
    with pytest.raises(FormatError):
        render_table([["a", "b"], ["c"]], 1, 80, 2)


def test_read_then_render_round_trip_keeps_cells():
    rows = read_table(["| name | value |", "| alpha | 1 |", "[TE]"])
    lines = render_table(rows, 2, 80, 2)
    assert [line.split() for line in lines] == rows