"""Reading and laying out pipe-delimited tables."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .text import FormatError, pad, slide_right, split_at, trim, trim_line_endings

_SAME_MODE = {("#", "#"), (">", ">"), ("<", "<"), ("%", "<")}


def field_mode(field: str) -> str:
    """Return the column format a header cell describes.

    ``#`` or ``<`` left, ``>`` right, ``%`` centred (``>`` then ``<``),
    and a space when the cell is ordinary text.
    """
    mode = "_"
    for ch in field:
        if ch == " ":
            continue
        if mode == "_" and ch in ("#", ">", "<"):
            mode = ch
        elif mode == ">" and ch == "<":
            mode = "%"
        elif (mode, ch) not in _SAME_MODE:
            mode = " "
    return " " if mode == "_" else mode


def prepare_field(field: str, mode: str, width: int) -> str:
    """Pad a cell to ``width`` and align it according to ``mode``."""
    length = len(field)
    padded = pad(field, width)
    if mode == ">":
        return slide_right(padded, width - length)
    if mode == "%":
        shift = width // 2 - length // 2
        if shift > 0:
            return slide_right(padded, shift)
    return padded


def _next_line(source: Iterator[str]) -> str:
    try:
        raw = next(source)
    except StopIteration:
        raise FormatError("Unexpected end of file") from None
    return trim(trim_line_endings(raw))


def read_table(lines: Iterable[str]) -> list[list[str]]:
    """Read table rows from ``lines`` up to and including the ``[TE]`` tag.

    A row begins at its first ``|``; each later ``|`` closes a cell. A row
    ending without ``|`` continues on the next line.
    """
    source = iter(lines)
    rows: list[list[str]] = []
    columns = 0
    while True:
        line = _next_line(source)
        if line[:4].upper() == "[TE]":
            return rows
        bar = line.find("|")
        if bar < 0:
            raise FormatError("Unexpected end of line")
        cells: list[str] = []
        partial = ""
        rest = line[bar + 1 :]
        while rest:
            head, sep, tail = rest.partition("|")
            partial += head
            if sep:
                cells.append(trim(partial))
                partial = ""
                rest = tail
            else:
                partial += " "
                rest = _next_line(source)
        if cells:
            if not columns:
                columns = len(cells)
            elif len(cells) != columns:
                raise FormatError("Column count mismatch in table")
            rows.append(cells)


def render_table(
    rows: list[list[str]], padding: int, print_size: int, paragraph_start: int
) -> list[str]:
    """Lay out table rows as output lines no wider than ``print_size``.

    A first row made of format cells sets column widths and alignment and is
    not printed itself.
    """
    if not rows:
        return []
    columns = len(rows[0])
    if any(len(row) != columns for row in rows):
        raise FormatError("Column count mismatch in table")

    widths = [0] * columns
    modes = [" "] * columns
    formatted = False
    for row_index, row in enumerate(rows):
        for col, cell in enumerate(row):
            mode = field_mode(cell)
            if mode != " " and row_index == 0:
                modes[col] = mode
                widths[col] = len(cell)
                formatted = True
            elif modes[col] == " ":
                widths[col] = max(widths[col], len(cell))

    total = padding * 2 * (columns - 1) + sum(widths)
    if total > print_size:
        widths[-1] -= total - print_size

    separator = " " * (padding * 2)
    output: list[str] = []
    physical = 0
    for row in rows:
        fields = list(row)
        done = False
        while not done:
            done = True
            pieces = []
            for col, (width, mode) in enumerate(zip(widths, modes)):
                piece, fields[col] = split_at(fields[col], width, paragraph_start)
                if fields[col]:
                    done = False
                pieces.append(prepare_field(piece, mode, width))
            if physical or not formatted:
                output.append(separator.join(pieces))
            physical += 1
    return output