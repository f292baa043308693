"""Document formatter: turns tagged text into laid-out plain text."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TextIO

from .tables import read_table, render_table
from .text import FormatError, justify_line, split_at, trim, trim_line_endings

_Handler = Callable[[str], str]


def _place(row: list[str], pos: int, text: str) -> None:
    """Overwrite ``row`` with ``text`` starting at ``pos``, growing it if needed."""
    pos = max(pos, 0)
    if pos > len(row):
        row.extend(" " * (pos - len(row)))
    row[pos : pos + len(text)] = list(text)


def _parse_adjust(text: str) -> tuple[str, int, str]:
    """Parse ``+n``, ``-n`` or ``n`` up to ``]``; return mode, amount and the rest."""
    body, _, rest = text.partition("]")
    mode = " "
    count = 0
    for ch in body:
        if ch in "+-":
            mode = ch
        elif "0" <= ch <= "9":
            count = count * 10 + int(ch)
    return mode, count, trim(rest.lstrip("]"))


def _adjust(value: int, mode: str, count: int) -> int:
    if mode == "-":
        return value - count
    if mode == "+":
        return value + count
    return count


class Formatter:
    """Formats a tagged document line by line and writes the result to ``out``."""

    def __init__(
        self,
        out: TextIO,
        line_size: int = 80,
        left_margin: int = 5,
        right_margin: int = 5,
        cell_padding: int = 1,
        line_ending: str = "\n",
    ) -> None:
        self.out = out
        self.line_size = line_size
        self.left_margin = left_margin
        self.right_margin = right_margin
        self.cell_padding = cell_padding
        self.line_ending = line_ending
        self.indent = 0
        self.embed_left = 0
        self.embed_right = 0
        self.embed_padding = 2
        self.justify = "N"
        self.paragraph_start = 2
        self.para_indent = 2
        self.line_count = 0
        self._para_start = True
        self._buffer = ""
        self._page: list[list[str]] = []
        self._page_count = 0
        self._source: Iterator[str] = iter(())
        self._list_start_line = False
        self._tags: tuple[tuple[str, bool, _Handler], ...] = (
            ("[=]", False, self._end_of_paragraph),
            ("[C]", False, self._center),
            ("[H2]", False, self._header),
            ("[H1]", False, self._header),
            ("[H=]", False, self._header),
            ("[H-]", False, self._header),
            ("[I", False, self._indent),
            ("[-]", False, self._end_of_line),
            ("[LB", False, self._list),
            ("[TB", False, self._table),
            ("[LM", False, self._left_margin),
            ("[RM", False, self._right_margin),
            ("[ER", False, self._embedded),
            ("[EL", False, self._embedded),
            ("[E-]", False, self._embed_end),
            ("[--]", False, self._section),
            ("[==]", False, self._section),
            ("[*]", True, self._section),
            ("[SP]", False, self._split),
            ("[JR]", False, self._justify),
            ("[JL]", False, self._justify),
            ("[JF]", False, self._justify),
            ("[JC]", False, self._justify),
            ("[JN]", False, self._justify),
            ("[UB]", False, self._unformatted),
            ("[]", False, self._text),
        )

    # ----- output -------------------------------------------------------

    def print_size(self) -> int:
        """Width available for text on the current line."""
        return (
            self.line_size
            - self.left_margin
            - self.right_margin
            - self.indent
            - self.embed_left
            - self.embed_right
        )

    def _write(self, text: str) -> None:
        self.out.write(text + self.line_ending)

    def _embedding(self) -> bool:
        return bool(self.embed_left or self.embed_right)

    def _end_page(self) -> None:
        self.embed_left = 0
        self.embed_right = 0
        self._page = []
        self._page_count = 0

    def output_line(self, text: str, use_justify: bool) -> None:
        """Write one line, justified if asked, beside any embedded image."""
        if self._embedding() and self._page_count >= len(self._page):
            self._end_page()
        if use_justify:
            size = self.print_size()
            text = justify_line(text, self.justify, size, size)
        if self._embedding():
            row = self._page[self._page_count]
            _place(row, self.left_margin + self.indent + self.embed_left, text)
            self._write("".join(row))
            self._page_count += 1
            if self._page_count >= len(self._page):
                self._end_page()
        else:
            self._write(" " * (self.left_margin + self.indent) + text)

    def append_text(self, text: str) -> None:
        """Add words to the pending paragraph, writing a line once it is full."""
        if not self._buffer and self._para_start:
            self._buffer = " " * self.para_indent
            self._para_start = False
        elif self._buffer:
            self._buffer += " "
        self._buffer += text
        if len(self._buffer) < self.print_size():
            return
        left, self._buffer = split_at(self._buffer, self.print_size(), self.paragraph_start)
        self.output_line(left, True)

    def flush(self) -> None:
        """Write out everything pending; the last line is not justified."""
        while self._buffer:
            left, self._buffer = split_at(
                self._buffer, self.print_size(), self.paragraph_start
            )
            self.output_line(left, bool(self._buffer))

    # ----- input --------------------------------------------------------

    def _lines(self) -> Iterator[str]:
        for raw in self._source:
            self.line_count += 1
            yield trim_line_endings(raw)

    def run(self, lines: Iterable[str]) -> None:
        """Format a whole document given as an iterable of lines."""
        self._source = iter(lines)
        self._buffer = ""
        self.line_count = 0
        for line in self._lines():
            self.process_line(trim(line))

    def process_line(self, line: str) -> None:
        """Handle the tags at the start of a line, then its text."""
        while line.startswith("["):
            line = self._dispatch(line)
        if line:
            self.append_text(line)

    def _dispatch(self, buffer: str) -> str:
        for tag, exact, handler in self._tags:
            if buffer[: len(tag)].upper() == tag and (not exact or len(buffer) == len(tag)):
                return handler(buffer)
        raise FormatError(f"Unknown tag found: {buffer}")

    # ----- simple tags --------------------------------------------------

    def _end_of_paragraph(self, buffer: str) -> str:
        self.flush()
        self.output_line("", False)
        self._para_start = True
        return trim(buffer[4:])

    def _end_of_line(self, buffer: str) -> str:
        self.flush()
        return trim(buffer[4:])

    def _center(self, buffer: str) -> str:
        text = trim(buffer[3:])
        half = (self.line_size - self.right_margin - self.left_margin - self.indent) // 2
        self.output_line(" " * (half - len(text) // 2) + text, False)
        return ""

    def _header(self, buffer: str) -> str:
        mode = "=" if buffer[2:3] in ("2", "=") else "-"
        text = trim(buffer[4:])
        self.output_line(text, False)
        self.output_line(mode * len(text), False)
        return ""

    def _indent(self, buffer: str) -> str:
        mode, count, rest = _parse_adjust(buffer[2:])
        self.indent = _adjust(self.indent, mode, count)
        return rest

    def _left_margin(self, buffer: str) -> str:
        mode, count, rest = _parse_adjust(buffer[3:])
        self.left_margin = _adjust(self.left_margin, mode, count)
        return rest

    def _right_margin(self, buffer: str) -> str:
        mode, count, rest = _parse_adjust(buffer[3:])
        self.right_margin = _adjust(self.right_margin, mode, count)
        return rest

    def _justify(self, buffer: str) -> str:
        code = buffer[2:3].upper()
        if code in ("R", "L", "F", "C"):
            self.justify = code
        return buffer[6:]

    def _section(self, buffer: str) -> str:
        self.flush()
        self.output_line(buffer[1] * max(self.print_size(), 0), False)
        return ""

    def _split(self, buffer: str) -> str:
        self.flush()
        fields = [trim(field) for field in trim(buffer[4:]).split("|")]
        if len(fields) > 3:
            raise FormatError("Too many fields in split", self.line_count)
        size = self.print_size()
        row = [" "] * max(size, 0)
        _place(row, 0, fields[0])
        if len(fields) == 2:
            _place(row, size - len(fields[1]), fields[1])
        elif len(fields) == 3:
            _place(row, size // 2 - len(fields[1]) // 2, fields[1])
            _place(row, size - len(fields[2]), fields[2])
        self.output_line("".join(row), False)
        return ""

    def _text(self, buffer: str) -> str:
        self.append_text(trim(buffer[2:]))
        return ""

    # ----- block tags ---------------------------------------------------

    def _unformatted(self, buffer: str) -> str:
        self.flush()
        for line in self._lines():
            if line[:4].upper() == "[UE]":
                break
            self._write(line)
        return ""

    def _table(self, buffer: str) -> str:
        self.flush()
        padding = self.cell_padding
        for ch in buffer[3:].partition("]")[0]:
            if "0" <= ch <= "9":
                padding = int(ch)
        try:
            rows = read_table(self._lines())
        except FormatError as err:
            raise FormatError(err.message, self.line_count) from None
        for line in render_table(rows, padding, self.print_size(), self.paragraph_start):
            self.output_line(line, False)
        return ""

    def _embedded(self, buffer: str) -> str:
        self.flush()
        mode = "l"
        for ch in buffer[2:].partition("]")[0].lower():
            if ch in ("l", "r"):
                mode = ch
        image: list[str] = []
        for line in self._lines():
            line = trim(line)
            if line[:4].upper() == "[EE]":
                break
            image.append(line)
        width = max((len(line) for line in image), default=0)
        span = self.line_size - self.left_margin - self.right_margin - self.indent
        pos = 0 if mode == "l" else span - width
        self._page = []
        for line in image:
            row = [" "] * max(span + self.right_margin, 0)
            _place(row, pos + self.left_margin, line.ljust(width))
            self._page.append(row)
        if mode == "l":
            self.embed_left = width + self.embed_padding
        else:
            self.embed_right = width + self.embed_padding
        self._page_count = 0
        return ""

    def _embed_end(self, buffer: str) -> str:
        self.flush()
        if self._embedding():
            while self._page_count < len(self._page):
                self.output_line("", False)
            self._page = []
            self._page_count = 0
        self.embed_left = 0
        self.embed_right = 0
        return ""

    def _list_append(self, text: str) -> None:
        if self._buffer:
            self._buffer += " "
        self._buffer += text
        if len(self._buffer) < self.print_size():
            return
        left, self._buffer = split_at(self._buffer, self.print_size(), self.paragraph_start)
        self.output_line(left, False)
        if self._list_start_line:
            self._list_start_line = False
            self.indent += 2

    def _list_flush(self, reset: bool) -> None:
        while self._buffer:
            left, self._buffer = split_at(
                self._buffer, self.print_size(), self.paragraph_start
            )
            self.output_line(left, False)
            if self._list_start_line and reset:
                self._list_start_line = False
                self.indent += 2

    def _list(self, buffer: str) -> str:
        self.flush()
        marker = "-"
        double_space = False
        for ch in buffer[3:].partition("]")[0]:
            if ch in ("*", "1"):
                marker = ch
            elif ch == "2":
                double_space = True
        number = 1
        start_indent = self.indent
        self._list_start_line = True
        for line in self._lines():
            line = trim(line)
            if line[:3].upper() == "[LI":
                if len(line) > 3 and line[3] != "]":
                    marker = line[3]
                    line = trim(line[5:])
                else:
                    line = trim(line[4:])
                if self._buffer:
                    self._list_flush(True)
                    if double_space:
                        self.output_line("", False)
                self.indent = start_indent
                self._list_start_line = True
                if marker == "1":
                    prefix = str(number).ljust(2)
                    number += 1
                else:
                    prefix = marker + " "
                self._buffer = prefix + line
            elif line.startswith("[-]"):
                self._list_flush(False)
                self._buffer = " "
                self._list_append(trim(line[3:]))
            elif line.startswith("[=]"):
                self._list_flush(False)
                self.output_line("", False)
                self._buffer = " "
                self._list_append(trim(line[3:]))
            elif line[:4].upper() == "[LE]":
                break
            else:
                self._list_append(line)
        self._list_flush(True)
        self.indent = start_indent
        return ""