"""String helpers shared by the document formatter: trimming, sliding, splitting, justifying."""

from __future__ import annotations

_BLANKS = "".join(chr(code) for code in range(1, 33))
_CONTROLS = "".join(chr(code) for code in range(1, 32))
_NUL = "\0"


class FormatError(Exception):
    """Raised when a document cannot be formatted."""

    def __init__(self, message: str, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} at line: {self.line}"


def trim(text: str) -> str:
    """Strip spaces and control characters from both ends."""
    return text.strip(_BLANKS)


def rtrim(text: str) -> str:
    """Strip spaces and control characters from the right end."""
    return text.rstrip(_BLANKS)


def trim_line_endings(text: str) -> str:
    """Strip trailing control characters such as CR and LF, keeping spaces."""
    return text.rstrip(_CONTROLS)


def slide_left(text: str, count: int) -> str:
    """Drop the first ``count`` characters."""
    return text[count:]


def slide_right(text: str, count: int) -> str:
    """Shift text right by ``count`` places, keeping its length and filling with spaces."""
    if count <= 0:
        return text
    return (" " * count + text)[: len(text)]


def pad(text: str, width: int) -> str:
    """Pad text with spaces on the right up to ``width``."""
    return text.ljust(width)


def split_at(text: str, size: int, paragraph_start: int) -> tuple[str, str]:
    """Split text at the last blank not beyond ``size``.

    Returns the left part and the remainder. A remainder that trims to nothing
    becomes ``paragraph_start`` spaces. A word longer than ``size`` is broken
    at ``size``.
    """
    if size < 0 or size >= len(text):
        return text, ""
    cut = size
    while cut > 0 and text[cut] not in " \t":
        cut -= 1
    if cut == 0 and trim(text) == text:
        cut = max(size, 1)
    left = rtrim(text[:cut])
    rest = trim(text[cut:])
    if not rest:
        rest = " " * paragraph_start
    return left, rest


def _strip_leading(buf: list[str], size: int) -> None:
    window = "".join(buf[:size])
    shift = len(window) - len(window.lstrip(" "))
    if shift:
        buf[:size] = list(window[shift:]) + [_NUL] * shift


def _push_right(buf: list[str], size: int) -> None:
    body = "".join(buf[:size]).rstrip(" ")
    if body:
        buf[:size] = list(body.rjust(size))


def _center(buf: list[str], size: int, print_size: int) -> None:
    last = 0
    for index, ch in enumerate(buf[:size]):
        if ch != " ":
            last = index
    shift = print_size // 2 - last // 2
    if shift > 0:
        shift = min(shift, size)
        buf[:size] = [" "] * shift + buf[: size - shift]


def _fill(buf: list[str], size: int) -> None:
    end = size - 1

    def seek_gap(pos: int) -> int:
        while pos > 0 and buf[pos] == " ":
            pos -= 1
        while pos > 0 and buf[pos] != " ":
            pos -= 1
        return pos

    pos = seek_gap(end)
    while buf[end] == " ":
        buf[pos + 1 : size] = buf[pos:end]
        while pos > 0 and buf[pos] == " ":
            pos -= 1
            if pos == 0:
                if all(ch == " " for ch in buf[1:size]):
                    return
                pos = end
        while pos > 0 and buf[pos] != " ":
            pos -= 1
            if pos == 0:
                pos = seek_gap(end)


def justify_line(line: str, mode: str, size: int, print_size: int) -> str:
    """Justify a line to ``size`` columns.

    Modes: ``N`` none, ``L`` left, ``R`` right, ``C`` centre, ``F`` full.
    ``print_size`` is the printable width used for centring.
    """
    if mode == "N":
        return line
    buf = list(pad(line, size))
    if size > 0:
        if mode in ("L", "C", "F"):
            _strip_leading(buf, size)
        if mode == "R":
            _push_right(buf, size)
        if mode == "C":
            _center(buf, size, print_size)
        if mode == "F":
            _fill(buf, size)
    return "".join(buf).split(_NUL, 1)[0]