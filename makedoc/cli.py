"""Command-line entry point: option parsing and per-file processing."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .formatter import Formatter
from .text import FormatError

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_ENCODING = "latin-1"


def _atoi(text: str) -> int:
    """Read a leading integer the way the C library does, giving 0 if none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass
class Options:
    """Settings taken from the command line."""

    line_size: int = 80
    left_margin: int = 5
    right_margin: int = 5
    cell_padding: int = 1
    verbose: bool = False
    line_ending: str = "\n"
    files: list[str] = field(default_factory=list)


_NUMERIC = {
    "-ls": "line_size",
    "-rm": "right_margin",
    "-lm": "left_margin",
    "-cp": "cell_padding",
}


def parse_options(argv: Sequence[str]) -> Options:
    """Build options from command-line arguments (program name excluded)."""
    options = Options()
    for arg in argv:
        attr = _NUMERIC.get(arg[:3])
        if attr is not None:
            setattr(options, attr, _atoi(arg[3:]))
        if arg == "-v":
            options.verbose = True
        elif arg == "-u":
            options.line_ending = "\n"
        elif arg == "-w":
            options.line_ending = "\r\n"
        if not arg.startswith("-"):
            options.files.append(arg)
    return options


def _emit(message: str, options: Options) -> None:
    sys.stdout.write(message + options.line_ending)


def process_file(filename: str, options: Options) -> Path | None:
    """Format ``<name>.d`` into ``<name>.doc``.

    ``filename`` may be given with or without the ``.d`` suffix. Returns the
    path written, or ``None`` when a file could not be opened.
    Raises :class:`FormatError` when the document is malformed.
    """
    if options.verbose:
        _emit(f"Processing {filename}", options)
    base = filename[:-2] if filename.endswith(".d") else filename
    in_path = Path(base + ".d")
    out_path = Path(base + ".doc")
    try:
        infile = open(in_path, encoding=_ENCODING, newline="")
    except OSError:
        _emit(f"Could not open {in_path}. Aborting this file.", options)
        return None
    with infile:
        try:
            outfile = open(out_path, "w", encoding=_ENCODING, newline="")
        except OSError:
            _emit(f"Could not open output file {out_path}. Aborting this file.", options)
            return None
        with outfile:
            formatter = Formatter(
                outfile,
                line_size=options.line_size,
                left_margin=options.left_margin,
                right_margin=options.right_margin,
                cell_padding=options.cell_padding,
                line_ending=options.line_ending,
            )
            formatter.run(infile)
    return out_path


def main(argv: Sequence[str] | None = None) -> int:
    """Run the formatter over every file named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        sys.stdout.write("Usage: makedoc filename\n")
        return 1
    options = parse_options(args)
    for filename in options.files:
        try:
            process_file(filename, options)
        except FormatError as err:
            if err.line is None:
                _emit(str(err), options)
            else:
                _emit(f"Error: {err}", options)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())