# makedoc

`makedoc` turns lightly tagged plain-text sources (`.d` files) into
fixed-width text documents (`.doc` files). It wraps paragraphs to a line
width, applies margins and indentation, and understands a small set of
bracket tags for headers, lists, tables, centred lines, rules, justification
and blocks of lines placed beside the text.

## Installation

```
pip install .
```

## Usage

```
makedoc [options] file [file ...]
```

Each `file` may be given with or without its `.d` extension. For `guide`,
the program reads `guide.d` and writes `guide.doc`. A file that cannot be
opened is reported and skipped. Run without arguments, it prints a usage line
and exits with status 1.

Options (anything else starting with `-` is ignored):

| Option   | Meaning                               | Default |
|----------|---------------------------------------|---------|
| `-lsN`   | total line size                       | 80      |
| `-lmN`   | left margin                           | 5       |
| `-rmN`   | right margin                          | 5       |
| `-cpN`   | table cell padding                    | 1       |
| `-v`     | print the name of each file processed | off     |
| `-u`     | Unix line endings (`\n`)              | on      |
| `-w`     | Windows line endings (`\r\n`)         | off     |

Example:

```
makedoc -ls72 -lm4 -rm4 -v guide
```

## Tags

Tags start a line. Tag names are case-insensitive, except `[=]`, `[-]` and
the list-item forms of them. Lines without a tag are ordinary text and are
joined and wrapped into paragraphs. Text after `[=]`, `[-]`, `[In]`, `[LMn]`
and `[RMn]` on the same line carries on as ordinary text; `[C]`, `[Hx]`,
`[SP]` and `[]` use the rest of their line themselves.

- `[=]` end the paragraph (a blank line follows); `[-]` end the line.
- `[C] text` centre a line.
- `[H1] text` / `[H-] text` header underlined with `-`;
  `[H2] text` / `[H=] text` header underlined with `=`.
- `[--]`, `[==]` a full-width rule drawn with that character; `[*]` alone on
  a line draws one with `*`.
- `[In]`, `[I+n]`, `[I-n]` set, raise or lower the indent.
- `[LMn]`, `[RMn]` (with `+`/`-` forms) change the left or right margin.
- `[JL]`, `[JR]`, `[JC]`, `[JF]` left, right, centre or full justification of
  wrapped paragraph text. Text starts out unjustified; `[JN]` is accepted but
  leaves the current setting as it is.
- `[SP] left | centre | right` a split line of up to three fields; more is an
  error.
- `[LB]` … `[LE]` a list; items start with `[LI]` (or `[LIx]` to choose the
  bullet `x`). `[LB*]` uses `*` bullets, `[LB1]` numbers the items and
  `[LB2]` double-spaces them. Inside a list, `[-]` and `[=]` start a new
  line or a new paragraph within the item.
- `[TB]` … `[TE]` a table; each row is `| cell | cell |`, and a row without a
  closing `|` continues on the next line. A digit after `TB` sets the cell
  padding. A first row made of `###` or `<<<` (left), `>>>` (right) or
  `>><<` (centre) cells fixes each column's width and alignment and is not
  printed. All rows must have the same number of cells.
- `[EL]` / `[ER]` … `[EE]` a block of lines placed at the left or right of
  the page; following text flows beside it until `[E-]` or until the block
  is used up.
- `[UB]` … `[UE]` lines copied to the output unchanged.
- `[] text` plain text, useful for text that begins with a bracket.

Any other tag is an error: the message is printed, no further files are
processed and the command exits with status 1.

## Using it from Python

```python
import io
from makedoc.formatter import Formatter

out = io.StringIO()
Formatter(out, 60, 4, 4, 1, "\n").run([
    "[H1] Introduction",
    "Some text that will be wrapped to the printable width.",
    "[=]",
])
print(out.getvalue())
```

`Formatter` also offers `process_line`, `append_text`, `flush`,
`output_line` and `print_size` for feeding a document piece by piece; call
`flush()` at the end to write out a pending paragraph. Malformed documents
raise `makedoc.text.FormatError`.

`makedoc.cli` provides `parse_options`, `process_file` and `main`.
The helpers in `makedoc.text` (`trim`, `rtrim`, `split_at`, `pad`,
`justify_line`, …) and `makedoc.tables` (`field_mode`, `prepare_field`,
`read_table`, `render_table`) can be used on their own.