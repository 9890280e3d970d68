"""
Plain-text table rendering for listing output.
"""
import re
import textwrap

COLUMN_GAP = "  "

_NUMBER = re.compile(r"^[+-]?\d+(\.\d+)?$")


def cell_text(value):
    """Stringify a cell value, normalizing line endings."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "yes" if value else "no"
    text = str(value)
    return text.replace("\r\n", "\n").replace("\r", "\n")


def cell_lines(value, max_width=None):
    """Split a cell into its physical lines, wrapping long ones."""
    lines = cell_text(value).split("\n")
    if not max_width:
        return lines

    wrapped = []
    for line in lines:
        if len(line) <= max_width:
            wrapped.append(line)
        else:
            wrapped.extend(textwrap.wrap(line, max_width, break_long_words=True) or [""])
    return wrapped


def is_numeric(value):
    """True for numbers and strings that look like one."""
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        return True
    return bool(_NUMBER.match(cell_text(value).strip()))


def column_alignments(rows, columns):
    """Right-align columns whose non-empty values are all numbers."""
    alignments = {}
    for column in columns:
        values = [row.get(column) for row in rows]
        values = [v for v in values if cell_text(v) != ""]
        alignments[column] = "right" if values and all(is_numeric(v) for v in values) else "left"
    return alignments


def format_table(rows, columns, header=True, max_width=None):
    """
    Render rows (mappings keyed by column name) as an aligned text table.

    Rows keep their input order. A cell containing newlines spreads over
    several physical lines; the other cells of that row are blank on the
    extra lines.
    """
    rows = list(rows)
    alignments = column_alignments(rows, columns)

    # Each logical row becomes a list of physical lines, each a list of cells
    physical_rows = []
    for row in rows:
        split = [cell_lines(row.get(column), max_width) for column in columns]
        height = max((len(lines) for lines in split), default=1)
        for i in range(height):
            physical_rows.append([lines[i] if i < len(lines) else "" for lines in split])

    titles = [column.upper() for column in columns]
    widths = []
    for index, title in enumerate(titles):
        width = len(title) if header else 0
        for line in physical_rows:
            width = max(width, len(line[index]))
        widths.append(width)

    def render(cells, aligns):
        parts = []
        for cell, width, align in zip(cells, widths, aligns):
            parts.append(cell.rjust(width) if align == "right" else cell.ljust(width))
        return COLUMN_GAP.join(parts).rstrip()

    aligns = [alignments[column] for column in columns]
    output = []
    if header:
        output.append(render(titles, aligns))
        output.append(render(["-" * width for width in widths], aligns))
    for line in physical_rows:
        output.append(render(line, aligns))

    return "\n".join(output)


def print_table(rows, columns, header=True, max_width=None, stream=None):
    """Write the table to stdout (or the given stream)."""
    text = format_table(rows, columns, header=header, max_width=max_width)
    if text:
        print(text, file=stream)
