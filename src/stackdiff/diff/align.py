# diff/align.py
from typing import List, Sequence, Tuple

from ..table.ansi import visible_width
from ..table.grid import Alignment, Table

_ANNOTATION_SEP = " ("


def _split(cell: str) -> Tuple[str, str]:
    """Split ``"4.00 ms (↑ 100.0%)"`` into its value and annotation parts."""
    value, sep, note = cell.rpartition(_ANNOTATION_SEP)
    if not sep:
        return cell, ""
    return value, "(" + note


def _pad(text: str, width: int, alignment: Alignment) -> str:
    fill = " " * (width - visible_width(text))
    return fill + text if alignment == Alignment.RIGHT else text + fill


def align_and_append(rows: Sequence[Sequence[str]], table: Table, label_columns: int = 0) -> None:
    """
    Line up values and their parenthesised annotations within each column,
    then append the rows to ``table``.

    The first ``label_columns`` columns hold free text such as function
    names and are never split.

    Widths are measured on visible text, so a cell carrying color codes pads
    exactly like its plain counterpart. Cells without an annotation are
    passed through for the table to pad.
    """
    if not rows:
        return

    num_cols = len(rows[0])
    split_rows = [
        [(cell, "") if idx < label_columns else _split(cell) for idx, cell in enumerate(row)]
        for row in rows
    ]
    value_widths = [0] * num_cols
    note_widths = [0] * num_cols
    for parts in split_rows:
        for idx, (value, note) in enumerate(parts):
            if not note:
                continue
            value_widths[idx] = max(value_widths[idx], visible_width(value))
            note_widths[idx] = max(note_widths[idx], visible_width(note))

    for row, parts in zip(rows, split_rows):
        aligned: List[str] = []
        for idx, (cell, (value, note)) in enumerate(zip(row, parts)):
            if not note:
                aligned.append(cell)
                continue
            align = table.alignment[idx]
            aligned.append(_pad(value, value_widths[idx], align) + " " + _pad(note, note_widths[idx], align))
        table.append(aligned)
