"""
Fixed-width bordered text tables.

Column widths are measured on the visible text, so cells may carry ANSI
color codes. ``render(strip_ansi=True)`` drops the codes for output that is
not going to a terminal; the layout is identical in both modes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, TextIO

from .ansi import strip_ansi as _strip, visible_width


class Alignment(str, Enum):
    LEFT = "left"
    RIGHT = "right"


@dataclass
class HeaderGroup:
    header: str
    col_span: int


class Table:
    def __init__(self, num_cols: int, padding: int = 1):
        if num_cols < 1:
            raise ValueError("a table needs at least one column")
        if padding < 0:
            raise ValueError("padding must be non-negative")
        self.headers: List[str] = [""] * num_cols
        self.alignment: List[Alignment] = [Alignment.LEFT] * num_cols
        self.header_groups: List[HeaderGroup] = []
        self.rows: List[List[str]] = []
        self.padding = padding

    @property
    def num_cols(self) -> int:
        return len(self.headers)

    def set_header(self, col: int, text: str, alignment: Alignment = Alignment.LEFT) -> None:
        self.headers[col] = text
        self.alignment[col] = alignment

    def add_header_group(self, header: str, col_span: int) -> None:
        if col_span < 1:
            raise ValueError("header group must span at least one column")
        self.header_groups.append(HeaderGroup(header, col_span))

    def append(self, row: Sequence[str]) -> None:
        if len(row) != self.num_cols:
            raise ValueError(f"row has {len(row)} cells; table has {self.num_cols} columns")
        self.rows.append(list(row))

    def write(self, stream: TextIO, strip_ansi: bool = False) -> None:
        stream.write(self.render(strip_ansi))

    def render(self, strip_ansi: bool = False) -> str:
        widths = self._column_widths()
        pad = self.padding
        col_border = self._border(w + 2 * pad for w in widths)

        lines: List[str] = []
        if self.header_groups:
            group_widths = self._group_widths(widths)
            group_border = self._border(group_widths)
            lines.append(group_border)
            lines.append(self._line(
                self._cell(g.header, gw - 2 * pad, Alignment.LEFT, strip_ansi)
                for g, gw in zip(self.header_groups, group_widths)
            ))
            lines.append(group_border)
        else:
            lines.append(col_border)

        lines.append(self._line(
            self._cell(h, w, a, strip_ansi)
            for h, w, a in zip(self.headers, widths, self.alignment)
        ))
        lines.append(col_border)
        for row in self.rows:
            lines.append(self._line(
                self._cell(c, w, a, strip_ansi)
                for c, w, a in zip(row, widths, self.alignment)
            ))
        lines.append(col_border)
        return "\n".join(lines) + "\n"

    # ------------------------------------------------------------------ #
    def _column_widths(self) -> List[int]:
        widths = [visible_width(h) for h in self.headers]
        for row in self.rows:
            for idx, cell in enumerate(row):
                widths[idx] = max(widths[idx], visible_width(cell))

        if self.header_groups:
            spanned = sum(g.col_span for g in self.header_groups)
            if spanned != self.num_cols:
                raise ValueError(f"header groups span {spanned} columns; table has {self.num_cols}")
            # a group label wider than its columns widens the last of them
            start = 0
            for group in self.header_groups:
                end = start + group.col_span
                inner = sum(widths[start:end]) + (group.col_span - 1) * (2 * self.padding + 1)
                needed = visible_width(group.header)
                if needed > inner:
                    widths[end - 1] += needed - inner
                start = end
        return widths

    def _group_widths(self, widths: List[int]) -> List[int]:
        out = []
        start = 0
        for group in self.header_groups:
            end = start + group.col_span
            out.append(sum(w + 2 * self.padding for w in widths[start:end]) + group.col_span - 1)
            start = end
        return out

    def _cell(self, text: str, width: int, alignment: Alignment, strip_ansi: bool) -> str:
        fill = " " * max(width - visible_width(text), 0)
        content = _strip(text) if strip_ansi else text
        body = fill + content if alignment == Alignment.RIGHT else content + fill
        margin = " " * self.padding
        return f"{margin}{body}{margin}"

    @staticmethod
    def _border(widths) -> str:
        return "+" + "+".join("-" * w for w in widths) + "+"

    @staticmethod
    def _line(cells) -> str:
        return "|" + "|".join(cells) + "|"
