# diff/layout.py
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..schemas import Profile, StatColumn
from ..table.grid import Alignment, Table

CALL_STACK_HEADER = "call stack"
# leading free-text columns before the first profile block
LABEL_COLUMNS = 1


def profile_group_label(profile: Profile, index: int) -> str:
    if profile.label:
        return f"{profile.label} - baseline" if index == 0 else profile.label
    return "baseline" if index == 0 else f"profile {index}"


@dataclass(frozen=True)
class TableLayout:
    """
    Shape of an N-profile by M-column diff table.

    Column 0 holds the call stack; profile ``p`` owns the contiguous block of
    ``len(columns)`` cells starting at ``1 + p * len(columns)``.
    """
    columns: Tuple[StatColumn, ...]
    labels: Tuple[str, ...]

    @classmethod
    def for_profiles(cls, profiles: Sequence[Profile], columns: Sequence[StatColumn]) -> "TableLayout":
        labels = tuple(profile_group_label(p, i) for i, p in enumerate(profiles))
        return cls(tuple(columns), labels)

    @property
    def num_profiles(self) -> int:
        return len(self.labels)

    @property
    def width(self) -> int:
        return LABEL_COLUMNS + self.num_profiles * len(self.columns)

    def column_index(self, profile_index: int, stat_index: int) -> int:
        return LABEL_COLUMNS + profile_index * len(self.columns) + stat_index

    def headers(self) -> List[str]:
        out = [CALL_STACK_HEADER]
        for _ in self.labels:
            out.extend(col.header for col in self.columns)
        return out

    def alignment(self) -> List[Alignment]:
        return [Alignment.LEFT] + [Alignment.RIGHT] * (self.width - LABEL_COLUMNS)

    def header_groups(self) -> List[Tuple[str, int]]:
        return [("", 1)] + [(label, len(self.columns)) for label in self.labels]

    def new_table(self, padding: int = 1) -> Table:
        table = Table(self.width, padding=padding)
        for idx, (text, align) in enumerate(zip(self.headers(), self.alignment())):
            table.set_header(idx, text, align)
        for text, span in self.header_groups():
            table.add_header_group(text, span)
        return table
