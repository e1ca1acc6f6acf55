# diff/columns.py
from typing import List
from ..errors import UnsupportedColumnError, UnsupportedUnitError
from ..schemas import DisplayUnit, StatColumn


def supported_column_names() -> str:
    """All column identifiers in display order, comma separated."""
    return ",".join(col.value for col in StatColumn)


def parse_column_list(spec: str) -> List[StatColumn]:
    """
    Parse a comma separated list of column identifiers.

    Blank entries are skipped and repeated columns keep their first position,
    so ``"total,,min,total"`` yields ``[TOTAL, MIN]``.

    Raises:
        UnsupportedColumnError: for an identifier that is not a StatColumn.
    """
    columns: List[StatColumn] = []
    for raw in (spec or "").split(","):
        name = raw.strip().lower()
        if not name:
            continue
        try:
            col = StatColumn(name)
        except ValueError:
            raise UnsupportedColumnError(raw.strip()) from None
        if col not in columns:
            columns.append(col)
    return columns


def parse_display_unit(name: str) -> DisplayUnit:
    try:
        return DisplayUnit((name or "").strip().lower())
    except ValueError:
        raise UnsupportedUnitError(name) from None
