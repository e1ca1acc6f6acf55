# diff/units.py
from dataclasses import dataclass
from typing import Dict, Sequence, Tuple

from ..schemas import DisplayUnit, Profile

# unit -> (nanoseconds per unit, number format)
_UNIT_TABLE: Dict[DisplayUnit, Tuple[float, str]] = {
    DisplayUnit.NS: (1.0, "{:,.0f}"),
    DisplayUnit.US: (1.0e3, "{:,.2f}"),
    DisplayUnit.MS: (1.0e6, "{:.2f}"),
}


@dataclass(frozen=True)
class UnitScale:
    """A concrete display unit: how to scale nanoseconds and print them."""
    unit: DisplayUnit
    divisor: float
    number_format: str

    @property
    def suffix(self) -> str:
        return self.unit.value

    def scale(self, nanoseconds: float) -> float:
        return nanoseconds / self.divisor

    def render(self, scaled: float) -> str:
        return f"{self.number_format.format(scaled)} {self.suffix}"


def resolve_unit(requested: DisplayUnit, sample_ns: float = 0) -> UnitScale:
    """
    Map the requested unit to a concrete scale.

    ``auto`` picks the coarsest unit in which ``sample_ns`` is at least 1;
    the result applies to every cell of a table.
    """
    unit = DisplayUnit(requested)
    if unit is DisplayUnit.AUTO:
        magnitude = abs(sample_ns)
        if magnitude >= _UNIT_TABLE[DisplayUnit.MS][0]:
            unit = DisplayUnit.MS
        elif magnitude >= _UNIT_TABLE[DisplayUnit.US][0]:
            unit = DisplayUnit.US
        else:
            unit = DisplayUnit.NS
    divisor, number_format = _UNIT_TABLE[unit]
    return UnitScale(unit, divisor, number_format)


def pick_unit_sample(profiles: Sequence[Profile]) -> int:
    """Representative duration for ``auto``: the largest root total time."""
    if not profiles:
        return 0
    return max(p.target.total_time for p in profiles)
