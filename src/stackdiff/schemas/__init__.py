"""
stackdiff.schemas  •  Pydantic-v2 profile contracts
---------------------------------------------------
These classes are the canonical in-memory form of a captured profile. The
loader validates JSON straight into them and every diff component reads
them; nothing downstream mutates a loaded tree.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Iterator, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


# --------------------------------------------------------------------------- #
# 🔸 Enumerations
# --------------------------------------------------------------------------- #
class StatColumn(str, Enum):
    TOTAL       = "total"
    MIN         = "min"
    MAX         = "max"
    MEAN        = "mean"
    MEDIAN      = "median"
    INVOCATIONS = "invocations"
    P50         = "p50"
    P75         = "p75"
    P90         = "p90"
    P99         = "p99"
    STDDEV      = "stddev"

    @property
    def header(self) -> str:
        """Text shown in the table header for this column."""
        if self is StatColumn.INVOCATIONS:
            return "invoc"
        return self.value

    @property
    def is_duration(self) -> bool:
        return self not in (StatColumn.INVOCATIONS, StatColumn.STDDEV)

    def value_of(self, metrics: "CallMetrics") -> Union[int, float]:
        return _COLUMN_ACCESSORS[self](metrics)


class DisplayUnit(str, Enum):
    NS   = "ns"
    US   = "us"
    MS   = "ms"
    AUTO = "auto"


# --------------------------------------------------------------------------- #
# 🔸 Profile payloads
# --------------------------------------------------------------------------- #
class CallMetrics(BaseModel):
    """Measurements for one call-stack node plus its nested calls.

    Durations are nanoseconds. ``std_dev`` is in the same unit the profiler
    used for the mean and is displayed verbatim.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    fn_name: str                       = Field(..., alias="fn", examples=["main"])
    total_time: int                    = 0
    min_time: int                      = 0
    max_time: int                      = 0
    mean_time: int                     = 0
    median_time: int                   = 0
    p50_time: int                      = 0
    p75_time: int                      = 0
    p90_time: int                      = 0
    p99_time: int                      = 0
    std_dev: float                     = 0.0
    invocations: int                   = Field(0, ge=0)
    nested_calls: List[CallMetrics]    = Field(default_factory=list, alias="calls")

    def walk(self, depth: int = 0) -> Iterator[Tuple[CallMetrics, int]]:
        """Yield ``(node, depth)`` pairs in depth-first pre-order."""
        stack = [(self, depth)]
        while stack:
            node, level = stack.pop()
            yield node, level
            stack.extend((child, level + 1) for child in reversed(node.nested_calls))


class Profile(BaseModel):
    """A labelled call tree as written by the profiler."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    label: str          = Field("", description="Free text shown in the header group")
    target: CallMetrics


CallMetrics.model_rebuild()

_COLUMN_ACCESSORS: Dict[StatColumn, Callable[[CallMetrics], Union[int, float]]] = {
    StatColumn.TOTAL:       lambda m: m.total_time,
    StatColumn.MIN:         lambda m: m.min_time,
    StatColumn.MAX:         lambda m: m.max_time,
    StatColumn.MEAN:        lambda m: m.mean_time,
    StatColumn.MEDIAN:      lambda m: m.median_time,
    StatColumn.INVOCATIONS: lambda m: m.invocations,
    StatColumn.P50:         lambda m: m.p50_time,
    StatColumn.P75:         lambda m: m.p75_time,
    StatColumn.P90:         lambda m: m.p90_time,
    StatColumn.P99:         lambda m: m.p99_time,
    StatColumn.STDDEV:      lambda m: m.std_dev,
}
