"""
Diff formatting for a single statistic cell.

The comparison math (`compare`) only produces a `Verdict` and a percentage.
Turning that into terminal output is the job of a `Palette`, so swapping the
escape codes never touches the numbers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from ..schemas import CallMetrics, StatColumn
from .units import UnitScale

DIFF_EPSILON = 0.01

IMPROVEMENT_GLYPH = "↓"
REGRESSION_GLYPH = "↑"
NEUTRAL_MARKER = "(--)"


class Verdict(str, Enum):
    NEUTRAL = "neutral"
    IMPROVEMENT = "improvement"
    REGRESSION = "regression"


@dataclass(frozen=True)
class Comparison:
    verdict: Verdict
    percent: Optional[float] = None


@dataclass(frozen=True)
class Palette:
    """Escape sequences wrapped around a verdict's annotation."""
    codes: Dict[Verdict, Tuple[str, str]]

    def wrap(self, verdict: Verdict, text: str) -> str:
        start, end = self.codes.get(verdict, ("", ""))
        return f"{start}{text}{end}"


ANSI_PALETTE = Palette({
    Verdict.IMPROVEMENT: ("\033[32m", "\033[0m"),  # green
    Verdict.REGRESSION: ("\033[31m", "\033[0m"),   # red
})
PLAIN_PALETTE = Palette({})


def compare(baseline: float, candidate: float, clip_threshold: float = 0.0) -> Comparison:
    """
    Classify ``candidate`` against ``baseline``; lower values are better.

    Both values must already be in the display unit: the clip threshold and
    the epsilon are compared against their absolute difference.
    """
    abs_delta = abs(baseline - candidate)
    if abs_delta < clip_threshold:
        return Comparison(Verdict.NEUTRAL)

    speedup = baseline / candidate if candidate != 0 else 0.0
    if abs_delta < DIFF_EPSILON:
        speedup = 1.0

    if speedup == 0.0 or speedup == 1.0:
        return Comparison(Verdict.NEUTRAL)
    if speedup > 1.0:
        return Comparison(Verdict.IMPROVEMENT, (speedup - 1.0) * 100.0)
    # How much slower the candidate is, e.g. 2ms -> 4ms is 100%
    return Comparison(Verdict.REGRESSION, (1.0 / speedup - 1.0) * 100.0)


class DiffFormatter:
    """Render metric values, and comparisons against a baseline, as table cells."""

    def __init__(self, unit: UnitScale, clip_threshold: float = 0.0, palette: Palette = ANSI_PALETTE):
        self.unit = unit
        self.clip_threshold = clip_threshold
        self.palette = palette

    def format_value(self, metrics: CallMetrics, column: StatColumn) -> str:
        value = column.value_of(metrics)
        if column is StatColumn.INVOCATIONS:
            return f"{value:d}"
        if column is StatColumn.STDDEV:
            return f"{value:.3f}"
        return self.unit.render(self.unit.scale(value))

    def format_diff(self, baseline: Optional[CallMetrics], candidate: CallMetrics,
                    column: StatColumn) -> str:
        if baseline is None or not column.is_duration:
            return self.format_value(candidate, column)

        base_value = self.unit.scale(column.value_of(baseline))
        cand_value = self.unit.scale(column.value_of(candidate))
        rendered = self.unit.render(cand_value)

        result = compare(base_value, cand_value, self.clip_threshold)
        if result.verdict is Verdict.NEUTRAL:
            return f"{rendered} {NEUTRAL_MARKER}"

        glyph = IMPROVEMENT_GLYPH if result.verdict is Verdict.IMPROVEMENT else REGRESSION_GLYPH
        annotation = self.palette.wrap(result.verdict, f"{glyph} {result.percent:.1f}%")
        return f"{rendered} ({annotation})"
