"""
Build the diff table: one header group per profile, one row per node of the
baseline call tree.

Rows are anchored to the baseline: names that only appear in later
profiles are correlated but never get a row of their own.
"""

from typing import Dict, List, Sequence

from ..schemas import CallMetrics, DisplayUnit, Profile, StatColumn
from ..table.grid import Table
from .align import align_and_append
from .correlate import CorrelationRow, correlate
from .formatter import ANSI_PALETTE, DiffFormatter, Palette
from .layout import LABEL_COLUMNS, TableLayout
from .units import pick_unit_sample, resolve_unit

TREE_GUIDE = "| "
LEAF_MARKER = "- "
BRANCH_MARKER = "+ "


def call_stack_cell(node: CallMetrics, depth: int) -> str:
    marker = BRANCH_MARKER if node.nested_calls else LEAF_MARKER
    return TREE_GUIDE * depth + marker + node.fn_name


def build_rows(profiles: Sequence[Profile], correlations: Dict[str, CorrelationRow],
               layout: TableLayout, formatter: DiffFormatter) -> List[List[str]]:
    rows: List[List[str]] = []
    for node, depth in profiles[0].target.walk():
        row = [""] * layout.width
        row[0] = call_stack_cell(node, depth)

        group = correlations[node.fn_name]
        baseline = group.baseline()
        for profile_index, entry in enumerate(group.metrics):
            if entry is None:
                continue
            for stat_index, column in enumerate(layout.columns):
                cell = layout.column_index(profile_index, stat_index)
                if profile_index == 0:
                    row[cell] = formatter.format_value(entry, column)
                else:
                    row[cell] = formatter.format_diff(baseline, entry, column)
        rows.append(row)
    return rows


def tabularize_diff(profiles: Sequence[Profile], columns: Sequence[StatColumn],
                    threshold: float = 0.0, unit: DisplayUnit = DisplayUnit.MS,
                    palette: Palette = ANSI_PALETTE, padding: int = 1) -> Table:
    """
    Correlate ``profiles`` and render the comparison against ``profiles[0]``.

    Args:
        profiles: baseline first, then the candidates to compare with it
        columns: statistics to show for every profile, in order
        threshold: absolute difference (in display units) below which a
            change is reported as neutral
        unit: display unit; ``auto`` picks one from the largest root total
        palette: escape codes used to color improvements and regressions
    """
    correlations = correlate(profiles)
    scale = resolve_unit(unit, pick_unit_sample(profiles))
    formatter = DiffFormatter(scale, threshold, palette)
    layout = TableLayout.for_profiles(profiles, columns)

    table = layout.new_table(padding=padding)
    rows = build_rows(profiles, correlations, layout, formatter)
    align_and_append(rows, table, label_columns=LABEL_COLUMNS)
    return table
