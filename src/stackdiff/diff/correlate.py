# diff/correlate.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from ..schemas import CallMetrics, Profile


@dataclass
class CorrelationRow:
    """All nodes sharing one function name, one slot per profile."""
    fn_name: str
    metrics: List[Optional[CallMetrics]] = field(default_factory=list)

    def baseline(self) -> Optional[CallMetrics]:
        return self.metrics[0] if self.metrics else None


def correlate(profiles: Sequence[Profile]) -> Dict[str, CorrelationRow]:
    """
    Group call-stack nodes of every profile by function name.

    The returned dict is ordered by first appearance, walking the baseline
    tree first and then each later profile. Correlation is by name only, so
    trees of different shape line up as long as names match. When a name
    occurs more than once in the same profile the last node visited in
    pre-order occupies that profile's slot.
    """
    rows: Dict[str, CorrelationRow] = {}
    num_profiles = len(profiles)
    for profile_index, profile in enumerate(profiles):
        for node, _depth in profile.target.walk():
            row = rows.get(node.fn_name)
            if row is None:
                row = CorrelationRow(node.fn_name, [None] * num_profiles)
                rows[node.fn_name] = row
            row.metrics[profile_index] = node
    return rows
