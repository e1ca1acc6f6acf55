#!/usr/bin/env python3
"""
Correlation tests: grouping call-stack nodes of several profiles by name.
"""

import pathlib
import sys

# Add src to path so we can import stackdiff modules
sys.path.insert(0, str(pathlib.Path(__file__).parent / "src"))

from stackdiff.diff.correlate import correlate
from stackdiff.schemas import CallMetrics, Profile


def node(name, *children, total=0):
    return CallMetrics(fn_name=name, total_time=total, nested_calls=list(children))


def test_correlate_entries():
    """Trees of different shape line up by function name."""
    p1 = Profile(target=node("main", node("foo", node("bar"))))
    p2 = Profile(target=node("main", node("bar")))

    correlations = correlate([p1, p2])

    assert list(correlations) == ["main", "foo", "bar"]
    specs = [
        ("main", True, True),
        ("foo", True, False),
        ("bar", True, True),
    ]
    for (fn_name, left, right), row in zip(specs, correlations.values()):
        assert row.fn_name == fn_name
        assert len(row.metrics) == 2
        assert (row.metrics[0] is not None) == left
        assert (row.metrics[1] is not None) == right


def test_names_missing_from_baseline_still_get_a_row():
    p1 = Profile(target=node("main", node("a")))
    p2 = Profile(target=node("main", node("b")))
    p3 = Profile(target=node("c"))

    correlations = correlate([p1, p2, p3])

    assert list(correlations) == ["main", "a", "b", "c"]
    assert correlations["b"].metrics[0] is None
    assert correlations["b"].metrics[1] is not None
    assert correlations["c"].metrics == [None, None, p3.target]
    assert correlations["main"].metrics[2] is None


def test_row_count_matches_distinct_names():
    trees = [
        node("main", node("x", node("y")), node("z")),
        node("main", node("y"), node("w", node("x"))),
        node("q"),
    ]
    profiles = [Profile(target=t) for t in trees]

    correlations = correlate(profiles)

    names_per_profile = [{n.fn_name for n, _ in t.walk()} for t in trees]
    assert set(correlations) == set().union(*names_per_profile)
    for name, row in correlations.items():
        for idx, names in enumerate(names_per_profile):
            assert (row.metrics[idx] is not None) == (name in names)


def test_repeated_name_keeps_last_visited_node():
    first = node("helper", total=1)
    second = node("helper", total=2)
    third = node("helper", total=3)
    tree = node("main", node("a", first), second, node("b", third))

    correlations = correlate([Profile(target=tree)])

    assert correlations["helper"].metrics[0] is third
    assert correlations["helper"].baseline().total_time == 3


def test_correlate_single_profile():
    tree = node("main", node("foo"))
    correlations = correlate([Profile(target=tree)])
    assert [row.metrics for row in correlations.values()] == [[tree], [tree.nested_calls[0]]]


if __name__ == "__main__":
    import pytest
    sys.exit(pytest.main([__file__, "-v"]))
