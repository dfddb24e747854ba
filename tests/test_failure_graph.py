# tests/test_failure_graph.py
import pytest

from matchtrace.normalizer import InvalidInput
from matchtrace.visualization.failure_graph import export_failure_links_to_dot, export_failure_links_to_json
from matchtrace.visualization.graphviz_renderer import render_dot_to_svg


def test_dot_has_forward_and_failure_edges():
    # LPS of ABAB is [0, 0, 1, 2]
    dot = export_failure_links_to_dot("ABAB")
    assert dot.startswith('digraph "KMP_FAILURE" {')
    assert dot.rstrip().endswith("}")
    assert '  0 -> 1 [label="A"];' in dot
    assert '  3 -> 4 [label="B"];' in dot
    assert '  3 -> 1 [color="grey"' in dot
    assert '  4 -> 2 [color="grey"' in dot
    # failure links to state 0 are not drawn
    assert '  2 -> 0 [color="grey"' not in dot
    assert "4 [shape=doublecircle" in dot


def test_dot_without_fail_links():
    dot = export_failure_links_to_dot("AAAA", include_fail_links=False)
    assert "dashed" not in dot


def test_dot_escapes_quotes():
    dot = export_failure_links_to_dot('a"b')
    assert '[label="0x22"]' in dot


def test_json_export():
    data = export_failure_links_to_json("AABA")
    assert data["lpsArray"] == [0, 1, 0, 1]
    assert [n["fail"] for n in data["nodes"]] == [None, 0, 1, 0, 1]
    assert data["nodes"][-1]["accepting"] is True
    assert [e["label"] for e in data["edges"]] == ["A", "A", "B", "A"]


def test_empty_pattern_rejected():
    with pytest.raises(InvalidInput):
        export_failure_links_to_dot("")


def test_missing_graphviz_returns_error_svg():
    svg = render_dot_to_svg("digraph {}", engine="no-such-graphviz-engine")
    assert "<svg" in svg
    assert "not found" in svg
