# src/matchtrace/visualization/failure_graph.py

import html
from typing import Any, Dict

from matchtrace.matcher.failure_function import build_failure_table


def _edge_label(ch: str) -> str:
    if not ch.isprintable() or ch in ('"', "\\"):
        return f"0x{ord(ch):02X}"
    return ch


def export_failure_links_to_dot(pattern: str, include_fail_links: bool = True) -> str:
    """
    Exports the KMP matching automaton of a pattern to GraphViz DOT format.

    State k means "the first k pattern characters are matched". Forward edges
    consume pattern[k]; dashed edges are failure links k -> LPS[k - 1].

    Args:
        pattern: non-empty pattern (InvalidInput otherwise).
        include_fail_links: Whether to draw dashed failure edges.

    Returns:
        A string containing the DOT graph definition.
    """
    table, _ = build_failure_table(pattern)
    m = len(pattern)

    lines = [
        'digraph "KMP_FAILURE" {',
        '  rankdir=LR;',
        '  node [shape=circle, fontname="Arial", fontsize=10];',
        '  edge [fontname="Arial", fontsize=9];',
        '  start [shape=point];',
    ]

    for state in range(m + 1):
        attrs = []
        if state == m:
            attrs.append('shape=doublecircle')
            attrs.append('color=red')
            attrs.append('style=filled')
            attrs.append('fillcolor="#ffe6e6"')
            attrs.append(f'xlabel=<<FONT COLOR="darkred"><B>{html.escape(pattern)}</B></FONT>>')
        elif state == 0:
            attrs.append('style=filled')
            attrs.append('fillcolor="#e6ffe6"')
        attrs.append(f'label="{state}"')
        lines.append(f'  {state} [{", ".join(attrs)}];')

    lines.append('  start -> 0;')

    for state in range(m):
        lines.append(f'  {state} -> {state + 1} [label="{_edge_label(pattern[state])}"];')

    if include_fail_links:
        for state in range(1, m + 1):
            target = table[state - 1]
            # links back to 0 are implied
            if target != 0:
                lines.append(f'  {state} -> {target} [color="grey", style="dashed", constraint=false];')

    lines.append('}')
    return "\n".join(lines)


def export_failure_links_to_json(pattern: str) -> Dict[str, Any]:
    """
    Export the same automaton as nodes/edges lists for client-side renderers.
    """
    table, _ = build_failure_table(pattern)
    m = len(pattern)

    nodes = [
        {
            "id": state,
            "accepting": state == m,
            "fail": table[state - 1] if state else None,
        }
        for state in range(m + 1)
    ]
    edges = [{"source": k, "target": k + 1, "label": pattern[k]} for k in range(m)]
    return {"pattern": pattern, "lpsArray": list(table), "nodes": nodes, "edges": edges}
