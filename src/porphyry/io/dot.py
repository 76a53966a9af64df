"""Graphviz DOT text for a LabeledGraph."""
from __future__ import annotations

import sys
from typing import List

from porphyry.graph.labeled import LabeledGraph


def _quote(label: str) -> str:
    return label.replace("\\", "\\\\").replace('"', '\\"')


def dot_lines(G: LabeledGraph, name: str = "Porphyry") -> List[str]:
    """
    Undirected DOT graph: one declaration per node (n<id>), and each edge
    once as n<u> -- n<v> with u < v. Self loops are not drawn.
    """
    lines = [
        f"graph {name} {{",
        "  rankdir=TB;",
        "  node [shape=box, style=rounded];",
    ]
    for nid, label in enumerate(G.label_of):
        lines.append(f'  n{nid} [label="{_quote(label)}"];')
    for u, neigh in enumerate(G.adj):
        for v in neigh:
            if u < v:
                lines.append(f"  n{u} -- n{v};")
    lines.append("}")
    return lines


def to_dot(G: LabeledGraph, name: str = "Porphyry") -> str:
    return "\n".join(dot_lines(G, name=name)) + "\n"


def write_dot(G: LabeledGraph, filename: str, name: str = "Porphyry") -> None:
    """Write DOT text to *filename*. Raises OSError if it cannot be written."""
    with open(filename, "w", encoding="utf-8") as fh:
        fh.write(to_dot(G, name=name))
    print(
        f"[graphviz] wrote {filename} (render with: dot -Tpng {filename} -o porphyry.png)",
        file=sys.stderr,
    )
