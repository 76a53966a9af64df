"""ASCII-only tree diagram of a LabeledGraph."""
from __future__ import annotations

from typing import List, Set, Tuple

from porphyry.graph.labeled import LabeledGraph


def ascii_tree_lines(G: LabeledGraph, root_label: str) -> List[str]:
    """
    Render the graph as a tree rooted at *root_label*.

    Children are listed in adjacency order with a "+-" connector; a vertex
    already drawn is not expanded again, so cycles and parallel edges are
    drawn once. Uses an explicit stack, so depth is not limited by the
    recursion limit. Raises KeyError if the root label is unknown.
    """
    root = G.lookup(root_label)
    if root is None:
        raise KeyError(root_label)

    lines: List[str] = [G.label_of[root]]
    seen: Set[int] = {root}

    # (vertex, prefix of its own line, prefix handed to its children)
    stack: List[Tuple[int, str, str]] = []

    def push_children(u: int, prefix: str) -> None:
        children = []
        for v in G.adj[u]:
            if v not in seen:
                seen.add(v)
                children.append(v)
        for i in reversed(range(len(children))):
            last = i + 1 == len(children)
            stack.append((children[i], prefix, prefix + ("  " if last else "| ")))

    push_children(root, "")
    while stack:
        v, prefix, child_prefix = stack.pop()
        lines.append(f"{prefix}+-{G.label_of[v]}")
        push_children(v, child_prefix)
    return lines


def render_ascii_tree(G: LabeledGraph, root_label: str) -> str:
    return "\n".join(ascii_tree_lines(G, root_label)) + "\n"
