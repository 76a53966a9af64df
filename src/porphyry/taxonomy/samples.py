"""Sample Porphyrian taxonomies."""
from __future__ import annotations

from typing import List, Tuple

from porphyry.graph.labeled import LabeledGraph


SAMPLE_EDGES: List[Tuple[str, str]] = [
    ("substance", "body"),
    ("substance", "incorporeal"),
    # body
    ("body", "living"),
    ("body", "non_living"),
    # living
    ("living", "animal"),
    ("living", "plant"),
    # differentia of animal
    ("animal", "rational_animal"),
    ("animal", "irrational_animal"),
    ("rational_animal", "man"),
    ("rational_animal", "immortal_rational_animal"),
    # individuals
    ("man", "Plato"),
    ("man", "Socrates"),
    ("man", "Aristotle"),
    ("irrational_animal", "equine"),
    ("irrational_animal", "canine"),
    ("irrational_animal", "bird"),
    ("bird", "chicken"),
]


def build_sample_animals(G: LabeledGraph) -> LabeledGraph:
    """Add the classic substance -> ... -> Plato / chicken tree to G."""
    for parent, child in SAMPLE_EDGES:
        G.connect(parent, child)
    return G


def synthetic_label(level: int, i: int) -> str:
    return f"L{level}_{i}"


def build_synthetic_porphyry(G: LabeledGraph, levels: int, branching: int) -> LabeledGraph:
    """
    Add a complete tree with *levels* levels and fan-out *branching*.

    Nodes are labelled L{level}_{i}, with i counting left to right within the
    level; the root is L1_0. levels <= 0 adds nothing.
    """
    if levels <= 0:
        return G
    root = synthetic_label(1, 0)
    G.ensure_node(root)
    prev = [root]
    for lvl in range(2, levels + 1):
        cur: List[str] = []
        for p in prev:
            for _b in range(branching):
                name = synthetic_label(lvl, len(cur))
                G.connect(p, name)
                cur.append(name)
        prev = cur
    return G


def synthetic_node_count(levels: int, branching: int) -> int:
    """Number of nodes build_synthetic_porphyry adds to an empty graph."""
    if levels <= 0:
        return 0
    return sum(branching ** i for i in range(levels))
