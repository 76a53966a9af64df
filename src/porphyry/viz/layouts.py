from __future__ import annotations

from typing import Dict, Hashable, List, Tuple

import networkx as nx


def hierarchy_pos(
    T: nx.Graph,
    root: Hashable,
    *,
    x_gap: float = 1.0,
    y_gap: float = 1.2,
) -> Dict[Hashable, Tuple[float, float]]:
    """
    Deterministic top-down layout for the BFS tree of T from *root*.
    Depth controls y-coordinate; subtree leaf counts allocate horizontal space.
    A leaf is centred in its slot, an inner vertex over the mean of its children.

    Vertices not reachable from root get no position. Runs without recursion,
    so arbitrarily deep trees are fine.
    """
    children: Dict[Hashable, List[Hashable]] = {root: []}
    depth: Dict[Hashable, int] = {root: 0}
    order: List[Hashable] = [root]  # BFS order: parents before children
    for u, v in nx.bfs_edges(T, root):
        children[u].append(v)
        children[v] = []
        depth[v] = depth[u] + 1
        order.append(v)

    leaf_count: Dict[Hashable, int] = {}
    for u in reversed(order):
        ch = children[u]
        leaf_count[u] = sum(leaf_count[v] for v in ch) if ch else 1

    x_left: Dict[Hashable, float] = {root: 0.0}
    for u in order:
        cursor = x_left[u]
        for v in children[u]:
            x_left[v] = cursor
            cursor += leaf_count[v] * x_gap

    pos: Dict[Hashable, Tuple[float, float]] = {}
    for u in reversed(order):
        ch = children[u]
        if ch:
            x = sum(pos[v][0] for v in ch) / len(ch)
        else:
            x = x_left[u] + 0.5 * x_gap
        pos[u] = (x, -depth[u] * y_gap)
    return pos


def arbor_layout(T: nx.Graph, root: Hashable | None = None, seed: int = 7):
    """
    Choose a layout for a taxonomy graph:
      - hierarchy_pos from *root* if T is a tree
      - otherwise spring_layout
    """
    if root is not None and root in T and nx.is_tree(T):
        return hierarchy_pos(T, root)
    return nx.spring_layout(T, seed=seed, iterations=300)
