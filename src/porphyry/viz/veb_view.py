from __future__ import annotations

from typing import List

from porphyry.graph.labeled import LabeledGraph


def veb_view_lines(G: LabeledGraph) -> List[str]:
    """
    Text view of the id index: one block per non-empty top-level cluster,
    followed by the index minimum and maximum.
    """
    lines = [f"--- VEB View (U={G.universe_size}) ---"]
    for h, members in G.enumerate_by_cluster().items():
        ids = " ".join(str(k) for k, _ in members)
        names = ", ".join(name for _, name in members)
        lines.append(f"cluster[{h}] -> IDs: {ids}")
        lines.append(f"labels: {names}")
    lo = G.index.minimum if G.index.minimum is not None else -1
    hi = G.index.maximum if G.index.maximum is not None else -1
    lines.append(f"minID={lo}, maxID={hi}")
    return lines


def render_veb_view(G: LabeledGraph) -> str:
    return "\n".join(veb_view_lines(G)) + "\n"
