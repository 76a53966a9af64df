from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from porphyry.graph.labeled import LabeledGraph
from porphyry.io.networkx_io import arbor_to_nx
from .layouts import arbor_layout


def draw_arbor(
    G: LabeledGraph,
    *,
    root: str | None = None,
    highlight: list[int] | None = None,
    seed: int = 7,
    node_size: int = 900,
    font_size: int = 8,
    max_nodes_to_draw: int = 600,
    save_path: str | None = None,
):
    """
    Draw the taxonomy with its labels, top-down from *root* when G is a tree.

    *highlight* is a vertex path (e.g. from shortest_path) whose nodes and
    edges are drawn in a second colour.

    If save_path is set, saves a PNG there instead of showing the figure.
    Returns the layout positions keyed by node id.
    """
    H = arbor_to_nx(G)
    root_id = G.lookup(root) if root is not None else None
    pos = arbor_layout(H, root=root_id, seed=seed)
    path = list(highlight or [])

    fig, ax = plt.subplots(figsize=(12, 7))
    ax.set_title(f"Arbor Porphyriana   |V|={H.number_of_nodes()}  |E|={H.number_of_edges()}")
    ax.set_axis_off()

    if H.number_of_nodes() <= max_nodes_to_draw:
        # the tree layout leaves vertices unreachable from root unplaced
        drawn = [u for u in H.nodes() if u in pos]
        sub = H.subgraph(drawn)
        colors = ["tab:orange" if u in path else "tab:blue" for u in sub.nodes()]
        nx.draw_networkx_edges(sub, pos, ax=ax, width=1.2)
        nx.draw_networkx_nodes(sub, pos, ax=ax, node_size=node_size, node_color=colors)
        nx.draw_networkx_labels(
            sub,
            pos,
            ax=ax,
            labels={u: G.label_of[u] for u in sub.nodes()},
            font_size=font_size,
        )
        if len(path) > 1:
            nx.draw_networkx_edges(
                sub,
                pos,
                ax=ax,
                edgelist=[(a, b) for a, b in zip(path, path[1:]) if a in pos and b in pos],
                width=3.0,
                edge_color="tab:orange",
            )
    else:
        ax.text(
            0.5,
            0.5,
            f"Too large to draw\n(|V|={H.number_of_nodes()})",
            ha="center",
            va="center",
            transform=ax.transAxes,
        )

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return pos
