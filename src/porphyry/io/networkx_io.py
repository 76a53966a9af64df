from __future__ import annotations

import networkx as nx

from porphyry.graph.labeled import LabeledGraph


def arbor_to_nx(G: LabeledGraph) -> nx.Graph:
    """
    Simple undirected NetworkX graph on the node ids of G.

    Each node carries its label in the "label" attribute; parallel edges
    collapse to one.
    """
    H = nx.Graph()
    for nid, label in enumerate(G.label_of):
        H.add_node(nid, label=label)
    H.add_edges_from(G.edges())
    return H


def arbor_to_nx_labels(G: LabeledGraph) -> nx.Graph:
    """Same as arbor_to_nx, relabelled so nodes are the label strings."""
    return nx.relabel_nodes(arbor_to_nx(G), dict(enumerate(G.label_of)))
