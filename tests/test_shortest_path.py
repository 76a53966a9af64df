"""Tests for unit-weight Dijkstra on LabeledGraph."""
import random

import networkx as nx

from porphyry.graph.labeled import LabeledGraph
from porphyry.graph.paths import dijkstra_unit_path, path_stats
from porphyry.io.networkx_io import arbor_to_nx
from porphyry.taxonomy.samples import build_sample_animals


def _path_graph():
    G = LabeledGraph(16)
    G.connect("a", "b")
    G.connect("b", "c")
    G.connect("c", "d")
    return G


# --- basic paths ---

def test_path_a_to_d():
    G = _path_graph()
    ids = [G.lookup(x) for x in "abcd"]
    assert G.shortest_path("a", "d") == ids
    assert G.shortest_path_labels("a", "d") == ["a", "b", "c", "d"]


def test_path_reverse():
    G = _path_graph()
    assert G.shortest_path_labels("d", "a") == ["d", "c", "b", "a"]


def test_path_to_self():
    G = _path_graph()
    assert G.shortest_path("a", "a") == [G.lookup("a")]


def test_path_unknown_label():
    G = _path_graph()
    assert G.shortest_path("a", "z") == []
    assert G.shortest_path("z", "a") == []


def test_path_unreachable():
    G = _path_graph()
    G.ensure_node("z")
    assert G.shortest_path("a", "z") == []


def test_shortcut_preferred():
    G = _path_graph()
    G.connect("a", "d")
    assert G.shortest_path_labels("a", "d") == ["a", "d"]


# --- sample taxonomy ---

def test_plato_to_chicken():
    G = build_sample_animals(LabeledGraph(256))
    path = G.shortest_path_labels("Plato", "chicken")
    assert path == [
        "Plato",
        "man",
        "rational_animal",
        "animal",
        "irrational_animal",
        "bird",
        "chicken",
    ]
    assert path_stats(G.shortest_path("Plato", "chicken")) == (6, 5)


def test_path_stats_empty():
    assert path_stats([]) == (0, 0)
    assert path_stats([3]) == (0, 0)


# --- agreement with BFS ---

def test_lengths_match_bfs_on_random_graph():
    rng = random.Random(0)
    G = LabeledGraph(64)
    labels = [f"v{i}" for i in range(40)]
    for label in labels:
        G.ensure_node(label)
    for _ in range(55):
        G.connect(rng.choice(labels), rng.choice(labels))

    H = arbor_to_nx(G)
    for s in labels[:10]:
        for t in labels:
            path = G.shortest_path(s, t)
            u, v = G.lookup(s), G.lookup(t)
            if nx.has_path(H, u, v):
                assert len(path) - 1 == nx.shortest_path_length(H, u, v)
                assert path[0] == u and path[-1] == v
                for a, b in zip(path, path[1:]):
                    assert b in G.adj[a]
            else:
                assert path == []


def test_dijkstra_on_adjlist():
    adj = [[1, 2], [0, 3], [0, 3], [1, 2, 4], [3], []]
    path = dijkstra_unit_path(adj, 0, 4)
    assert len(path) == 4
    assert path[0] == 0 and path[-1] == 4
    assert dijkstra_unit_path(adj, 0, 5) == []
