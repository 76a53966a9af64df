"""Tests for ASCII, VEB view, DOT and matplotlib rendering."""
import pytest

from porphyry.graph.labeled import LabeledGraph
from porphyry.io.dot import dot_lines, to_dot, write_dot
from porphyry.taxonomy.samples import SAMPLE_EDGES, build_sample_animals
from porphyry.utils.naming import join_labels
from porphyry.viz.ascii_tree import ascii_tree_lines, render_ascii_tree
from porphyry.viz.draw import draw_arbor
from porphyry.viz.layouts import hierarchy_pos
from porphyry.viz.veb_view import veb_view_lines
from porphyry.io.networkx_io import arbor_to_nx


def _small_tree():
    G = LabeledGraph(16)
    G.connect("root", "a")
    G.connect("root", "b")
    G.connect("a", "c")
    return G


# --- ASCII ---

def test_ascii_small_tree():
    assert ascii_tree_lines(_small_tree(), "root") == [
        "root",
        "+-a",
        "| +-c",
        "+-b",
    ]


def test_ascii_from_inner_node_includes_parent():
    assert ascii_tree_lines(_small_tree(), "a") == [
        "a",
        "+-root",
        "| +-b",
        "+-c",
    ]


def test_ascii_cycle_terminates():
    G = _small_tree()
    G.connect("c", "root")
    lines = ascii_tree_lines(G, "root")
    assert sorted(line.lstrip("| +-") for line in lines) == ["a", "b", "c", "root"]


def test_ascii_unknown_root():
    with pytest.raises(KeyError):
        render_ascii_tree(_small_tree(), "entity")


def test_ascii_sample_line_count():
    G = build_sample_animals(LabeledGraph(256))
    text = render_ascii_tree(G, "substance")
    assert text.endswith("\n")
    assert len(text.splitlines()) == len(G)


# --- VEB view ---

def test_veb_view_lines():
    G = LabeledGraph(16)
    for label in "abcdef":
        G.ensure_node(label)
    assert veb_view_lines(G) == [
        "--- VEB View (U=16) ---",
        "cluster[0] -> IDs: 0 1 2 3",
        "labels: a, b, c, d",
        "cluster[1] -> IDs: 4 5",
        "labels: e, f",
        "minID=0, maxID=5",
    ]


def test_veb_view_empty():
    assert veb_view_lines(LabeledGraph(4))[-1] == "minID=-1, maxID=-1"


# --- DOT ---

def test_dot_structure():
    G = build_sample_animals(LabeledGraph(256))
    lines = dot_lines(G)
    assert lines[0] == "graph Porphyry {"
    assert lines[1] == "  rankdir=TB;"
    assert lines[-1] == "}"
    assert '  n0 [label="substance"];' in lines
    edges = [ln for ln in lines if " -- " in ln]
    assert len(edges) == len(SAMPLE_EDGES)
    assert "  n0 -- n1;" in edges


def test_dot_skips_self_loops_and_quotes():
    G = LabeledGraph(16)
    G.connect('say "hi"', 'say "hi"')
    text = to_dot(G)
    assert 'label="say \\"hi\\""' in text
    assert " -- " not in text


def test_write_dot(tmp_path, capsys):
    G = _small_tree()
    out = tmp_path / "porphyry.dot"
    write_dot(G, str(out))
    assert out.read_text(encoding="utf-8") == to_dot(G)
    assert "[graphviz] wrote" in capsys.readouterr().err


def test_write_dot_bad_path(tmp_path):
    with pytest.raises(OSError):
        write_dot(_small_tree(), str(tmp_path / "missing" / "x.dot"))


# --- labels ---

def test_join_labels():
    assert join_labels([0, 2, 7], ["a", "b", "c"]) == "a -> c -> #7"
    assert join_labels([], ["a"]) == ""
    assert join_labels([1, 0], ["a", "b"], sep=",") == "b,a"


# --- layout / matplotlib ---

def test_hierarchy_pos_depths():
    G = _small_tree()
    H = arbor_to_nx(G)
    pos = hierarchy_pos(H, G.lookup("root"), y_gap=1.0)
    assert pos[G.lookup("root")][1] == 0.0
    assert pos[G.lookup("a")][1] == -1.0
    assert pos[G.lookup("c")][1] == -2.0
    # a sits over its only leaf
    assert pos[G.lookup("a")][0] == pos[G.lookup("c")][0]


def test_draw_arbor_saves_png(tmp_path):
    G = build_sample_animals(LabeledGraph(256))
    out = tmp_path / "arbor.png"
    pos = draw_arbor(
        G,
        root="substance",
        highlight=G.shortest_path("Plato", "chicken"),
        save_path=str(out),
    )
    assert out.exists()
    assert len(pos) == len(G)


# --- deep trees ---

def _chain(n):
    G = LabeledGraph(n)
    for i in range(n - 1):
        G.connect(f"c{i}", f"c{i + 1}")
    return G


def test_ascii_deep_chain():
    G = _chain(2000)
    lines = ascii_tree_lines(G, "c0")
    assert len(lines) == 2000
    assert lines[0] == "c0"
    assert lines[1] == "+-c1"
    assert lines[-1] == "  " * 1998 + "+-c1999"


def test_hierarchy_pos_deep_chain():
    G = _chain(2000)
    pos = hierarchy_pos(arbor_to_nx(G), 0, y_gap=1.0)
    assert len(pos) == 2000
    assert pos[1999] == (0.5, -1999.0)
    assert pos[0] == (0.5, 0.0)
