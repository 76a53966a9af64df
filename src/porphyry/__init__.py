"""
porphyry: a Van Emde Boas indexed labeled graph for Porphyrian taxonomies,
with unit-weight shortest paths, ASCII / Graphviz / matplotlib rendering,
and sample taxonomy builders.
"""

from .veb.tree import VanEmdeBoas
from .graph.labeled import LabeledGraph
from .graph.paths import dijkstra_unit_path, path_stats
from .exceptions import PorphyryError, CapacityExceeded

# Taxonomies
from .taxonomy.samples import (
    SAMPLE_EDGES,
    build_sample_animals,
    build_synthetic_porphyry,
)

# Rendering and export
from .io.dot import to_dot, write_dot
from .io.networkx_io import arbor_to_nx
from .viz.ascii_tree import render_ascii_tree
from .viz.veb_view import render_veb_view
from .viz.draw import draw_arbor

from .utils.naming import join_labels
from .utils.timing import timed_us

__all__ = [
    # Core
    "VanEmdeBoas",
    "LabeledGraph",
    "dijkstra_unit_path",
    "path_stats",
    # Errors
    "PorphyryError",
    "CapacityExceeded",
    # Taxonomies
    "SAMPLE_EDGES",
    "build_sample_animals",
    "build_synthetic_porphyry",
    # IO
    "to_dot",
    "write_dot",
    "arbor_to_nx",
    # Viz
    "render_ascii_tree",
    "render_veb_view",
    "draw_arbor",
    # Utils
    "join_labels",
    "timed_us",
]
