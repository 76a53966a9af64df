from .labeled import LabeledGraph
from .paths import dijkstra_unit_path, path_stats

__all__ = [
    "LabeledGraph",
    "dijkstra_unit_path",
    "path_stats",
]
