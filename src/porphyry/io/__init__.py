from .dot import dot_lines, to_dot, write_dot
from .networkx_io import arbor_to_nx, arbor_to_nx_labels

__all__ = [
    "dot_lines",
    "to_dot",
    "write_dot",
    "arbor_to_nx",
    "arbor_to_nx_labels",
]
