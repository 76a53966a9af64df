from .ascii_tree import ascii_tree_lines, render_ascii_tree
from .veb_view import veb_view_lines, render_veb_view
from .layouts import hierarchy_pos, arbor_layout
from .draw import draw_arbor

__all__ = [
    "ascii_tree_lines",
    "render_ascii_tree",
    "veb_view_lines",
    "render_veb_view",
    "hierarchy_pos",
    "arbor_layout",
    "draw_arbor",
]
