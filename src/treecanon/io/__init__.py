from .graph6 import (
    strip_graph6_header,
    tree_from_nx,
    tree_to_nx,
    g6_to_tree,
    s6_to_tree,
    string_to_tree,
    tree_to_g6,
)

__all__ = [
    "strip_graph6_header",
    "tree_from_nx",
    "tree_to_nx",
    "g6_to_tree",
    "s6_to_tree",
    "string_to_tree",
    "tree_to_g6",
]
