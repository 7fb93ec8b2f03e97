from .draw import draw_tree_pair

__all__ = [
    "draw_tree_pair",
]
