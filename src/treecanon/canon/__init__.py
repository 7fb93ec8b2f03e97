from .ahu import find_parent, canonize_tree, is_isomorphic, canonical_form
from .centers import tree_centers

__all__ = [
    "find_parent",
    "canonize_tree",
    "is_isomorphic",
    "canonical_form",
    "tree_centers",
]
