from .connectivity import is_tree, require_tree, tree_violation
from .naming import tree_name
from .classify import group_isomorphic

__all__ = [
    "is_tree",
    "require_tree",
    "tree_violation",
    "tree_name",
    "group_isomorphic",
]
