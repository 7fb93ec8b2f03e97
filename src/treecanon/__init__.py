"""
treecanon: AHU canonical forms for unrooted trees, with networkx/graph6
interop, center finding, isomorphism grouping and nauty cross-checks.
"""

from .tree import (
    LEAF_LABEL,
    Tree,
    create_tree,
    add_undirected_edge,
    tree_from_edges,
    tree_from_adjlist,
)
from .canon.ahu import find_parent, canonize_tree, is_isomorphic, canonical_form
from .canon.centers import tree_centers
from .io.graph6 import tree_from_nx, tree_to_nx, g6_to_tree, s6_to_tree, string_to_tree, tree_to_g6
from .viz.draw import draw_tree_pair

# Nauty wrappers
from .external.nauty import (
    nauty_available,
    gentreeg_available,
    shortg_form,
    agrees_with_shortg,
    gentreeg_s6,
    gentreeg_trees,
)

# Shared utilities
from .utils.connectivity import is_tree, require_tree
from .utils.naming import tree_name
from .utils.classify import group_isomorphic

__all__ = [
    # Tree
    "LEAF_LABEL",
    "Tree",
    "create_tree",
    "add_undirected_edge",
    "tree_from_edges",
    "tree_from_adjlist",
    # Canonical form
    "find_parent",
    "canonize_tree",
    "is_isomorphic",
    "canonical_form",
    "tree_centers",
    # IO
    "tree_from_nx",
    "tree_to_nx",
    "g6_to_tree",
    "s6_to_tree",
    "string_to_tree",
    "tree_to_g6",
    # Viz
    "draw_tree_pair",
    # Nauty
    "nauty_available",
    "gentreeg_available",
    "shortg_form",
    "agrees_with_shortg",
    "gentreeg_s6",
    "gentreeg_trees",
    # Utils
    "is_tree",
    "require_tree",
    "tree_name",
    "group_isomorphic",
]
