from __future__ import annotations

from typing import Tuple

from treecanon.tree import Tree
from .ahu import _peel


def tree_centers(tree: Tree, root: int = 0) -> Tuple[int, ...]:
    """
    Center node(s) of a tree: the one or two nodes left after repeated
    leaf removal. Returned sorted; () for the empty tree.

    Works on a copy, so the labels of *tree* are untouched.
    """
    if tree.n == 0:
        return ()
    _size, remaining = _peel(tree.copy(), root)
    return tuple(sorted(remaining))
