from __future__ import annotations

from typing import Dict, Iterable, List

from treecanon.tree import Tree
from treecanon.canon.ahu import canonize_tree


def group_isomorphic(trees: Iterable[Tree]) -> Dict[str, List[int]]:
    """Partition trees into isomorphism classes.

    Returns canonical_form -> indices of the trees in that class, in the
    order classes were first seen. Input labels are left untouched.
    """
    classes: Dict[str, List[int]] = {}
    for i, tree in enumerate(trees):
        canon = canonize_tree(tree.copy())
        classes.setdefault(canon, []).append(i)
    return classes
