"""AHU canonical form of unrooted trees by iterative leaf peeling."""
from __future__ import annotations

import logging
from collections import deque
from typing import Dict, Iterable, List, Optional, Tuple

from treecanon.tree import Tree, tree_from_edges

logger = logging.getLogger(__name__)


def find_parent(tree: Tree, node: int, visited: List[int], generation: int) -> Optional[int]:
    """
    Return the unique neighbor of *node* not marked with *generation*.

    Returns None when there is no such neighbor or more than one.
    Reads the marks only.
    """
    parent = None
    for nbr in tree.neighbors(node):
        if visited[nbr] != generation:
            if parent is not None:
                return None
            parent = nbr
    return parent


def _discover(tree: Tree, root: int, visited: List[int], generation: int) -> Tuple[int, List[int]]:
    """BFS from root; returns (tree_size, leaves) for the component of root."""
    visited[root] = generation
    q = deque([root])
    size = 0
    leaves: List[int] = []
    while q:
        u = q.popleft()
        size += 1
        if tree.degree(u) == 1:
            leaves.append(u)
        for v in tree.neighbors(u):
            if visited[v] != generation:
                visited[v] = generation
                q.append(v)
    return size, leaves


def _fold(inner: str, child_labels: List[str]) -> str:
    child_labels.append(inner)
    child_labels.sort()
    return "(" + "".join(child_labels) + ")"


def _peel(tree: Tree, root: int) -> Tuple[int, List[int]]:
    """
    Run discovery and leaf peeling, mutating tree.labels.

    Returns (remaining_size, remaining_nodes) with remaining_size in {1, 2}.
    """
    tree.check_node(root)
    visited = [0] * tree.n
    generation = 1
    size, leaves = _discover(tree, root, visited, generation)
    logger.debug("discovered %d nodes, %d leaves from root %d", size, len(leaves), root)

    if size == 1:
        return 1, [root]

    generation += 1
    new_leaves: List[int] = []
    collected: Dict[int, List[str]] = {}
    rnd = 0

    while size > 2:
        if not leaves:
            raise ValueError(
                f"Leaf peeling stalled with {size} nodes remaining; "
                "input is not a tree (cycle present?)."
            )
        rnd += 1
        for leaf in leaves:
            parent = find_parent(tree, leaf, visited, generation)
            visited[leaf] = generation
            if parent is None:
                raise ValueError(f"Leaf {leaf} has no unique parent; input is not a tree.")
            if find_parent(tree, parent, visited, generation) is not None:
                new_leaves.append(parent)
            collected.setdefault(parent, []).append(tree.labels[leaf])
            size -= 1

        for parent, child_labels in collected.items():
            tree.labels[parent] = _fold(tree.labels[parent][1:-1], child_labels)

        logger.debug("round %d: peeled %d leaves, %d nodes remain", rnd, len(leaves), size)
        leaves, new_leaves = new_leaves, leaves
        new_leaves.clear()
        collected.clear()

    return size, leaves


def canonize_tree(tree: Tree, root: int = 0) -> str:
    """
    Canonical AHU string of an unrooted tree.

    Two trees are isomorphic iff their canonical strings are equal.
    Labels in *tree* are consumed; call tree.reset_labels() before reuse.

    Rules:
      - empty tree -> ""
      - one center  -> label of the center
      - two centers -> both labels concatenated, smaller first

    The input must be a tree. Cycles are not detected in general; a
    round that has nothing to peel raises ValueError.
    """
    if tree.n == 0:
        return ""

    size, remaining = _peel(tree, root)
    label1 = tree.labels[remaining[0]]
    if size == 1:
        logger.debug("single center %d", remaining[0])
        return label1

    label2 = tree.labels[remaining[1]]
    logger.debug("double center %d, %d", remaining[0], remaining[1])
    if label1 <= label2:
        return label1 + label2
    return label2 + label1


def is_isomorphic(tree_a: Tree, tree_b: Tree) -> bool:
    """Compare two trees by canonical form, leaving their labels untouched."""
    if tree_a.n != tree_b.n:
        return False
    return canonize_tree(tree_a.copy()) == canonize_tree(tree_b.copy())


def canonical_form(
    edges: Iterable[Tuple[int, int]],
    n: Optional[int] = None,
    *,
    validate: bool = False,
) -> str:
    """
    Canonical form of the tree given by an edge list on {0..n-1}.

    If *validate* is set, non-trees raise ValueError before peeling.
    """
    tree = tree_from_edges(edges, n)
    if validate:
        from treecanon.utils.connectivity import require_tree

        require_tree(tree)
    return canonize_tree(tree)
