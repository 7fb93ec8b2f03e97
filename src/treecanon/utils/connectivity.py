from __future__ import annotations

from typing import Optional

from treecanon.tree import Tree


def _reached_from(tree: Tree, start: int) -> int:
    """Number of nodes reachable from start."""
    seen = [False] * tree.n
    stack = [start]
    count = 0
    while stack:
        u = stack.pop()
        if seen[u]:
            continue
        seen[u] = True
        count += 1
        for v in tree.neighbors(u):
            if not seen[v]:
                stack.append(v)
    return count


def tree_violation(tree: Tree) -> Optional[str]:
    """
    Return a reason string if *tree* is not a tree, else None.

    Semantics for degenerate cases:
      - zero nodes -> tree (empty tree)
      - one node, no edges -> tree
    """
    n = tree.n
    if n == 0:
        return None if not tree.edges else "edges present on an empty node set"
    m = len(tree.edges)
    if m != n - 1:
        return f"expected {n - 1} edges for {n} nodes, got {m}"
    seen_pairs: set[tuple[int, int]] = set()
    for u, v in tree.edges:
        key = (min(u, v), max(u, v))
        if key in seen_pairs:
            return f"duplicate edge {key}"
        seen_pairs.add(key)
    reached = _reached_from(tree, 0)
    if reached != n:
        return f"disconnected: {reached} of {n} nodes reachable from node 0"
    return None


def is_tree(tree: Tree) -> bool:
    """True iff the graph is connected with exactly n-1 edges."""
    return tree_violation(tree) is None


def require_tree(tree: Tree) -> None:
    """Raise ValueError if *tree* is not a tree."""
    reason = tree_violation(tree)
    if reason is not None:
        raise ValueError(f"Input is not a tree: {reason}.")
