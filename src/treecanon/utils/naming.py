from __future__ import annotations

from treecanon.tree import Tree


def tree_name(tree: Tree) -> str:
    """Human-readable name for a tree.

    Handles: empty, K1, K2, P{n}, K1,{r}, fork, and general T{n}[{deg_seq}].
    """
    n = tree.n
    if n == 0:
        return "empty"
    if n == 1:
        return "K1"

    nedges = len(tree.edges)
    if nedges == 1:
        return "K2"

    degs = sorted((tree.degree(u) for u in range(n)), reverse=True)
    max_d = degs[0]

    # Path: all degrees <= 2
    if max_d <= 2:
        return f"P{n}"

    # Star: one hub adjacent to every other vertex
    if max_d == nedges and degs.count(1) == nedges:
        return f"K1,{nedges}"

    # Fork (degree-3 vertex in a 4-edge tree on 5 vertices)
    if n == 5 and max_d == 3:
        return "fork"

    ds_str = "".join(str(d) for d in degs)
    return f"T{n}[{ds_str}]"
