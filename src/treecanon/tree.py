from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

LEAF_LABEL = "()"


class Tree:
    """
    Arena of tree nodes addressed by index 0..n-1.

    The edge list is the single source of truth for topology; the
    adjacency index is maintained from it by add_edge so both endpoints
    always agree. ``labels`` holds the per-node AHU label and is mutated
    in place by the canonicalizer.
    """

    __slots__ = ("n", "labels", "edges", "_adj")

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"Tree size must be non-negative, got n={n}.")
        self.n = n
        self.labels: List[str] = [LEAF_LABEL] * n
        self.edges: List[Tuple[int, int]] = []
        self._adj: List[List[int]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"Tree(n={self.n}, edges={self.edges!r})"

    def check_node(self, u: int) -> None:
        """Raise IndexError unless 0 <= u < n."""
        if not 0 <= u < self.n:
            raise IndexError(f"Node {u} out of range for tree on {self.n} nodes.")

    def add_edge(self, u: int, v: int) -> None:
        """Register an undirected edge u~v (no acyclicity check)."""
        self.check_node(u)
        self.check_node(v)
        if u == v:
            raise ValueError(f"Self-loop at node {u} is not allowed in a tree.")
        self.edges.append((u, v))
        self._adj[u].append(v)
        self._adj[v].append(u)

    def neighbors(self, u: int) -> Sequence[int]:
        return self._adj[u]

    def degree(self, u: int) -> int:
        return len(self._adj[u])

    def reset_labels(self) -> None:
        """Restore every label to the leaf label so the tree can be canonicalized again."""
        self.labels = [LEAF_LABEL] * self.n

    def copy(self) -> "Tree":
        """Independent tree with the same topology and fresh labels."""
        t = Tree(self.n)
        for u, v in self.edges:
            t.add_edge(u, v)
        return t


def create_tree(n: int) -> Tree:
    """Allocate n nodes with no edges and default labels."""
    return Tree(n)


def add_undirected_edge(tree: Tree, u: int, v: int) -> None:
    """Register u and v as neighbors of each other."""
    tree.add_edge(u, v)


def tree_from_edges(edges: Iterable[Tuple[int, int]], n: Optional[int] = None) -> Tree:
    """
    Build a Tree from an edge list on vertices {0..n-1}.

    If *n* is not given it is inferred as max vertex + 1 (a single node
    when there are no edges).
    """
    eds = [(int(u), int(v)) for u, v in edges]
    if n is None:
        n = max(max(u, v) for u, v in eds) + 1 if eds else 1
    tree = Tree(n)
    for u, v in eds:
        tree.add_edge(u, v)
    return tree


def tree_from_adjlist(adj: Sequence[Sequence[int]]) -> Tree:
    """
    Build a Tree from a 0..n-1 adjacency list.
    Each undirected edge is taken once, from its smaller endpoint.
    """
    tree = Tree(len(adj))
    for u, neigh in enumerate(adj):
        for v in neigh:
            if v > u:
                tree.add_edge(u, v)
    return tree
