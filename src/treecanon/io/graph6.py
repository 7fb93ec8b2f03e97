from __future__ import annotations

import networkx as nx

from treecanon.tree import Tree, tree_from_edges

_HEADERS = (">>graph6<<", ">>sparse6<<")


def strip_graph6_header(text: str) -> str:
    """
    Remove optional '>>graph6<<' / '>>sparse6<<' header and whitespace.
    """
    s = text.strip()
    for header in _HEADERS:
        if s.startswith(header):
            return s[len(header) :].strip()
    return s


def tree_from_nx(G: nx.Graph) -> Tree:
    """
    Build a Tree from a NetworkX graph.

    Nodes are relabeled to 0..n-1 in sorted order when the node keys are
    sortable, otherwise in iteration order.
    """
    nodes = list(G.nodes())
    try:
        nodes.sort()
    except TypeError:
        pass
    index = {v: i for i, v in enumerate(nodes)}
    return tree_from_edges(((index[u], index[v]) for u, v in G.edges()), len(nodes))


def tree_to_nx(tree: Tree) -> nx.Graph:
    """
    Simple undirected NetworkX Graph on nodes 0..n-1.
    """
    G = nx.Graph()
    G.add_nodes_from(range(tree.n))
    G.add_edges_from(tree.edges)
    return G


def g6_to_tree(g6: str) -> Tree:
    """
    Parse a graph6 string into a Tree.
    """
    s = strip_graph6_header(g6)
    return tree_from_nx(nx.from_graph6_bytes(s.encode("ascii")))


def s6_to_tree(s6: str) -> Tree:
    """
    Parse a sparse6 string (leading ':') into a Tree, as written by gentreeg.
    """
    s = strip_graph6_header(s6)
    G = nx.from_sparse6_bytes(s.encode("ascii"))
    if G.is_multigraph():
        G = nx.Graph(G)
    return tree_from_nx(G)


def string_to_tree(text: str) -> Tree:
    """
    Parse either format: sparse6 lines start with ':', anything else is graph6.
    """
    s = strip_graph6_header(text)
    if s.startswith(":"):
        return s6_to_tree(s)
    return g6_to_tree(s)


def tree_to_g6(tree: Tree) -> str:
    """
    graph6 string (no header) for a Tree.
    """
    return nx.to_graph6_bytes(tree_to_nx(tree), header=False).decode("ascii").strip()
