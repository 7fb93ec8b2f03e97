"""Tests for treecanon.tree (node arena and construction helpers)."""
import pytest

from treecanon.tree import (
    LEAF_LABEL,
    Tree,
    create_tree,
    add_undirected_edge,
    tree_from_edges,
    tree_from_adjlist,
)


def test_create_tree_defaults():
    tree = create_tree(3)
    assert len(tree) == 3
    assert tree.labels == [LEAF_LABEL] * 3
    assert tree.edges == []
    assert all(tree.degree(u) == 0 for u in range(3))


def test_create_tree_negative():
    with pytest.raises(ValueError):
        create_tree(-1)


def test_add_undirected_edge_symmetric():
    tree = create_tree(3)
    add_undirected_edge(tree, 0, 1)
    add_undirected_edge(tree, 2, 1)
    assert tree.edges == [(0, 1), (2, 1)]
    assert list(tree.neighbors(1)) == [0, 2]
    assert list(tree.neighbors(0)) == [1]
    assert list(tree.neighbors(2)) == [1]


def test_add_edge_out_of_range():
    tree = create_tree(2)
    with pytest.raises(IndexError):
        add_undirected_edge(tree, 0, 2)


def test_add_edge_self_loop():
    tree = create_tree(2)
    with pytest.raises(ValueError):
        add_undirected_edge(tree, 1, 1)


def test_tree_from_edges_infers_n():
    tree = tree_from_edges([(0, 1), (1, 4)])
    assert tree.n == 5
    assert tree_from_edges([]).n == 1
    assert tree_from_edges([], n=0).n == 0


def test_tree_from_adjlist():
    tree = tree_from_adjlist([[1, 2], [0], [0]])
    assert tree.n == 3
    assert sorted(tree.edges) == [(0, 1), (0, 2)]


def test_copy_is_independent():
    tree = tree_from_edges([(0, 1), (1, 2)])
    tree.labels[1] = "(()())"
    dup = tree.copy()
    assert isinstance(dup, Tree)
    assert dup.edges == tree.edges
    assert dup.labels == [LEAF_LABEL] * 3
    dup.add_edge(0, 2)
    assert len(tree.edges) == 2
