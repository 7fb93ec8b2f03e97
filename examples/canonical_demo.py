"""
Canonical form of the worked example tree from the UVic CSC 582 notes,
plus the chair-shaped regression pair.

Usage:
  python3 canonical_demo.py
"""
from treecanon import create_tree, add_undirected_edge, canonize_tree, tree_centers
from treecanon.cli import DEMO_EDGES, REGRESSION_PAIR

tree = create_tree(19)
for u, v in DEMO_EDGES:
    add_undirected_edge(tree, u, v)

print("centers:", tree_centers(tree))
print("canonical form:", canonize_tree(tree))

encodings = []
for edges in REGRESSION_PAIR:
    t = create_tree(5)
    for u, v in edges:
        add_undirected_edge(t, u, v)
    encodings.append(canonize_tree(t))

print("regression:", encodings)
if encodings[0] != encodings[1]:
    print("ERROR")
