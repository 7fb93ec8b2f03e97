from treecanon import tree_from_edges
from treecanon.cli import REGRESSION_PAIR
from treecanon.viz.draw import draw_tree_pair

a = tree_from_edges(REGRESSION_PAIR[0])
b = tree_from_edges(REGRESSION_PAIR[1])

canon_a, canon_b = draw_tree_pair(a, b, seed=7)
print("A:", canon_a)
print("B:", canon_b)
