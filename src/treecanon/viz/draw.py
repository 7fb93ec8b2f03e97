from __future__ import annotations

import networkx as nx
import matplotlib.pyplot as plt

from treecanon.tree import Tree
from treecanon.canon.ahu import canonize_tree
from treecanon.canon.centers import tree_centers
from treecanon.io.graph6 import tree_to_nx


def _draw_one(ax, tree: Tree, title: str, *, seed: int, node_size: int, edge_width: float) -> None:
    G = tree_to_nx(tree)
    centers = set(tree_centers(tree))
    pos = nx.spring_layout(G, seed=seed, iterations=300)
    colors = ["tab:red" if v in centers else "tab:blue" for v in G.nodes()]
    ax.set_title(title)
    ax.set_axis_off()
    nx.draw_networkx(
        G,
        pos=pos,
        ax=ax,
        with_labels=True,
        node_color=colors,
        node_size=node_size,
        width=edge_width,
        font_color="white",
        font_size=8,
    )


def draw_tree_pair(
    tree_a: Tree,
    tree_b: Tree,
    *,
    seed: int = 7,
    node_size: int = 240,
    edge_width: float = 1.2,
    save_path: str | None = None,
):
    """
    Draw two trees side by side with their centers highlighted and their
    canonical forms in the titles.

    If save_path is set, saves a PNG there instead of showing the figure.
    Returns (canon_a, canon_b); the input labels are left untouched.
    """
    canon_a = canonize_tree(tree_a.copy())
    canon_b = canonize_tree(tree_b.copy())
    verdict = "isomorphic" if canon_a == canon_b else "not isomorphic"

    fig, (axA, axB) = plt.subplots(1, 2, figsize=(12, 6))
    _draw_one(axA, tree_a, f"A: |V|={tree_a.n}\n{canon_a}", seed=seed,
              node_size=node_size, edge_width=edge_width)
    _draw_one(axB, tree_b, f"B: |V|={tree_b.n}\n{canon_b}", seed=seed,
              node_size=node_size, edge_width=edge_width)
    fig.suptitle(verdict)
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200)
        plt.close(fig)
    else:
        plt.show()

    return canon_a, canon_b
