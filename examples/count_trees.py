"""
Count isomorphism classes of random labeled trees and compare with the
number of unlabeled trees enumerated by networkx.

Usage:
  python3 count_trees.py --n 8 --samples 20000
"""
import argparse
import random
import time

import networkx as nx

from treecanon import tree_from_nx, tree_name, group_isomorphic


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--n', type=int, default=8)
    parser.add_argument('--samples', type=int, default=20000)
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    rng = random.Random(args.seed)
    n = args.n
    t0 = time.time()
    trees = [
        tree_from_nx(nx.from_prufer_sequence([rng.randrange(n) for _ in range(n - 2)]))
        for _ in range(args.samples)
    ]
    classes = group_isomorphic(trees)
    t1 = time.time()

    total = sum(1 for _ in nx.nonisomorphic_trees(n))
    print(f"n={n}: {len(classes)} of {total} classes seen in {args.samples} samples ({t1 - t0:.2f}s)")
    for canon, idx in sorted(classes.items(), key=lambda kv: -len(kv[1]))[:10]:
        print(f"  {len(idx):6d}  {tree_name(trees[idx[0]]):12s} {canon}")


if __name__ == '__main__':
    main()
