"""
Command-line front end.

Usage:
  python -m treecanon                      # demo trees
  python -m treecanon --edges "0-1,1-2,1-3"
  python -m treecanon --g6 "Ch" --centers
"""
from __future__ import annotations

import argparse
import logging
import os
import re
import sys

from treecanon.tree import Tree, create_tree, add_undirected_edge, tree_from_edges
from treecanon.canon.ahu import canonize_tree
from treecanon.canon.centers import tree_centers
from treecanon.io.graph6 import string_to_tree
from treecanon.utils.connectivity import require_tree
from treecanon.utils.naming import tree_name

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}

# Worked example from the UVic CSC 582 notes on tree canonical forms.
DEMO_EDGES = [
    (6, 2), (6, 7), (6, 11), (7, 8), (7, 9), (7, 10), (11, 12), (11, 13), (11, 16),
    (13, 14), (13, 15), (16, 17), (16, 18), (2, 0), (2, 1), (2, 3), (2, 4), (4, 5),
]

REGRESSION_PAIR = (
    [(2, 0), (2, 1), (2, 3), (3, 4)],
    [(1, 3), (1, 0), (1, 2), (2, 4)],
)

_EDGE_RE = re.compile(r"^(\d+)\s*[-:]\s*(\d+)$")


def validate_default() -> bool:
    return os.environ.get("TREECANON_VALIDATE", "").strip().lower() in _TRUTHY


def parse_edges(text: str) -> list[tuple[int, int]]:
    """Parse 'u-v' pairs separated by commas or whitespace."""
    edges = []
    for tok in re.split(r"[,\s]+", text.strip()):
        if not tok:
            continue
        m = _EDGE_RE.match(tok)
        if m is None:
            raise ValueError(f"Bad edge {tok!r}; expected 'u-v'.")
        edges.append((int(m.group(1)), int(m.group(2))))
    return edges


def _build_demo(n: int, edges: list[tuple[int, int]]) -> Tree:
    tree = create_tree(n)
    for u, v in edges:
        add_undirected_edge(tree, u, v)
    return tree


def _report(tree: Tree, *, validate: bool, centers: bool) -> None:
    if validate:
        require_tree(tree)
    name = tree_name(tree)
    if centers:
        print(f"{name} centers: {' '.join(str(c) for c in tree_centers(tree))}")
    print(f"{name}: {canonize_tree(tree)}")


def _run_demo(*, validate: bool, centers: bool) -> None:
    _report(_build_demo(19, DEMO_EDGES), validate=validate, centers=centers)

    a = _build_demo(5, REGRESSION_PAIR[0])
    b = _build_demo(5, REGRESSION_PAIR[1])
    enc_a, enc_b = canonize_tree(a), canonize_tree(b)
    print(f"regression A: {enc_a}")
    print(f"regression B: {enc_b}")
    if enc_a != enc_b:
        print("ERROR: regression trees differ")


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="AHU canonical form of unrooted trees.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--edges", default=None, help="Edge list, e.g. '0-1,1-2,1-3'.")
    src.add_argument("--g6", default=None, help="Tree in graph6 or sparse6 (leading ':') format.")
    ap.add_argument("--n", type=int, default=None, help="Node count for --edges (default: max vertex + 1); not allowed with --g6.")
    ap.add_argument(
        "--validate",
        action=argparse.BooleanOptionalAction,
        default=validate_default(),
        help="Reject non-trees before canonicalizing (default from TREECANON_VALIDATE).",
    )
    ap.add_argument("--centers", action="store_true", help="Also print the center node(s).")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    args = ap.parse_args(argv)
    if args.n is not None and args.edges is None:
        ap.error("--n only applies to --edges")
    return args


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.edges is not None:
            tree = tree_from_edges(parse_edges(args.edges), args.n)
            _report(tree, validate=args.validate, centers=args.centers)
        elif args.g6 is not None:
            _report(string_to_tree(args.g6), validate=args.validate, centers=args.centers)
        else:
            _run_demo(validate=args.validate, centers=args.centers)
    except (ValueError, IndexError) as exc:
        logger.debug("input rejected", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0
