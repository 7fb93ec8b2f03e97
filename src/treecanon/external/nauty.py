from __future__ import annotations

import os
import shutil
import subprocess
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from treecanon.tree import Tree
from treecanon.io.graph6 import tree_to_g6, s6_to_tree
from treecanon.utils.classify import group_isomorphic


NAUTY_SHORTG = os.environ.get("NAUTY_SHORTG", "shortg")
NAUTY_GENTREEG = os.environ.get("NAUTY_GENTREEG", "gentreeg")


def nauty_available() -> bool:
    """Returns True iff shortg appears runnable."""
    return shutil.which(NAUTY_SHORTG) is not None


def gentreeg_available() -> bool:
    """Returns True iff gentreeg appears runnable."""
    return shutil.which(NAUTY_GENTREEG) is not None


def _payload_lines(text: str) -> List[str]:
    # nauty writes '>A'/'>Z' status lines alongside the graphs
    return [ln.strip() for ln in text.splitlines() if ln.strip() and not ln.startswith(">")]


# ---------------------------------------------------------------------------
# shortg cross-check
# ---------------------------------------------------------------------------

def shortg_form(tree: Tree) -> str:
    """nauty's canonical graph6 string for a tree, via shortg."""
    if not nauty_available():
        raise RuntimeError(
            "nauty not available (need 'shortg' in PATH, or set NAUTY_SHORTG)."
        )
    g6 = tree_to_g6(tree)
    p = subprocess.run(
        [NAUTY_SHORTG, "-q"],
        input=g6 + "\n",
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        check=True,
    )
    lines = _payload_lines(p.stdout)
    if not lines:
        raise RuntimeError(f"shortg gave no output for {g6!r}; stderr={p.stderr!r}")
    return lines[-1]


def shortg_classes(trees: Iterable[Tree]) -> Dict[str, List[int]]:
    """Isomorphism classes by shortg form: form -> tree indices, first-seen order."""
    classes: Dict[str, List[int]] = {}
    for i, tree in enumerate(trees):
        classes.setdefault(shortg_form(tree), []).append(i)
    return classes


def agrees_with_shortg(trees: Sequence[Tree]) -> bool:
    """
    True iff AHU canonical forms and nauty's shortg induce the same
    partition of *trees* into isomorphism classes.
    """
    ahu = sorted(group_isomorphic(trees).values())
    nauty = sorted(shortg_classes(trees).values())
    return ahu == nauty


# ---------------------------------------------------------------------------
# Tree generation (gentreeg)
# ---------------------------------------------------------------------------

def gentreeg_s6(n: int, *, max_degree: Optional[int] = None) -> Iterator[str]:
    """Stream sparse6 strings for all non-isomorphic trees on n vertices.

    gentreeg only writes sparse6; use io.graph6.s6_to_tree to parse the
    lines, or gentreeg_trees to get Tree objects directly.

    Parameters
    ----------
    n : int
        Number of vertices.
    max_degree : int, optional
        Maximum vertex degree (-D).
    """
    if not gentreeg_available():
        raise RuntimeError(
            "gentreeg not available (need 'gentreeg' in PATH, or set NAUTY_GENTREEG)."
        )

    cmd = [NAUTY_GENTREEG, "-q"]
    if max_degree is not None:
        cmd.append(f"-D{max_degree}")
    cmd.append(str(n))

    p = subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
    assert p.stdout is not None

    for line in p.stdout:
        s = line.strip()
        if not s or s.startswith(">"):
            continue
        yield s

    err = p.stderr.read() if p.stderr is not None else ""
    p.wait()
    if p.returncode != 0:
        raise RuntimeError(
            f"gentreeg failed for n={n} with return code {p.returncode}: {err.strip()}"
        )


def gentreeg_trees(n: int, *, max_degree: Optional[int] = None) -> Iterator[Tree]:
    """All non-isomorphic trees on n vertices as Tree objects."""
    for s6 in gentreeg_s6(n, max_degree=max_degree):
        yield s6_to_tree(s6)
