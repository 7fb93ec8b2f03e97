"""Tests for the nauty wrappers; binary-backed tests skip when nauty is missing."""
import io
import subprocess

import pytest

from treecanon.tree import tree_from_edges
from treecanon.canon.ahu import canonize_tree
from treecanon.external import nauty
from treecanon.external.nauty import (
    nauty_available,
    gentreeg_available,
    shortg_form,
    shortg_classes,
    agrees_with_shortg,
    gentreeg_s6,
    gentreeg_trees,
)
from treecanon.utils.connectivity import is_tree

# gentreeg output for n=5: the three trees on five vertices
TREES5_S6 = [":DaXb", ":DaWn", ":DaGb"]


class _FakePopen:
    """Stands in for subprocess.Popen, replaying canned gentreeg output."""

    calls = []

    def __init__(self, cmd, stdout=None, stderr=None, text=False):
        type(self).calls.append(list(cmd))
        self.stdout = io.StringIO(">A gentreeg\n" + "\n".join(TREES5_S6) + "\n")
        self.stderr = io.StringIO(">Z 3 trees generated\n")
        self.returncode = None

    def wait(self):
        self.returncode = 0
        return 0


@pytest.fixture
def fake_gentreeg(monkeypatch):
    _FakePopen.calls = []
    monkeypatch.setattr(nauty, "gentreeg_available", lambda: True)
    monkeypatch.setattr(subprocess, "Popen", _FakePopen)
    return _FakePopen


# --- gentreeg (canned output) ---

def test_gentreeg_argv(fake_gentreeg):
    list(gentreeg_s6(5))
    list(gentreeg_s6(5, max_degree=3))
    assert fake_gentreeg.calls == [
        [nauty.NAUTY_GENTREEG, "-q", "5"],
        [nauty.NAUTY_GENTREEG, "-q", "-D3", "5"],
    ]
    assert all("-g" not in cmd for cmd in fake_gentreeg.calls)


def test_gentreeg_s6_skips_status_lines(fake_gentreeg):
    assert list(gentreeg_s6(5)) == TREES5_S6


def test_gentreeg_trees_parse_sparse6(fake_gentreeg):
    trees = list(gentreeg_trees(5))
    assert len(trees) == 3
    assert all(t.n == 5 and is_tree(t) for t in trees)
    assert len({canonize_tree(t) for t in trees}) == 3


def test_gentreeg_nonzero_exit(monkeypatch):
    class _Failing(_FakePopen):
        def wait(self):
            self.returncode = 1
            return 1

    monkeypatch.setattr(nauty, "gentreeg_available", lambda: True)
    monkeypatch.setattr(subprocess, "Popen", _Failing)
    with pytest.raises(RuntimeError, match="return code 1"):
        list(gentreeg_s6(5))


def test_gentreeg_missing_binary(monkeypatch):
    monkeypatch.setattr(nauty, "gentreeg_available", lambda: False)
    with pytest.raises(RuntimeError):
        list(gentreeg_s6(5))


# --- shortg (requires nauty) ---

@pytest.mark.skipif(not nauty_available(), reason="nauty not available")
def test_shortg_form_chair_trees():
    t1 = tree_from_edges([(2, 0), (2, 1), (2, 3), (3, 4)])
    t2 = tree_from_edges([(1, 3), (1, 0), (1, 2), (2, 4)])
    assert shortg_form(t1) == shortg_form(t2)


@pytest.mark.skipif(not nauty_available(), reason="nauty not available")
def test_shortg_classes_agree_with_ahu():
    trees = [
        tree_from_edges([(0, 1), (1, 2), (2, 3)]),
        tree_from_edges([(0, 1), (0, 2), (0, 3)]),
        tree_from_edges([(3, 0), (0, 2), (2, 1)]),
    ]
    assert list(shortg_classes(trees).values()) == [[0, 2], [1]]
    assert agrees_with_shortg(trees) is True


# --- gentreeg (requires gentreeg) ---

@pytest.mark.skipif(not gentreeg_available(), reason="gentreeg not available")
def test_gentreeg_forms_distinct():
    # 23 unlabeled trees on 8 vertices
    forms = {canonize_tree(t) for t in gentreeg_trees(8)}
    assert len(forms) == 23


@pytest.mark.skipif(not gentreeg_available(), reason="gentreeg not available")
def test_gentreeg_max_degree():
    # only the path has max degree 2
    trees = list(gentreeg_trees(7, max_degree=2))
    assert len(trees) == 1
    assert canonize_tree(trees[0]) == "(((()))((())))"


@pytest.mark.skipif(
    not (nauty_available() and gentreeg_available()),
    reason="nauty not available",
)
def test_gentreeg_and_shortg_partitions_match():
    assert agrees_with_shortg(list(gentreeg_trees(7)))
