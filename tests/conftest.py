import matplotlib
matplotlib.use('Agg')

import pytest

from hydra_engine import HydraEngine, EngineConfig
from hydra_engine.node import HydraNode, iter_preorder


def check_invariants(root: HydraNode):
    """Every non-root node appears exactly once in its parent's children."""
    assert root.parent is None
    seen = set()
    for node in iter_preorder(root):
        assert id(node) not in seen, "node reachable twice"
        seen.add(id(node))
        for child in node.children:
            assert child.parent is node
            assert sum(1 for c in node.children if c is child) == 1
    return len(seen)


@pytest.fixture
def turn_engine():
    return HydraEngine(EngineConfig(policy='turn'))


@pytest.fixture
def depth_engine():
    return HydraEngine(EngineConfig(policy='depth'))


@pytest.fixture
def invariants():
    return check_invariants
