"""
Tests for leaf picking and autoplay strategies.
"""
import numpy as np
import pytest

from hydra_engine import (
    EngineConfig, HydraEngine, LeafSpatialIndex, WidthAccumulationLayout, autoplay, balanced_hydra,
    chain_hydra, choose_leaf,
)
from hydra_engine.node import HydraNode, build, leaves


class TestLeafSpatialIndex:

    def test_finds_leaf_under_point(self):
        root = balanced_hydra(2, 2)
        result = WidthAccumulationLayout().compute(root)
        index = LeafSpatialIndex(result)

        for leaf in leaves(root):
            assert index.find_leaf(leaf.x + 3, leaf.y - 2, radius=10) is leaf

    def test_ignores_internal_nodes(self):
        root = balanced_hydra(2, 2)
        result = WidthAccumulationLayout().compute(root)
        index = LeafSpatialIndex(result)
        assert len(index.leaves) == 4
        assert index.find_leaf(root.x, root.y, radius=10) is None

    def test_miss(self):
        root = chain_hydra(1)
        index = LeafSpatialIndex(WidthAccumulationLayout().compute(root))
        assert index.find_leaf(1e6, 1e6, radius=20) is None

    def test_slain_hydra_has_no_targets(self):
        index = LeafSpatialIndex(WidthAccumulationLayout().compute(HydraNode()))
        leaf, dist = index.find_nearest(0, 0)
        assert leaf is None
        assert dist == float('inf')

    def test_click_to_cut(self):
        engine = HydraEngine()
        engine.load(balanced_hydra(2, 2))
        index = LeafSpatialIndex(engine.last_layout)
        target = engine.leaves()[1]
        leaf = index.find_leaf(target.x, target.y, radius=5)
        assert engine.cut(leaf)
        assert target.parent is None


class TestChooseLeaf:

    def setup_method(self):
        self.a, self.b, self.c = HydraNode(), HydraNode(), HydraNode()
        self.mid = build(self.b)
        self.root = build(self.a, self.mid, self.c)
        self.mid.children[0].depth = 2
        self.a.depth = self.c.depth = 1

    def test_leftmost_and_rightmost(self):
        assert choose_leaf('leftmost', self.root) is self.a
        assert choose_leaf('rightmost', self.root) is self.c

    def test_shallowest(self):
        assert choose_leaf('shallowest', self.root).depth == 1

    def test_random_is_a_leaf(self):
        rng = np.random.default_rng(0)
        for _ in range(10):
            assert choose_leaf('random', self.root, rng) in (self.a, self.b, self.c)

    def test_slain(self):
        assert choose_leaf('leftmost', HydraNode()) is None

    def test_unknown(self):
        with pytest.raises(ValueError):
            choose_leaf('heracles', self.root)


class TestAutoplay:

    def test_respects_move_budget(self):
        engine = HydraEngine()
        engine.load(balanced_hydra(3, 2))
        assert autoplay(engine, strategy='leftmost', max_moves=5) == 5
        assert engine.move_count == 5

    def test_callback_sees_every_cut(self):
        engine = HydraEngine()
        engine.load(chain_hydra(2))
        seen = []
        moves = autoplay(engine, max_moves=50, callback=lambda eng, result: seen.append(result.applied))
        assert engine.slain
        assert seen == [True] * moves

    def test_random_strategy_is_seeded(self):
        counts = []
        for _ in range(2):
            engine = HydraEngine()
            engine.load(balanced_hydra(2, 2))
            autoplay(engine, strategy='random', max_moves=8, seed=123)
            counts.append(engine.node_count)
        assert counts[0] == counts[1]

    def test_growth_cap_ends_the_game(self, capsys):
        engine = HydraEngine(EngineConfig(max_nodes=50))
        engine.load_preset('simple')
        moves = autoplay(engine, strategy='rightmost', max_moves=500)

        assert engine.node_count <= 50
        assert not engine.slain
        assert moves == engine.move_count
        assert moves < 500
        assert 'limit 50' in capsys.readouterr().out
