"""
Tests for the tidy-tree layout strategies.
"""
from collections import defaultdict

import numpy as np
import pytest

from hydra_engine import (
    HydraEngine, EngineConfig, LayoutSettings, SizeProportionalLayout,
    WidthAccumulationLayout, balanced_hydra, chain_hydra, make_layout, random_hydra,
)
from hydra_engine.node import HydraNode, build, iter_preorder

EPS = 1e-9

LAYOUT_CLASSES = [WidthAccumulationLayout, SizeProportionalLayout]


def assert_siblings_disjoint(root, result):
    for node in iter_preorder(root):
        spans = [result.span_of(c) for c in node.children]
        for (_, right), (left, _) in zip(spans, spans[1:]):
            assert left >= right - EPS


def assert_children_inside_parent(root, result):
    for node in iter_preorder(root):
        p_left, p_right = result.span_of(node)
        for child in node.children:
            c_left, c_right = result.span_of(child)
            assert c_left >= p_left - EPS
            assert c_right <= p_right + EPS


@pytest.mark.parametrize('layout_cls', LAYOUT_CLASSES)
class TestLayoutInvariants:

    @pytest.mark.parametrize('seed', [0, 1, 2, 3])
    def test_random_trees(self, layout_cls, seed):
        root = random_hydra(5, 3, 0.3, rng=seed)
        result = layout_cls().compute(root)
        assert_siblings_disjoint(root, result)
        assert_children_inside_parent(root, result)

    def test_equal_depth_shares_y(self, layout_cls):
        root = random_hydra(5, 3, 0.2, rng=11)
        layout_cls(LayoutSettings(level_gap=50.0, origin_y=10.0)).compute(root)
        ys = defaultdict(set)
        for node in iter_preorder(root):
            ys[node.depth].add(node.y)
        for depth, values in ys.items():
            assert values == {10.0 + 50.0 * depth}

    def test_deterministic(self, layout_cls):
        root = random_hydra(4, 3, 0.3, rng=5)
        first = layout_cls().compute(root).positions
        second = layout_cls().compute(root).positions
        np.testing.assert_array_equal(first, second)

    def test_labels_are_preorder_ranks(self, layout_cls):
        root = balanced_hydra(2, 3)
        result = layout_cls().compute(root)
        assert [n.label for n in result.nodes] == list(range(13))
        assert result.nodes[0] is root
        assert result.positions.shape == (13, 2)

    def test_upward_direction(self, layout_cls):
        root = chain_hydra(2)
        layout_cls(LayoutSettings(direction='up', origin_y=500.0, level_gap=80.0)).compute(root)
        assert [n.y for n in iter_preorder(root)] == [500.0, 420.0, 340.0]

    def test_single_node(self, layout_cls):
        result = layout_cls().compute(HydraNode())
        assert result.positions.shape == (1, 2)
        assert result.bounds[0] == result.bounds[2]


class TestWidthAccumulation:

    def test_leaf_widths_and_sums(self):
        a = build(HydraNode(), HydraNode(), HydraNode())
        b = HydraNode()
        root = build(a, b)
        WidthAccumulationLayout(LayoutSettings(min_width=40.0)).compute(root)
        assert b.subtree_width == 40.0
        assert a.subtree_width == 120.0
        assert root.subtree_width == 160.0

    def test_single_child_never_below_minimum(self):
        root = chain_hydra(3)
        WidthAccumulationLayout(LayoutSettings(min_width=40.0)).compute(root)
        assert all(n.subtree_width == 40.0 for n in iter_preorder(root))

    def test_chain_is_vertical(self):
        root = chain_hydra(4)
        WidthAccumulationLayout(LayoutSettings(canvas_width=800.0)).compute(root)
        assert {n.x for n in iter_preorder(root)} == {400.0}

    def test_children_centred_under_parent(self):
        left, right = HydraNode(), HydraNode()
        root = build(left, right)
        WidthAccumulationLayout(LayoutSettings(min_width=40.0, canvas_width=1000.0)).compute(root)
        assert root.x == 500.0
        assert left.x == 480.0
        assert right.x == 520.0


class TestSizeProportional:

    def test_split_by_leaf_count(self):
        small = HydraNode()
        big = build(HydraNode(), HydraNode())
        root = build(small, big)
        result = SizeProportionalLayout(LayoutSettings(canvas_width=1000.0, margin=60.0)).compute(root)

        assert root.size == 3
        assert big.size == 2
        s_left, s_right = result.span_of(small)
        b_left, b_right = result.span_of(big)
        assert s_left == pytest.approx(60.0)
        assert s_right == pytest.approx(60.0 + 880.0 / 3)
        assert b_left == pytest.approx(s_right)
        assert b_right == pytest.approx(940.0)
        assert root.x == pytest.approx(500.0)


class TestMakeLayout:

    def test_names(self):
        assert isinstance(make_layout('width'), WidthAccumulationLayout)
        assert isinstance(make_layout('size'), SizeProportionalLayout)

    def test_unknown(self):
        with pytest.raises(ValueError):
            make_layout('radial')

    def test_bad_direction(self):
        with pytest.raises(ValueError):
            LayoutSettings(direction='sideways')


def test_layout_follows_every_cut():
    engine = HydraEngine(EngineConfig(layout='size'))
    engine.load(balanced_hydra(3, 2))
    for _ in range(5):
        engine.cut(engine.leaves()[0])
        result = engine.last_layout
        assert len(result.nodes) == engine.node_count
        assert_siblings_disjoint(engine.root, result)
        positions = np.array([[n.x, n.y] for n in result.nodes])
        np.testing.assert_array_equal(positions, result.positions)
