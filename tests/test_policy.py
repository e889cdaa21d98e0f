"""
Tests for the growth policies.
"""
import pytest

from hydra_engine.node import HydraNode
from hydra_engine.policy import DepthIndexedPolicy, TurnIndexedPolicy, make_policy


def node_at_depth(depth: int) -> HydraNode:
    node = HydraNode()
    node.depth = depth
    return node


class TestTurnIndexedPolicy:

    def test_factor_equals_turn(self):
        policy = TurnIndexedPolicy()
        factors = []
        for _ in range(5):
            policy.register_cut()
            factors.append(policy.growth_factor(node_at_depth(1)))
        assert factors == [1, 2, 3, 4, 5]

    def test_turn_advances_without_regrowth(self):
        policy = TurnIndexedPolicy()
        policy.register_cut()
        policy.register_cut()
        policy.register_cut()
        assert policy.growth_factor(node_at_depth(2)) == 3

    def test_reduced_mode_is_always_one(self):
        policy = TurnIndexedPolicy(reduced=True)
        for _ in range(10):
            policy.register_cut()
            assert policy.growth_factor(node_at_depth(1)) == 1

    def test_toggle_reduced(self):
        policy = TurnIndexedPolicy()
        assert policy.toggle_reduced() is True
        assert policy.preview() == 1
        assert policy.toggle_reduced() is False
        assert policy.preview() == 1  # turn 0 -> next cut is turn 1

    def test_preview_does_not_consume(self):
        policy = TurnIndexedPolicy()
        policy.register_cut()
        assert policy.preview() == 2
        assert policy.preview() == 2
        policy.register_cut()
        assert policy.growth_factor(node_at_depth(1)) == 2

    def test_reset(self):
        policy = TurnIndexedPolicy()
        for _ in range(4):
            policy.register_cut()
        policy.reset()
        policy.register_cut()
        assert policy.growth_factor(node_at_depth(1)) == 1

    def test_describe(self):
        policy = TurnIndexedPolicy(reduced=True)
        assert "reduced" in policy.describe()


class TestDepthIndexedPolicy:

    def test_counts_up_per_depth(self):
        policy = DepthIndexedPolicy()
        assert policy.growth_factor(node_at_depth(2)) == 1
        assert policy.growth_factor(node_at_depth(2)) == 2
        assert policy.growth_factor(node_at_depth(2)) == 3

    def test_depths_are_independent(self):
        policy = DepthIndexedPolicy()
        policy.growth_factor(node_at_depth(3))
        policy.growth_factor(node_at_depth(3))
        assert policy.growth_factor(node_at_depth(2)) == 1
        assert policy.growth_factor(node_at_depth(3)) == 3

    def test_register_cut_has_no_effect(self):
        policy = DepthIndexedPolicy()
        for _ in range(5):
            policy.register_cut()
        assert policy.growth_factor(node_at_depth(1)) == 1

    def test_preview_and_reset(self):
        policy = DepthIndexedPolicy()
        policy.growth_factor(node_at_depth(1))
        assert policy.preview(1) == 2
        assert policy.preview(4) == 1
        policy.reset()
        assert policy.preview(1) == 1
        assert policy.describe() == "C(d) = 0 for all d"

    def test_toggle_reduced_is_noop(self):
        policy = DepthIndexedPolicy()
        assert policy.toggle_reduced() is False


class TestMakePolicy:

    def test_known_names(self):
        assert isinstance(make_policy('turn'), TurnIndexedPolicy)
        assert isinstance(make_policy('depth'), DepthIndexedPolicy)
        assert make_policy('turn', reduced=True).reduced

    def test_unknown_name(self):
        with pytest.raises(ValueError):
            make_policy('fibonacci')
