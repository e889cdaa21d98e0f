"""
Hydra engine - the cut-and-regrow game on rooted trees.

Cutting a leaf of the hydra may make whole subtrees regrow next to the leaf's
parent, Kirby-Paris style. The engine keeps the tree, applies a growth policy
and lays the tree out for drawing after every move.
"""

from .node import HydraNode, is_leaf, is_root, assign_depths, clone_subtree
from .errors import HydraError, InvalidTarget, ResourceExhaustion, GrowthLimitExceeded
from .policy import GrowthPolicy, TurnIndexedPolicy, DepthIndexedPolicy, make_policy
from .layout import LayoutSettings, LayoutResult, WidthAccumulationLayout, SizeProportionalLayout, make_layout
from .generators import chain_hydra, balanced_hydra, random_hydra, random_trunk_hydra, build_preset, PRESETS
from .config import EngineConfig
from .engine import HydraEngine, CutResult, HydraSnapshot, MoveRecord, NodeView
from .spatial import LeafSpatialIndex
from .strategies import autoplay, choose_leaf

__all__ = [
    'HydraNode',
    'is_leaf',
    'is_root',
    'assign_depths',
    'clone_subtree',
    'HydraError',
    'InvalidTarget',
    'ResourceExhaustion',
    'GrowthLimitExceeded',
    'GrowthPolicy',
    'TurnIndexedPolicy',
    'DepthIndexedPolicy',
    'make_policy',
    'LayoutSettings',
    'LayoutResult',
    'WidthAccumulationLayout',
    'SizeProportionalLayout',
    'make_layout',
    'chain_hydra',
    'balanced_hydra',
    'random_hydra',
    'random_trunk_hydra',
    'build_preset',
    'PRESETS',
    'EngineConfig',
    'HydraEngine',
    'CutResult',
    'HydraSnapshot',
    'MoveRecord',
    'NodeView',
    'LeafSpatialIndex',
    'autoplay',
    'choose_leaf',
]
