"""
HydraEngine - runs the cut-and-regrow game on a hydra tree.

Cutting a leaf removes it. If the leaf's parent P is not the root, N copies of
P's remaining subtree are attached to P's parent, where N comes from the
growth policy. P itself stays in place.

Regrowth is not bounded: node counts can explode within a handful of moves and
cloning recurses as deep as the copied subtree. RecursionError and MemoryError
are left to propagate. An optional `max_nodes` cap turns an oversized cut into
a GrowthLimitExceeded before anything is mutated.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .config import EngineConfig
from .errors import GrowthLimitExceeded, InvalidTarget
from .generators import build_preset
from .layout import LayoutResult, TreeLayout, make_layout
from .node import (
    HydraNode, assign_depths, attach, clone_subtree, detach, find_root,
    is_leaf, leaves, subtree_size,
)
from .policy import GrowthPolicy, make_policy
from .profiling import profile


@dataclass
class CutResult:
    applied: bool
    growth_factor: int = 0
    nodes_added: int = 0
    nodes_removed: int = 0
    reason: str = ""

    def __bool__(self) -> bool:
        return self.applied


@dataclass
class MoveRecord:
    move: int
    depth: int            # depth of the leaf that was cut
    growth_factor: int
    nodes_added: int
    node_count: int       # after the move


@dataclass
class NodeView:
    node: HydraNode
    label: int
    parent_label: Optional[int]
    depth: int
    x: float
    y: float
    is_leaf: bool
    is_root: bool
    child_count: int


@dataclass
class HydraSnapshot:
    root: HydraNode
    nodes: List[NodeView]
    positions: np.ndarray
    move_count: int
    node_count: int
    slain: bool
    policy: str
    bounds: Tuple[float, float, float, float] = field(default=(0.0, 0.0, 0.0, 0.0))

    @property
    def leaves(self) -> List[NodeView]:
        return [v for v in self.nodes if v.is_leaf]


def policy_from_config(config: EngineConfig) -> GrowthPolicy:
    if config.policy == 'turn':
        return make_policy('turn', reduced=config.reduced_growth)
    return make_policy(config.policy)


class HydraEngine:
    def __init__(self, config: EngineConfig = None, policy: GrowthPolicy = None,
                 layout: TreeLayout = None):
        self.config = config or EngineConfig()
        self.policy = policy or policy_from_config(self.config)
        self.layout = layout or make_layout(self.config.layout, self.config.layout_settings())

        self.root: Optional[HydraNode] = None
        self.move_count = 0
        self.node_count = 0
        self.history: List[MoveRecord] = []
        self.last_layout: Optional[LayoutResult] = None
        self._preset: Optional[Tuple[str, Optional[int]]] = None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------
    def load(self, root: HydraNode, preset: Optional[Tuple[str, Optional[int]]] = None) -> HydraSnapshot:
        """Adopt a new tree. Policy state, move counter and history start over."""
        if root.parent is not None:
            raise ValueError("a hydra root cannot have a parent")
        self.root = root
        self.policy.reset()
        self.move_count = 0
        self.history = []
        self._preset = preset
        self._refresh()
        return self.snapshot()

    def load_preset(self, name: str, seed: Optional[int] = None) -> HydraSnapshot:
        return self.load(build_preset(name, seed), preset=(name, seed))

    def reset(self) -> bool:
        """Rebuild the last preset. Returns False if the tree did not come from a preset."""
        if self._preset is None:
            return False
        name, seed = self._preset
        self.load_preset(name, seed)
        return True

    def toggle_reduced_growth(self) -> bool:
        return self.policy.toggle_reduced()

    # ------------------------------------------------------------------
    # Cutting
    # ------------------------------------------------------------------
    def _validate_target(self, node: HydraNode):
        if node is self.root:
            raise InvalidTarget("the root cannot be cut")
        # Detached nodes (already cut) have no parent left
        if node.parent is None or find_root(node) is not self.root:
            raise InvalidTarget("node is not part of the current hydra")
        if node.children:
            raise InvalidTarget("only leaves can be cut")

    def _check_growth_limit(self, parent: HydraNode):
        remaining = subtree_size(parent) - 1
        projected = self.node_count - 1 + self.policy.preview(parent.depth) * remaining
        if projected > self.config.max_nodes:
            raise GrowthLimitExceeded(projected, self.config.max_nodes)

    @profile
    def cut(self, leaf: HydraNode) -> CutResult:
        """
        Cut `leaf` and apply regrowth.

        Invalid targets are rejected without touching the tree; the returned
        CutResult is falsy in that case.
        """
        if self.root is None:
            raise RuntimeError("no hydra loaded")
        try:
            self._validate_target(leaf)
        except InvalidTarget as e:
            return CutResult(applied=False, reason=str(e))

        parent = leaf.parent
        grandparent = parent.parent
        leaf_depth = leaf.depth

        if grandparent is not None and self.config.max_nodes is not None:
            self._check_growth_limit(parent)

        detach(leaf)
        self.policy.register_cut()

        factor = 0
        added = 0
        if grandparent is not None:
            factor = self.policy.growth_factor(parent)
            copy_size = subtree_size(parent)
            for _ in range(factor):
                attach(grandparent, clone_subtree(parent))
            added = factor * copy_size

        self.move_count += 1
        self._refresh()
        self.history.append(MoveRecord(
            move=self.move_count,
            depth=leaf_depth,
            growth_factor=factor,
            nodes_added=added,
            node_count=self.node_count,
        ))
        return CutResult(applied=True, growth_factor=factor, nodes_added=added, nodes_removed=1)

    def _refresh(self):
        assign_depths(self.root)
        self.last_layout = self.layout.compute(self.root)
        self.node_count = len(self.last_layout.nodes)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def slain(self) -> bool:
        return self.root is not None and not self.root.children

    def leaves(self) -> List[HydraNode]:
        return leaves(self.root) if self.root is not None else []

    def node_by_label(self, label: int) -> Optional[HydraNode]:
        """Look up a node by the rank shown in the latest layout pass."""
        if self.last_layout is None or not 0 <= label < len(self.last_layout.nodes):
            return None
        return self.last_layout.nodes[label]

    def snapshot(self) -> HydraSnapshot:
        if self.root is None:
            raise RuntimeError("no hydra loaded")
        layout = self.last_layout
        views = [
            NodeView(
                node=n,
                label=n.label,
                parent_label=n.parent.label if n.parent is not None else None,
                depth=n.depth,
                x=n.x,
                y=n.y,
                is_leaf=is_leaf(n),
                is_root=n is self.root,
                child_count=len(n.children),
            )
            for n in layout.nodes
        ]
        return HydraSnapshot(
            root=self.root,
            nodes=views,
            positions=layout.positions.copy(),
            move_count=self.move_count,
            node_count=self.node_count,
            slain=self.slain,
            policy=self.policy.describe(),
            bounds=layout.bounds,
        )
