"""
Tidy-tree layout for the hydra.

Every pass runs from scratch over the whole tree: a bottom-up measure followed
by a top-down placement. Siblings get disjoint horizontal spans in child order,
and the vertical coordinate depends on depth only.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, List, Tuple

import numpy as np

from .node import HydraNode, assign_depths, iter_preorder, relabel
from .profiling import profile


@dataclass
class LayoutSettings:
    min_width: float = 40.0
    level_gap: float = 80.0
    canvas_width: float = 1000.0
    margin: float = 60.0
    origin_x: float = None
    origin_y: float = 40.0
    direction: str = 'down'  # 'down' or 'up'

    def __post_init__(self):
        if self.direction not in ('down', 'up'):
            raise ValueError(f"direction must be 'down' or 'up', got '{self.direction}'")
        if self.min_width <= 0:
            raise ValueError("min_width must be positive")
        if self.origin_x is None:
            self.origin_x = self.canvas_width / 2

    def y_for_depth(self, depth: int) -> float:
        step = self.level_gap if self.direction == 'down' else -self.level_gap
        return self.origin_y + depth * step


@dataclass
class LayoutResult:
    nodes: List[HydraNode]
    positions: np.ndarray                      # (n, 2), same order as nodes
    spans: Dict[int, Tuple[float, float]]      # label -> (left, right)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        if len(self.positions) == 0:
            return (0.0, 0.0, 0.0, 0.0)
        xmin, ymin = self.positions.min(axis=0)
        xmax, ymax = self.positions.max(axis=0)
        return (float(xmin), float(ymin), float(xmax), float(ymax))

    def span_of(self, node: HydraNode) -> Tuple[float, float]:
        return self.spans[node.label]


class TreeLayout(ABC):
    name = 'base'

    def __init__(self, settings: LayoutSettings = None):
        self.settings = settings or LayoutSettings()

    @abstractmethod
    def _measure(self, node: HydraNode) -> float:
        """Bottom-up pass. Returns the node's measure and caches it on the node."""

    @abstractmethod
    def _place(self, root: HydraNode, spans: Dict[int, Tuple[float, float]]):
        """Top-down pass writing x, y and spans."""

    @profile
    def compute(self, root: HydraNode) -> LayoutResult:
        assign_depths(root)
        relabel(root)
        self._measure(root)
        spans: Dict[int, Tuple[float, float]] = {}
        self._place(root, spans)

        nodes = list(iter_preorder(root))
        positions = np.array([[n.x, n.y] for n in nodes], dtype=float).reshape(-1, 2)
        return LayoutResult(nodes=nodes, positions=positions, spans=spans)


class WidthAccumulationLayout(TreeLayout):
    """Leaves reserve `min_width`; internal nodes reserve the sum of their children."""

    name = 'width'

    def _measure(self, node: HydraNode) -> float:
        total = 0.0
        for child in node.children:
            total += self._measure(child)
        if node.children:
            node.subtree_width = max(self.settings.min_width, total)
        else:
            node.subtree_width = self.settings.min_width
        return node.subtree_width

    def _place(self, root: HydraNode, spans: Dict[int, Tuple[float, float]]):
        self._place_node(root, self.settings.origin_x, spans)

    def _place_node(self, node: HydraNode, x: float, spans: Dict[int, Tuple[float, float]]):
        node.x = x
        node.y = self.settings.y_for_depth(node.depth)
        half = node.subtree_width / 2
        spans[node.label] = (x - half, x + half)

        children_width = sum(c.subtree_width for c in node.children)
        current = x - children_width / 2
        for child in node.children:
            self._place_node(child, current + child.subtree_width / 2, spans)
            current += child.subtree_width


class SizeProportionalLayout(TreeLayout):
    """The canvas span is split among children in proportion to their leaf counts."""

    name = 'size'

    def _measure(self, node: HydraNode) -> float:
        if not node.children:
            node.size = 1
        else:
            node.size = sum(self._measure(c) for c in node.children)
        return node.size

    def _place(self, root: HydraNode, spans: Dict[int, Tuple[float, float]]):
        s = self.settings
        left = s.margin
        right = max(s.canvas_width - s.margin, left + s.min_width)
        self._place_node(root, left, right, spans)

    def _place_node(self, node: HydraNode, left: float, right: float,
                    spans: Dict[int, Tuple[float, float]]):
        node.x = (left + right) / 2
        node.y = self.settings.y_for_depth(node.depth)
        node.subtree_width = right - left
        spans[node.label] = (left, right)
        if not node.children:
            return

        total = sum(c.size for c in node.children)
        width = right - left
        current = left
        for i, child in enumerate(node.children):
            # Last child takes the exact remainder so float drift never overlaps
            child_right = right if i == len(node.children) - 1 else current + width * child.size / total
            self._place_node(child, current, child_right, spans)
            current = child_right


LAYOUTS = {
    'width': WidthAccumulationLayout,
    'size': SizeProportionalLayout,
}


def make_layout(name: str, settings: LayoutSettings = None) -> TreeLayout:
    if name not in LAYOUTS:
        raise ValueError(f"Unknown layout '{name}'. Valid: {list(LAYOUTS.keys())}")
    return LAYOUTS[name](settings)
