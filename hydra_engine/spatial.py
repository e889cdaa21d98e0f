"""
Nearest-leaf lookup for turning a pointer position into a cut target.
Uses scipy's KDTree over the leaf positions of the latest layout.
"""

import numpy as np
from scipy.spatial import cKDTree
from typing import List, Optional, Tuple

from .layout import LayoutResult
from .node import HydraNode, is_leaf


class LeafSpatialIndex:
    """KD-Tree based spatial index for hydra leaves."""

    def __init__(self, layout: Optional[LayoutResult] = None):
        self._leaves: List[HydraNode] = []
        self._tree: Optional[cKDTree] = None
        if layout is not None:
            self.rebuild(layout)

    def rebuild(self, layout: LayoutResult):
        mask = np.array([is_leaf(n) for n in layout.nodes], dtype=bool)
        self._leaves = [n for n, leaf in zip(layout.nodes, mask) if leaf]

        if not self._leaves:
            self._tree = None
            return

        self._tree = cKDTree(layout.positions[mask])

    def find_nearest(self, x: float, y: float) -> Tuple[Optional[HydraNode], float]:
        if self._tree is None:
            return None, float('inf')
        dist, idx = self._tree.query([x, y])
        return self._leaves[idx], float(dist)

    def find_leaf(self, x: float, y: float, radius: float) -> Optional[HydraNode]:
        """Nearest leaf within `radius` of (x, y), or None."""
        leaf, dist = self.find_nearest(x, y)
        if leaf is None or dist > radius:
            return None
        return leaf

    @property
    def leaves(self) -> List[HydraNode]:
        return self._leaves
