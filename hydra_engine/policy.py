"""
Growth policies - decide how many copies of the parent's subtree regrow.

Two interchangeable rules are supported:
    turn   - N equals the number of cuts made so far (or 1 in reduced mode)
    depth  - N counts up independently for each depth of the cut's parent
"""

from abc import ABC, abstractmethod
from collections import defaultdict
from typing import Dict

from .node import HydraNode


class GrowthPolicy(ABC):
    name = 'base'

    @abstractmethod
    def register_cut(self):
        """Called once for every successful cut, before any regrowth."""

    @abstractmethod
    def growth_factor(self, parent: HydraNode) -> int:
        """Number of copies of `parent`'s subtree to attach to its parent. Mutates state."""

    @abstractmethod
    def preview(self, depth: int = 0) -> int:
        """The factor the next regrowing cut at `depth` would get, without consuming it."""

    @abstractmethod
    def reset(self):
        pass

    def toggle_reduced(self) -> bool:
        return False

    def describe(self) -> str:
        return self.name


class TurnIndexedPolicy(GrowthPolicy):
    name = 'turn'

    def __init__(self, reduced: bool = False):
        self.turn = 0
        self.reduced = reduced

    def register_cut(self):
        self.turn += 1

    def growth_factor(self, parent: HydraNode) -> int:
        if self.reduced:
            return 1
        return max(1, self.turn)

    def preview(self, depth: int = 0) -> int:
        return 1 if self.reduced else self.turn + 1

    def reset(self):
        self.turn = 0

    def toggle_reduced(self) -> bool:
        self.reduced = not self.reduced
        return self.reduced

    def describe(self) -> str:
        suffix = " (reduced)" if self.reduced else ""
        return f"t = {self.turn + 1}, regrowth n = {self.preview()}{suffix}"


class DepthIndexedPolicy(GrowthPolicy):
    name = 'depth'

    def __init__(self):
        self.counters: Dict[int, int] = defaultdict(int)

    def register_cut(self):
        pass

    def growth_factor(self, parent: HydraNode) -> int:
        factor = self.counters[parent.depth] + 1
        self.counters[parent.depth] = factor
        return factor

    def preview(self, depth: int = 0) -> int:
        return self.counters.get(depth, 0) + 1

    def reset(self):
        self.counters.clear()

    def describe(self) -> str:
        if not self.counters:
            return "C(d) = 0 for all d"
        return "C(d): " + ", ".join(f"{d}:{c}" for d, c in sorted(self.counters.items()))


POLICIES = {
    'turn': TurnIndexedPolicy,
    'depth': DepthIndexedPolicy,
}


def make_policy(name: str, **kwargs) -> GrowthPolicy:
    if name not in POLICIES:
        raise ValueError(f"Unknown growth policy '{name}'. Valid: {list(POLICIES.keys())}")
    return POLICIES[name](**kwargs)
