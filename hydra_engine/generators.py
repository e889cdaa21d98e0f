"""
Hydra generators - build the starting trees the player can load.
"""

from typing import Callable, Dict, Optional

import numpy as np

from .node import HydraNode, assign_depths, attach


def _rng(rng) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def chain_hydra(length: int) -> HydraNode:
    """Root with a single path of `length` nodes hanging below it."""
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    root = HydraNode()
    current = root
    for _ in range(length):
        child = HydraNode()
        attach(current, child)
        current = child
    assign_depths(root)
    return root


def balanced_hydra(depth: int, branching: int = 2) -> HydraNode:
    """Full tree: every node above `depth` has exactly `branching` children."""
    if depth < 0:
        raise ValueError(f"depth must be non-negative, got {depth}")
    if branching < 1:
        raise ValueError(f"branching must be at least 1, got {branching}")

    def grow(d: int) -> HydraNode:
        if d == 0:
            return HydraNode()
        return HydraNode([grow(d - 1) for _ in range(branching)])

    root = grow(depth)
    assign_depths(root)
    return root


def random_hydra(max_depth: int = 5, max_branch: int = 3, leaf_bias: float = 0.4,
                 rng=None) -> HydraNode:
    """
    Root with two random subtrees.

    Below the root every node becomes a leaf with probability `leaf_bias`
    (always at `max_depth`), otherwise it gets 1..max_branch children.
    """
    if max_branch < 1:
        raise ValueError(f"max_branch must be at least 1, got {max_branch}")
    if not 0.0 <= leaf_bias <= 1.0:
        raise ValueError(f"leaf_bias must be in [0, 1], got {leaf_bias}")
    rng = _rng(rng)

    def grow(d: int) -> HydraNode:
        if d >= max_depth or rng.random() < leaf_bias:
            return HydraNode()
        k = 1 + int(rng.integers(max_branch))
        return HydraNode([grow(d + 1) for _ in range(k)])

    root = HydraNode([grow(1), grow(1)])
    assign_depths(root)
    return root


def random_trunk_hydra(rng=None) -> HydraNode:
    """
    Root with one random trunk of depth 2-4.

    Each node has 1, 2 or 3 children (p = 0.5 / 0.35 / 0.15) and a child skips
    a level with probability 0.3.
    """
    rng = _rng(rng)
    max_depth = 2 + int(rng.integers(3))

    def grow(budget: int) -> HydraNode:
        node = HydraNode()
        if budget <= 0:
            return node
        r = rng.random()
        count = 1 if r < 0.5 else (2 if r < 0.85 else 3)
        for _ in range(count):
            step = 2 if rng.random() < 0.3 else 1
            attach(node, grow(budget - step))
        return node

    root = HydraNode([grow(max_depth)])
    assign_depths(root)
    return root


PRESETS: Dict[str, Callable[[Optional[np.random.Generator]], HydraNode]] = {
    'line3': lambda rng: chain_hydra(3),
    'line4': lambda rng: chain_hydra(4),
    'line5': lambda rng: chain_hydra(5),
    'simple': lambda rng: balanced_hydra(3, 2),
    'medium': lambda rng: balanced_hydra(4, 3),
    'random': lambda rng: random_hydra(5, 3, 0.35, rng=rng),
    'random_trunk': lambda rng: random_trunk_hydra(rng=rng),
}


def build_preset(name: str, seed: Optional[int] = None) -> HydraNode:
    if name not in PRESETS:
        raise ValueError(f"Unknown preset '{name}'. Valid: {list(PRESETS.keys())}")
    return PRESETS[name](np.random.default_rng(seed))
