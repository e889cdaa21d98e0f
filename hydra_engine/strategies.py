"""
Leaf choosers for playing the game without a human.
"""

from typing import Callable, Dict, Optional

import numpy as np
from tqdm import tqdm

from .errors import ResourceExhaustion
from .node import HydraNode, leaves


def _leftmost(candidates, rng):
    return candidates[0]


def _rightmost(candidates, rng):
    return candidates[-1]


def _shallowest(candidates, rng):
    return min(candidates, key=lambda n: n.depth)


def _random(candidates, rng):
    return candidates[int(rng.integers(len(candidates)))]


STRATEGIES: Dict[str, Callable] = {
    'leftmost': _leftmost,
    'rightmost': _rightmost,
    'shallowest': _shallowest,
    'random': _random,
}


def choose_leaf(name: str, root: HydraNode, rng: Optional[np.random.Generator] = None) -> Optional[HydraNode]:
    """Pick a leaf of `root` (pre-order candidates) or None if the hydra is slain."""
    if name not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{name}'. Valid: {list(STRATEGIES.keys())}")
    candidates = leaves(root)
    if not candidates:
        return None
    return STRATEGIES[name](candidates, rng if rng is not None else np.random.default_rng())


def autoplay(engine, strategy: str = 'rightmost', max_moves: int = 500,
             seed: Optional[int] = None, callback: Optional[Callable] = None,
             progress: bool = False) -> int:
    """
    Cut leaves until the hydra is slain or `max_moves` cuts were made.
    Optional callback is called after each cut with (engine, result).
    A cut refused by the engine's growth cap ends the game where it stands.
    Returns the number of cuts made.
    """
    rng = np.random.default_rng(seed)
    moves = 0
    with tqdm(total=max_moves, desc="Cutting", disable=not progress) as bar:
        while moves < max_moves and not engine.slain:
            leaf = choose_leaf(strategy, engine.root, rng)
            if leaf is None:
                break
            try:
                result = engine.cut(leaf)
            except ResourceExhaustion as e:
                bar.write(f"Stopped after {moves} moves: {e}")
                break
            moves += 1
            bar.update(1)
            bar.set_postfix(nodes=engine.node_count)
            if callback:
                callback(engine, result)
    return moves
