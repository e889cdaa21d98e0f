"""
Configuration for the hydra engine.
"""

from dataclasses import dataclass
from typing import Literal, Optional

from .layout import LayoutSettings

PolicyName = Literal['turn', 'depth']
LayoutName = Literal['width', 'size']


@dataclass
class EngineConfig:
    policy: PolicyName = 'turn'
    reduced_growth: bool = False       # turn policy only: N = 1 on every regrowth

    layout: LayoutName = 'width'
    min_width: float = 40.0            # reserved width of a leaf
    level_gap: float = 80.0
    canvas_width: float = 1000.0
    margin: float = 60.0
    origin_y: float = 40.0
    direction: str = 'down'

    # None = unbounded growth. A number makes cuts that would exceed it fail
    max_nodes: Optional[int] = None

    def __post_init__(self):
        if self.max_nodes is not None and self.max_nodes < 1:
            raise ValueError(f"max_nodes must be positive or None, got {self.max_nodes}")

    def layout_settings(self) -> LayoutSettings:
        return LayoutSettings(
            min_width=self.min_width,
            level_gap=self.level_gap,
            canvas_width=self.canvas_width,
            margin=self.margin,
            origin_y=self.origin_y,
            direction=self.direction,
        )

    @classmethod
    def from_pipeline(cls, game_config) -> 'EngineConfig':
        """Create an EngineConfig from a GameConfig."""
        return cls(
            policy=game_config.policy,
            reduced_growth=game_config.reduced_growth,
            layout=game_config.layout,
            min_width=game_config.min_width,
            level_gap=game_config.level_gap,
            canvas_width=game_config.canvas_width,
            margin=game_config.margin,
            origin_y=game_config.origin_y,
            direction=game_config.direction,
            max_nodes=game_config.max_nodes,
        )
