"""
Configuration for rendering module.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class HydraRenderConfig:
    output_width: int = 768
    output_height: int = 768
    background_color: Tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)
    padding: float = 40.0

    edge_color: Tuple[float, float, float, float] = (0.30, 0.30, 0.30, 1.0)
    edge_width: float = 1.5
    curved_edges: bool = True

    root_color: Tuple[float, float, float, float] = (0.10, 0.10, 0.10, 1.0)
    internal_color: Tuple[float, float, float, float] = (0.15, 0.35, 0.85, 1.0)
    leaf_color: Tuple[float, float, float, float] = (0.85, 0.15, 0.15, 1.0)
    node_radius: float = 10.0     # in layout units, scaled with the tree

    show_labels: bool = True
    show_badges: bool = True      # child count next to internal nodes
    show_status: bool = True

    antialiasing: bool = True
