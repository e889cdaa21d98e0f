"""
Configuration module.
"""

from .pipeline import GameConfig, load_config, save_config
from .render_config import HydraRenderConfig

__all__ = [
    'GameConfig',
    'load_config',
    'save_config',
    'HydraRenderConfig',
]
