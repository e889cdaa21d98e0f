"""
Unified configuration for a hydra game session.

All output paths are derived from the preset name.
This is the single source of truth for the entry points.
"""

from dataclasses import dataclass, fields
from typing import Optional
from pathlib import Path
import json


@dataclass
class GameConfig:
    """
    Settings for loading, playing and rendering one hydra.
    """

    # ==================== HYDRA ====================
    preset: str = 'line3'
    random_seed: Optional[int] = None

    # ==================== GROWTH ====================
    policy: str = 'turn'          # 'turn' or 'depth'
    reduced_growth: bool = False
    max_nodes: Optional[int] = 20000   # None disables the cap

    # ==================== LAYOUT ====================
    layout: str = 'width'         # 'width' or 'size'
    min_width: float = 40.0
    level_gap: float = 80.0
    canvas_width: float = 1000.0
    canvas_height: float = 650.0
    margin: float = 60.0
    origin_y: float = 40.0
    direction: str = 'down'

    # ==================== AUTOPLAY ====================
    strategy: str = 'rightmost'
    max_moves: int = 500

    # ==================== OUTPUT ====================
    output_base: str = 'outputs'
    render_size: int = 768
    render_fps: int = 4
    profile: bool = False

    # ==================== DERIVED PATHS ====================
    @property
    def run_name(self) -> str:
        name = f'{self.preset}_{self.policy}'
        if self.random_seed is not None:
            name += f'_s{self.random_seed}'
        return name

    @property
    def output_dir(self) -> Path:
        return Path(self.output_base) / self.run_name

    @property
    def snapshot_path(self) -> Path:
        return self.output_dir / 'final_snapshot.json'

    @property
    def frames_path(self) -> Path:
        return self.output_dir / 'frames.json'

    @property
    def tree_plot_path(self) -> Path:
        return self.output_dir / 'hydra.png'

    @property
    def stats_plot_path(self) -> Path:
        return self.output_dir / 'stats.png'

    @property
    def final_frame_path(self) -> Path:
        return self.output_dir / 'final_frame.png'

    @property
    def replay_path(self) -> Path:
        return self.output_dir / 'replay.gif'

    def create_output_dirs(self):
        self.output_dir.mkdir(parents=True, exist_ok=True)


def load_config(path: str = 'config/game.json') -> GameConfig:
    """Load config from JSON file, with defaults for missing fields."""
    config_path = Path(path)
    if not config_path.exists():
        return GameConfig()

    with open(config_path, 'r') as f:
        data = json.load(f)

    known = {f.name for f in fields(GameConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        print(f"Warning: ignoring unknown config keys in {config_path}: {', '.join(unknown)}")

    return GameConfig(**{k: v for k, v in data.items() if k in known})


def save_config(config: GameConfig, path: str = 'config/game.json'):
    """Save config to JSON file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {f.name: getattr(config, f.name) for f in fields(GameConfig)}

    with open(config_path, 'w') as f:
        json.dump(data, f, indent=2)

    print(f"Saved config to {config_path}")
