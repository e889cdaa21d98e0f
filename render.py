"""
Rendering Script

Turns the frames recorded by main.py into a Cairo-rendered replay.

Configuration is loaded from config/game.json.
All paths are derived from the preset and policy names.

Modes:
    final   - Render only the final snapshot to PNG
    replay  - Render every recorded move into an animation (GIF or MP4)
"""

import argparse
import os
from pathlib import Path

from config import load_config, HydraRenderConfig
from rendering import load_snapshot, load_frames
from rendering.hydra_renderer import HydraRenderer


def remove_if_exists(path: str):
    """Remove file if it exists to ensure fresh write."""
    p = Path(path)
    if p.exists():
        try:
            os.remove(p)
            print(f"Removed existing file: {path}")
        except OSError as e:
            print(f"Error removing {path}: {e}")


def make_renderer(game) -> HydraRenderer:
    return HydraRenderer(HydraRenderConfig(
        output_width=game.render_size,
        output_height=game.render_size
    ))


def render_final(game):
    """Render the final snapshot as a single PNG."""
    if not game.snapshot_path.exists():
        raise FileNotFoundError(
            f"Snapshot not found at {game.snapshot_path}. "
            f"Please run main.py first."
        )

    print(f"Loading snapshot from {game.snapshot_path}...")
    data = load_snapshot(str(game.snapshot_path))

    renderer = make_renderer(game)
    output_path = str(game.final_frame_path)
    remove_if_exists(output_path)
    renderer.save_frame(data, output_path)
    print(f"Saved frame to {output_path}")


def render_replay(game, output_path: str = None):
    """Render every recorded move as one animation frame."""
    if not game.frames_path.exists():
        raise FileNotFoundError(
            f"Recorded frames not found at {game.frames_path}. "
            f"Please run main.py without --no-frames first."
        )

    print(f"Loading frames from {game.frames_path}...")
    frames = load_frames(str(game.frames_path))

    print(f"Rendering {len(frames)} frames at {game.render_size}x{game.render_size} with Cairo...")
    renderer = make_renderer(game)
    output_path = output_path or str(game.replay_path)
    remove_if_exists(output_path)
    renderer.render_animation(frames, output_path, fps=game.render_fps)


def main():
    parser = argparse.ArgumentParser(description="Render hydra snapshots and replays.")
    parser.add_argument('--config', type=str, default='config/game.json', help='Path to the game config JSON')
    parser.add_argument(
        '--mode',
        type=str,
        choices=['final', 'replay'],
        default='replay',
        help='Rendering mode: final or replay (default: replay)'
    )
    parser.add_argument('--output', type=str, default=None, help='Replay output path (.gif or .mp4)')
    parser.add_argument('--preset', type=str, help='Preset the run was played with')
    parser.add_argument('--policy', type=str, help='Policy the run was played with')
    parser.add_argument('--seed', type=int, help='Seed the run was played with')
    args = parser.parse_args()

    game = load_config(args.config)
    if args.preset is not None:
        game.preset = args.preset
    if args.policy is not None:
        game.policy = args.policy
    if args.seed is not None:
        game.random_seed = args.seed
    game.create_output_dirs()

    print(f"Rendering for: {game.run_name}")
    print(f"Output: {game.output_dir}")
    print(f"Mode: {args.mode}")
    print()

    if args.mode == 'final':
        render_final(game)
    elif args.mode == 'replay':
        render_replay(game, args.output)


if __name__ == '__main__':
    main()
