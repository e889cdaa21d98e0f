"""
Hydra Autoplay Script

Loads a preset hydra and cuts leaves with an automatic strategy until the
hydra is slain or the move budget runs out.

Configuration is loaded from config/game.json (defaults when missing) and can
be overridden from the command line. All output paths are derived from the
preset and policy names.

Outputs:
- Final snapshot (.json) for rendering
- Per-move frames (.json) for render.py
- Final hydra plot (.png)
- Game statistics (.png)
"""

import argparse
import json

from config import load_config
from hydra_engine import HydraEngine, EngineConfig, autoplay, PRESETS
from hydra_engine.policy import POLICIES
from hydra_engine.layout import LAYOUTS
from hydra_engine.strategies import STRATEGIES
from hydra_engine.profiling import profiler, profile_block
from hydra_engine.visualization import visualize_hydra, plot_game_statistics
from rendering.exporters import export_snapshot, export_frames, snapshot_to_dict


def parse_args():
    parser = argparse.ArgumentParser(description="Play the hydra game automatically.")
    parser.add_argument('--config', type=str, default='config/game.json', help='Path to the game config JSON')
    parser.add_argument('--preset', type=str, choices=list(PRESETS.keys()), help='Starting hydra')
    parser.add_argument('--policy', type=str, choices=list(POLICIES.keys()), help='Growth policy')
    parser.add_argument('--layout', type=str, choices=list(LAYOUTS.keys()), help='Layout strategy')
    parser.add_argument('--strategy', type=str, choices=list(STRATEGIES.keys()), help='Leaf chooser')
    parser.add_argument('--reduced', action='store_true', help='Reduced growth (N = 1, turn policy)')
    parser.add_argument('--seed', type=int, help='Random seed for presets and the random strategy')
    parser.add_argument('--max-moves', type=int, help='Stop after this many cuts')
    parser.add_argument('--max-nodes', type=int, help='Refuse cuts that would grow past this many nodes')
    parser.add_argument('--no-frames', action='store_true', help='Do not record per-move frames')
    parser.add_argument('--profile', action='store_true', help='Print engine timings at exit')
    return parser.parse_args()


def apply_overrides(game, args):
    if args.preset is not None:
        game.preset = args.preset
    if args.policy is not None:
        game.policy = args.policy
    if args.layout is not None:
        game.layout = args.layout
    if args.strategy is not None:
        game.strategy = args.strategy
    if args.reduced:
        game.reduced_growth = True
    if args.seed is not None:
        game.random_seed = args.seed
    if args.max_moves is not None:
        game.max_moves = args.max_moves
    if args.max_nodes is not None:
        game.max_nodes = args.max_nodes
    if args.profile:
        game.profile = True
    return game


def main():
    args = parse_args()
    game = apply_overrides(load_config(args.config), args)
    game.create_output_dirs()

    if game.profile:
        profiler.enable()

    engine = HydraEngine(EngineConfig.from_pipeline(game))
    engine.load_preset(game.preset, seed=game.random_seed)

    print(f"Playing preset '{game.preset}'")
    print(f"  Policy: {game.policy}{' (reduced)' if game.reduced_growth else ''}")
    print(f"  Strategy: {game.strategy}")
    print(f"  Starting nodes: {engine.node_count}")
    print()

    frames = [] if args.no_frames else [snapshot_to_dict(engine.snapshot())]

    def record(eng, result):
        if not args.no_frames:
            frames.append(snapshot_to_dict(eng.snapshot()))

    moves = autoplay(
        engine,
        strategy=game.strategy,
        max_moves=game.max_moves,
        seed=game.random_seed,
        callback=record,
        progress=True
    )

    snapshot = engine.snapshot()
    if snapshot.slain:
        print(f"Hydra slain in {moves} moves!")
    else:
        print(f"Stopped after {moves} moves with {snapshot.node_count} nodes left")
    peak = max((r.node_count for r in engine.history), default=snapshot.node_count)
    print(f"  Peak size: {peak} nodes")

    with profile_block("export"):
        export_snapshot(snapshot, str(game.snapshot_path))
        print(f"Exported snapshot to {game.snapshot_path}")
        if frames:
            export_frames(frames, str(game.frames_path))

    visualize_hydra(snapshot, save_path=str(game.tree_plot_path))
    if engine.history:
        plot_game_statistics(engine.history, save_path=str(game.stats_plot_path))

    summary = {
        'preset': game.preset,
        'policy': game.policy,
        'reduced_growth': game.reduced_growth,
        'strategy': game.strategy,
        'moves': moves,
        'slain': snapshot.slain,
        'final_nodes': snapshot.node_count,
        'peak_nodes': peak,
    }
    summary_path = game.output_dir / 'summary.json'
    with open(summary_path, 'w') as f:
        json.dump(summary, f, indent=2)
    print(f"Saved summary to {summary_path}")


if __name__ == '__main__':
    main()
