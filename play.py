"""
Interactive Hydra
A matplotlib window for playing the hydra game by hand.

Controls:
    left click   cut the leaf under the pointer
    1-7          load a preset (line3, line4, line5, simple, medium, random, random_trunk)
    x            rebuild the current preset
    z            toggle reduced growth (turn policy)
    e            save a snapshot plot to the output directory
"""

import argparse

import matplotlib.pyplot as plt

from config import load_config
from hydra_engine import HydraEngine, EngineConfig, LeafSpatialIndex, PRESETS, ResourceExhaustion
from hydra_engine.visualization import draw_hydra, visualize_hydra

PRESET_KEYS = {str(i + 1): name for i, name in enumerate(PRESETS.keys())}


class HydraViewer:

    def __init__(self, engine: HydraEngine, game):
        self.engine = engine
        self.game = game
        self.index = LeafSpatialIndex()
        self.pick_radius = game.min_width / 2

        self.fig, self.ax = plt.subplots(figsize=(12, 8))
        self.fig.canvas.manager.set_window_title("Hydra")
        self.fig.canvas.mpl_connect('button_press_event', self.on_click)
        self.fig.canvas.mpl_connect('key_press_event', self.on_key)

        self.redraw()

    def redraw(self):
        snapshot = self.engine.snapshot()
        self.index.rebuild(self.engine.last_layout)
        # Labels get unreadable long before the hydra stops growing
        draw_hydra(self.ax, snapshot, show_labels=snapshot.node_count <= 200,
                   show_badges=snapshot.node_count <= 200)
        self.fig.canvas.draw_idle()

    def on_click(self, event):
        if event.inaxes is not self.ax or event.button != 1:
            return
        leaf = self.index.find_leaf(event.xdata, event.ydata, self.pick_radius)
        if leaf is None:
            return
        try:
            result = self.engine.cut(leaf)
        except ResourceExhaustion as e:
            print(f"Cut refused: {e}")
            return
        if result:
            self.redraw()

    def on_key(self, event):
        if event.key in PRESET_KEYS:
            self.engine.load_preset(PRESET_KEYS[event.key], seed=self.game.random_seed)
        elif event.key == 'x':
            self.engine.reset()
        elif event.key == 'z':
            reduced = self.engine.toggle_reduced_growth()
            print(f"Reduced growth: {'On' if reduced else 'Off'}")
        elif event.key == 'e':
            self.game.create_output_dirs()
            fig, _ = visualize_hydra(self.engine.snapshot(), save_path=str(self.game.tree_plot_path))
            plt.close(fig)
            return
        else:
            return
        self.redraw()


def main():
    parser = argparse.ArgumentParser(description="Play the hydra game interactively.")
    parser.add_argument('--config', type=str, default='config/game.json', help='Path to the game config JSON')
    parser.add_argument('--preset', type=str, choices=list(PRESETS.keys()), help='Starting hydra')
    parser.add_argument('--policy', type=str, choices=['turn', 'depth'], help='Growth policy')
    args = parser.parse_args()

    game = load_config(args.config)
    if args.preset is not None:
        game.preset = args.preset
    if args.policy is not None:
        game.policy = args.policy

    engine = HydraEngine(EngineConfig.from_pipeline(game))
    engine.load_preset(game.preset, seed=game.random_seed)

    HydraViewer(engine, game)
    plt.show()


if __name__ == '__main__':
    main()
