"""
Visualization utilities for the hydra game.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from typing import List, Optional, Tuple
from pathlib import Path

from .engine import HydraSnapshot, MoveRecord

ROOT_COLOR = 'black'
LEAF_COLOR = 'red'
INTERNAL_COLOR = 'blue'


def edge_segments(snapshot: HydraSnapshot) -> List[List[Tuple[float, float]]]:
    by_label = {v.label: v for v in snapshot.nodes}
    segments = []
    for view in snapshot.nodes:
        if view.parent_label is None:
            continue
        parent = by_label[view.parent_label]
        segments.append([(parent.x, parent.y), (view.x, view.y)])
    return segments


def node_colors(snapshot: HydraSnapshot) -> List[str]:
    return [
        ROOT_COLOR if v.is_root else LEAF_COLOR if v.is_leaf else INTERNAL_COLOR
        for v in snapshot.nodes
    ]


def draw_hydra(ax, snapshot: HydraSnapshot, node_size: float = 120.0,
               show_labels: bool = True, show_badges: bool = True,
               edge_color: str = 'dimgray'):
    """Draw a snapshot onto an existing axes."""
    ax.clear()

    segments = edge_segments(snapshot)
    if segments:
        ax.add_collection(LineCollection(segments, colors=edge_color, linewidths=1.0, zorder=1))

    if len(snapshot.positions) > 0:
        ax.scatter(
            snapshot.positions[:, 0],
            snapshot.positions[:, 1],
            c=node_colors(snapshot),
            s=node_size,
            edgecolors='black',
            zorder=2
        )

    for view in snapshot.nodes:
        if show_labels:
            ax.annotate(str(view.label), (view.x, view.y), ha='center', va='center',
                        color='white', fontsize=7, zorder=3)
        if show_badges and view.child_count:
            ax.annotate(str(view.child_count), (view.x, view.y), xytext=(10, 8),
                        textcoords='offset points', fontsize=7,
                        bbox=dict(boxstyle='round,pad=0.2', fc='lightyellow', ec='gray'),
                        zorder=3)

    xmin, ymin, xmax, ymax = snapshot.bounds
    pad = 40.0
    ax.set_xlim(xmin - pad, xmax + pad)
    # Screen convention: y grows downwards
    ax.set_ylim(ymax + pad, ymin - pad)
    ax.set_aspect('equal', adjustable='datalim')
    ax.axis('off')

    title = f"Moves: {snapshot.move_count}   Nodes: {snapshot.node_count}   {snapshot.policy}"
    if snapshot.slain:
        title += "   - Hydra slain!"
    ax.set_title(title, fontsize=10)


def visualize_hydra(
    snapshot: HydraSnapshot,
    figsize: Tuple[int, int] = (12, 8),
    show_labels: bool = True,
    show_badges: bool = True,
    save_path: Optional[str] = None,
    show: bool = False
):
    """Plot one snapshot of the hydra."""
    fig, ax = plt.subplots(figsize=figsize)
    draw_hydra(ax, snapshot, show_labels=show_labels, show_badges=show_badges)
    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor='white', edgecolor='none')
        print(f"Saved visualization to {save_path}")

    if show:
        plt.show()
    return fig, ax


def plot_game_statistics(history: List[MoveRecord], save_path: Optional[str] = None,
                         show: bool = False):
    """Node count and growth factor over the moves of a game."""
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    moves = np.array([r.move for r in history], dtype=int)
    counts = np.array([r.node_count for r in history], dtype=int)
    factors = np.array([r.growth_factor for r in history], dtype=int)

    axes[0].plot(moves, counts, color='forestgreen')
    axes[0].set_xlabel('Move')
    axes[0].set_ylabel('Nodes')
    axes[0].set_title('Hydra Size')
    if len(counts) and counts.max() > 100 * max(1, counts.min()):
        axes[0].set_yscale('log')

    axes[1].bar(moves, factors, color='saddlebrown', edgecolor='black')
    axes[1].set_xlabel('Move')
    axes[1].set_ylabel('Copies')
    axes[1].set_title('Regrowth per Move')

    plt.tight_layout()

    if save_path:
        Path(save_path).parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        print(f"Saved statistics to {save_path}")

    if show:
        plt.show()
    return fig, axes
