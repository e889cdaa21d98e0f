"""
Hydra renderer using Cairo.
Draws exported snapshots (see exporters.snapshot_to_dict) as frames.
"""

import cairo
import numpy as np
import imageio
import math
from tqdm import tqdm
from typing import List, Dict, Any
from pathlib import Path

from config.render_config import HydraRenderConfig
from .base import Renderer


class HydraRenderer(Renderer):
    def __init__(self, config: HydraRenderConfig = None):
        super().__init__(config or HydraRenderConfig())

    def _draw_edges(self, ctx: cairo.Context, nodes: List[Dict], transform):
        scale, ox, oy = transform
        radius = self.config.node_radius * scale
        by_label = {n['label']: n for n in nodes}

        ctx.set_source_rgba(*self.config.edge_color)
        ctx.set_line_width(self.config.edge_width)
        ctx.set_line_cap(cairo.LINE_CAP_ROUND)

        for node in nodes:
            if node['parent'] is None:
                continue
            parent = by_label[node['parent']]
            px, py = parent['x'] * scale + ox, parent['y'] * scale + oy
            cx, cy = node['x'] * scale + ox, node['y'] * scale + oy

            # Leave the edge at the parent's rim and enter the child's rim
            sign = 1 if cy >= py else -1
            sy = py + sign * radius
            ty = cy - sign * radius

            ctx.move_to(px, sy)
            if self.config.curved_edges:
                my = (sy + ty) / 2
                ctx.curve_to(px, my, cx, my, cx, ty)
            else:
                ctx.line_to(cx, ty)
            ctx.stroke()

    def _node_color(self, node: Dict):
        if node['is_root']:
            return self.config.root_color
        if node['is_leaf']:
            return self.config.leaf_color
        return self.config.internal_color

    def _draw_nodes(self, ctx: cairo.Context, nodes: List[Dict], transform):
        scale, ox, oy = transform
        radius = self.config.node_radius * scale
        font_size = max(6.0, radius)

        ctx.select_font_face("Sans", cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL)
        ctx.set_font_size(font_size)

        for node in nodes:
            x, y = node['x'] * scale + ox, node['y'] * scale + oy

            ctx.arc(x, y, radius, 0, 2 * math.pi)
            ctx.set_source_rgba(*self._node_color(node))
            ctx.fill_preserve()
            ctx.set_source_rgba(0, 0, 0, 1)
            ctx.set_line_width(1.0)
            ctx.stroke()

            if self.config.show_labels:
                self._centered_text(ctx, str(node['label']), x, y, (1, 1, 1, 1))

            if self.config.show_badges and node['children']:
                bx, by = x + radius + 2, y - radius - font_size
                bw, bh = font_size * 1.6, font_size * 1.3
                ctx.rectangle(bx, by, bw, bh)
                ctx.set_source_rgba(1.0, 0.98, 0.85, 1.0)
                ctx.fill_preserve()
                ctx.set_source_rgba(0.5, 0.5, 0.5, 1.0)
                ctx.stroke()
                self._centered_text(ctx, str(node['children']), bx + bw / 2, by + bh / 2, (0, 0, 0, 1))

    def _centered_text(self, ctx: cairo.Context, text: str, x: float, y: float, color):
        extents = ctx.text_extents(text)
        ctx.move_to(x - extents.width / 2 - extents.x_bearing,
                    y - extents.height / 2 - extents.y_bearing)
        ctx.set_source_rgba(*color)
        ctx.show_text(text)

    def _draw_status(self, ctx: cairo.Context, data: Dict[str, Any]):
        status = f"Moves: {data['move_count']}   Nodes: {data['node_count']}   {data['policy']}"
        if data['slain']:
            status += "   - Hydra slain!"
        ctx.set_font_size(14)
        ctx.set_source_rgba(0, 0, 0, 1)
        ctx.move_to(8, 20)
        ctx.show_text(status)

    def render_frame(self, data: Dict[str, Any]) -> np.ndarray:
        surface, ctx = self._create_surface()

        nodes = data['nodes']
        if nodes:
            transform = self._compute_transform(data['bounds'])
            self._draw_edges(ctx, nodes, transform)
            self._draw_nodes(ctx, nodes, transform)
        if self.config.show_status:
            self._draw_status(ctx, data)

        return self._surface_to_numpy(surface)

    def save_frame(self, data: Dict[str, Any], output_path: str):
        frame = self.render_frame(data)
        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        imageio.imwrite(output_path, frame)

    def render_animation(self, frames_data: List[Dict[str, Any]], output_path: str,
                         fps: int = 4, hold_last: int = 4):
        """Render one frame per snapshot; the final position is held for `hold_last` frames."""
        if not frames_data:
            raise ValueError("no frames to render")

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)

        frames = [
            self.render_frame(data)
            for data in tqdm(frames_data, desc="Rendering hydra frames")
        ]
        frames.extend([frames[-1]] * hold_last)

        if Path(output_path).suffix.lower() == '.gif':
            imageio.mimsave(output_path, frames, duration=1000 / fps, loop=0)
        else:
            imageio.mimsave(output_path, frames, fps=fps)
        print(f"  Saved animation: {output_path}")
