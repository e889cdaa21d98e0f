"""
Base renderer class defining the interface for all renderers.
"""

import cairo
import numpy as np
from abc import ABC, abstractmethod
from typing import Tuple

from config.render_config import HydraRenderConfig


class Renderer(ABC):
    def __init__(self, config: HydraRenderConfig):
        self.config = config

    def _create_surface(self) -> Tuple[cairo.ImageSurface, cairo.Context]:
        surface = cairo.ImageSurface(
            cairo.FORMAT_ARGB32,
            self.config.output_width,
            self.config.output_height
        )
        ctx = cairo.Context(surface)

        if self.config.antialiasing:
            ctx.set_antialias(cairo.ANTIALIAS_BEST)

        r, g, b, a = self.config.background_color
        ctx.set_source_rgba(r, g, b, a)
        ctx.paint()

        return surface, ctx

    def _surface_to_numpy(self, surface: cairo.ImageSurface) -> np.ndarray:
        surface.flush()
        buf = surface.get_data()
        stride = surface.get_stride()
        arr = np.ndarray(
            shape=(self.config.output_height, stride // 4, 4),
            dtype=np.uint8,
            buffer=buf
        )[:, :self.config.output_width]
        # Cairo stores premultiplied BGRA on little-endian machines
        return arr[:, :, [2, 1, 0, 3]].copy()

    def _compute_transform(self, bounds) -> Tuple[float, float, float]:
        """Uniform scale and offsets mapping layout bounds into the padded output."""
        xmin, ymin, xmax, ymax = bounds
        pad = self.config.padding
        avail_w = max(1.0, self.config.output_width - 2 * pad)
        avail_h = max(1.0, self.config.output_height - 2 * pad)
        span_w = max(xmax - xmin, 1.0)
        span_h = max(ymax - ymin, 1.0)
        # Small hydras are not blown up past 2x
        scale = min(avail_w / span_w, avail_h / span_h, 2.0)
        offset_x = pad + (avail_w - span_w * scale) / 2 - xmin * scale
        offset_y = pad + (avail_h - span_h * scale) / 2 - ymin * scale
        return scale, offset_x, offset_y

    @abstractmethod
    def render_frame(self, *args, **kwargs) -> np.ndarray:
        pass

    @abstractmethod
    def render_animation(self, *args, **kwargs):
        pass
