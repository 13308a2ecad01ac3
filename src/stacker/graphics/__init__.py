"""Graphics module for STACKER rendering."""

from stacker.graphics.primitives import (
    draw_rect,
    draw_rounded_rect,
    draw_vertical_gradient,
    fill,
    new_buffer,
)
from stacker.graphics.renderer import SnapshotRenderer, TextLine, overlay_lines

__all__ = [
    # Renderer
    "SnapshotRenderer",
    "TextLine",
    "overlay_lines",
    # Primitives
    "draw_rect",
    "draw_rounded_rect",
    "draw_vertical_gradient",
    "fill",
    "new_buffer",
]
