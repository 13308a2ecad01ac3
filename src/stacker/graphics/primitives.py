"""Basic drawing primitives for STACKER frame buffers."""

from typing import Tuple
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Buffer = NDArray[np.uint8]


def new_buffer(width: int, height: int) -> Buffer:
    """Allocate a black (height, width, 3) buffer."""
    return np.zeros((height, width, 3), dtype=np.uint8)


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def _clip(buffer: Buffer, x: float, y: float, width: float, height: float):
    h, w = buffer.shape[:2]
    x1 = max(0, min(int(round(x)), w))
    y1 = max(0, min(int(round(y)), h))
    x2 = max(0, min(int(round(x + width)), w))
    y2 = max(0, min(int(round(y + height)), h))
    return x1, y1, x2, y2


def draw_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
) -> None:
    """Draw a filled rectangle, clipped to the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
    """
    x1, y1, x2, y2 = _clip(buffer, x, y, width, height)
    buffer[y1:y2, x1:x2] = color


def draw_rounded_rect(
    buffer: Buffer,
    x: float,
    y: float,
    width: float,
    height: float,
    color: Color,
    radius: float = 8,
) -> None:
    """Draw a filled rectangle with rounded corners.

    The radius shrinks to fit narrow or short rectangles.
    """
    x1, y1, x2, y2 = _clip(buffer, x, y, width, height)
    if x2 <= x1 or y2 <= y1:
        return

    r = max(0.0, min(radius, width / 2, height / 2))
    if r == 0:
        buffer[y1:y2, x1:x2] = color
        return

    # Distance of each pixel center from the nearest inner corner point
    ys, xs = np.ogrid[y1:y2, x1:x2]
    px = xs + 0.5
    py = ys + 0.5
    cx = np.clip(px, x + r, x + width - r)
    cy = np.clip(py, y + r, y + height - r)
    mask = (px - cx) ** 2 + (py - cy) ** 2 <= r * r

    region = buffer[y1:y2, x1:x2]
    region[mask] = color


def draw_vertical_gradient(buffer: Buffer, top: Color, bottom: Color) -> None:
    """Fill the buffer with a linear top-to-bottom gradient."""
    h = buffer.shape[0]
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[:, None]
    start = np.array(top, dtype=np.float32)
    end = np.array(bottom, dtype=np.float32)
    rows = start + (end - start) * t
    buffer[:, :] = rows[:, None, :].astype(np.uint8)
