"""Draws a SessionSnapshot.

The renderer only reads snapshots, so drawing the same snapshot twice gives
the same frame. Shapes go into a numpy buffer; text is described as
``TextLine`` records and left to whatever has fonts (the pygame window).
"""

from dataclasses import dataclass
from typing import List, Optional

from stacker.game.session import SessionSnapshot
from stacker.graphics.primitives import (
    Buffer,
    Color,
    draw_rounded_rect,
    draw_vertical_gradient,
    new_buffer,
)

BG_TOP: Color = (25, 28, 45)
BG_BOTTOM: Color = (58, 66, 86)
MOVER_COLOR: Color = (255, 255, 255)
TEXT_COLOR: Color = (255, 255, 255)
STATUS_COLOR: Color = (255, 215, 0)
HINT_COLOR: Color = (220, 220, 220)

CONTROLS_HINT = "Space/Click: Place · R: Restart"
GAME_OVER_TEXT = "Game Over"
RESTART_HINT = "Press Enter / Click to Restart"


@dataclass(frozen=True)
class TextLine:
    """A piece of HUD text positioned in viewport coordinates."""
    text: str
    x: float
    y: float
    size: int
    color: Color = TEXT_COLOR
    bold: bool = False
    centered: bool = True
    shadow: bool = False


class SnapshotRenderer:
    """Renders tower, mover and background into an RGB buffer."""

    def __init__(self, block_radius: float = 8) -> None:
        self.block_radius = block_radius

    def render(self, snapshot: SessionSnapshot, buffer: Optional[Buffer] = None) -> Buffer:
        width = max(1, int(snapshot.viewport_width))
        height = max(1, int(snapshot.viewport_height))
        if buffer is None or buffer.shape[:2] != (height, width):
            buffer = new_buffer(width, height)

        draw_vertical_gradient(buffer, BG_TOP, BG_BOTTOM)

        for block in snapshot.tower:
            draw_rounded_rect(
                buffer, block.left, block.top, block.width, block.height,
                _as_color(block.color), self.block_radius,
            )

        moving = snapshot.moving
        if moving is not None:
            draw_rounded_rect(
                buffer, moving.left, moving.top, moving.width, moving.height,
                MOVER_COLOR, self.block_radius,
            )

        return buffer


def overlay_lines(snapshot: SessionSnapshot) -> List[TextLine]:
    """HUD text for a snapshot, top to bottom."""
    cx = snapshot.viewport_width / 2
    cy = snapshot.viewport_height / 2

    lines = [
        TextLine(str(snapshot.score), cx, 12, 32, bold=True, shadow=True),
        TextLine(f"Highest Score: {snapshot.high_score}", cx, 75, 14),
    ]

    if snapshot.status_message:
        lines.append(TextLine(snapshot.status_message, cx, 100, 24, STATUS_COLOR, bold=True))

    if snapshot.game_over:
        lines.append(TextLine(GAME_OVER_TEXT, cx, cy - 20, 28, bold=True, shadow=True))
        lines.append(TextLine(RESTART_HINT, cx, cy + 18, 14, shadow=True))

    if snapshot.show_instructions:
        lines.append(TextLine(
            CONTROLS_HINT, 10, snapshot.viewport_height - 400, 14,
            HINT_COLOR, centered=False,
        ))

    return lines


def _as_color(token) -> Color:
    """Best effort conversion of an opaque color token to RGB."""
    try:
        r, g, b = (int(c) for c in token[:3])
    except (TypeError, ValueError):
        return MOVER_COLOR
    return (r, g, b)
