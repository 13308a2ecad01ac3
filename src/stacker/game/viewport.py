"""Keeps the tower on screen.

Two adjustments, both bulk passes over the tower by index:

- after a placement the whole scene scrolls down so the mover never rises
  above a fixed band near the top of the viewport;
- on resize the tower is re-centered horizontally. Resize never scrolls.
"""

import logging
from dataclasses import replace

from stacker.game.session import GameSession

logger = logging.getLogger(__name__)

DEFAULT_SCROLL_BAND = 0.25


def scroll_into_view(session: GameSession, band: float = DEFAULT_SCROLL_BAND) -> float:
    """Shift everything down if the mover is above the band.

    Returns:
        The applied shift (0.0 when nothing moved).
    """
    moving = session.moving
    limit = session.viewport_height * band
    if moving is None or moving.top >= limit:
        return 0.0

    shift = limit - moving.top
    for i, block in enumerate(session.tower):
        session.tower[i] = replace(block, top=block.top + shift)
    moving.top += shift

    logger.debug(f"Scrolled scene down by {shift:.2f}")
    return shift


def on_resize(session: GameSession, width: float, height: float) -> float:
    """Re-center the tower in a viewport of the new size.

    Returns:
        The horizontal shift applied to every block and the mover.
    """
    base = session.base_block
    span = session.top_block.right - base.left
    target_left = (width - span) / 2
    shift_x = target_left - base.left

    for i, block in enumerate(session.tower):
        session.tower[i] = replace(block, left=block.left + shift_x)
    if session.moving is not None:
        session.moving.left += shift_x

    session.viewport_width = width
    session.viewport_height = height

    logger.debug(f"Viewport resized to {width}x{height}, shift_x={shift_x:.2f}")
    return shift_x
