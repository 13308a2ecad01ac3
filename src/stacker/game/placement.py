"""Placement - drop the moving block onto the tower.

The moving block is trimmed to its overlap with the block below. What sticks
out is lost, so the tower narrows with every imperfect drop. No overlap at
all ends the game.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from stacker.config.settings import GameSettings
from stacker.game.session import Block, ColorToken, GameSession
from stacker.game.viewport import scroll_into_view

logger = logging.getLogger(__name__)


class PlacementOutcome(Enum):
    PERFECT = "PERFECT"
    PLACED = "PLACED"
    MISS = "MISS"
    IGNORED = "IGNORED"  # game already over


@dataclass(frozen=True)
class PlacementResult:
    """What a single drop did to the session."""
    outcome: PlacementOutcome
    overlap_width: float = 0.0
    block: Optional[Block] = None
    points: int = 0
    scroll_shift: float = 0.0

    @property
    def landed(self) -> bool:
        return self.block is not None


def overlap(prev: Block, left: float, width: float) -> tuple[float, float]:
    """Left edge and width of the intersection of ``prev`` and a span.

    The width is negative or zero when the spans don't touch.
    """
    overlap_left = max(prev.left, left)
    overlap_right = min(prev.right, left + width)
    return overlap_left, overlap_right - overlap_left


class PlacementEngine:
    """Turns a commit into a tower update, a score change or a game over."""

    def __init__(
        self,
        settings: GameSettings,
        next_color: Callable[[], ColorToken],
    ) -> None:
        self.settings = settings
        self._next_color = next_color

    def place(self, session: GameSession) -> PlacementResult:
        moving = session.moving
        if session.game_over or moving is None:
            return PlacementResult(PlacementOutcome.IGNORED)

        session.show_instructions = False

        prev = session.top_block
        overlap_left, overlap_width = overlap(prev, moving.left, moving.width)

        if overlap_width <= 0:
            session.game_over = True
            logger.info(f"Missed the tower, game over at score {session.score}")
            return PlacementResult(PlacementOutcome.MISS, overlap_width=overlap_width)

        block = Block(
            left=overlap_left,
            top=moving.top,
            width=overlap_width,
            height=prev.height,
            color=self._next_color(),
        )
        session.tower.append(block)

        is_perfect = abs(moving.left - prev.left) <= self.settings.perfect_tolerance
        if is_perfect:
            points = self.settings.perfect_points
            session.status_message = self.settings.perfect_message
            session.status_ticks_remaining = self.settings.status_ticks
            logger.info(f"Perfect drop at height {len(session.tower) - 1}")
        else:
            points = self.settings.normal_points
        session.score += points

        # Next round: trimmed width, one row higher
        moving.width = overlap_width
        moving.top -= prev.height

        shift = scroll_into_view(session, self.settings.scroll_band)

        moving.direction = -moving.direction
        moving.speed = min(moving.speed + self.settings.speed_step, self.settings.max_speed)
        if moving.direction > 0:
            moving.left = 0.0
        else:
            moving.left = max(0.0, session.viewport_width - moving.width)

        logger.debug(
            f"Placed block w={overlap_width:.2f} score={session.score} "
            f"speed={moving.speed:.2f}"
        )

        return PlacementResult(
            outcome=PlacementOutcome.PERFECT if is_perfect else PlacementOutcome.PLACED,
            overlap_width=overlap_width,
            block=session.tower[-1],
            points=points,
            scroll_shift=shift,
        )
