"""Game session state: the tower, the moving block and the scoreboard.

Pure storage. Every mutation is done by the oscillator, the placement engine
and the viewport adjuster, all driven by the SessionController.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

ColorToken = Any


@dataclass(frozen=True)
class Block:
    """A block placed on the tower."""
    left: float
    top: float
    width: float
    height: float
    color: ColorToken = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Block needs positive size, got {self.width}x{self.height}"
            )

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height


@dataclass
class MovingBlock:
    """The block oscillating above the tower."""
    left: float
    top: float
    width: float
    height: float
    direction: int = 1  # +1 right, -1 left
    speed: float = 3.2

    @property
    def right(self) -> float:
        return self.left + self.width


@dataclass
class GameSession:
    """Everything one round of the game owns."""
    viewport_width: float
    viewport_height: float
    tower: List[Block] = field(default_factory=list)
    moving: Optional[MovingBlock] = None
    score: int = 0
    high_score: int = 0
    status_message: str = ""
    status_ticks_remaining: int = 0
    game_over: bool = False
    show_instructions: bool = True

    @property
    def top_block(self) -> Block:
        return self.tower[-1]

    @property
    def base_block(self) -> Block:
        return self.tower[0]

    def snapshot(self) -> "SessionSnapshot":
        """Freeze the current state for a renderer."""
        moving = None
        if self.moving is not None and not self.game_over:
            moving = MovingSnapshot(
                left=self.moving.left,
                top=self.moving.top,
                width=self.moving.width,
                height=self.moving.height,
            )
        return SessionSnapshot(
            tower=tuple(self.tower),
            moving=moving,
            score=self.score,
            high_score=self.high_score,
            status_message=self.status_message,
            game_over=self.game_over,
            show_instructions=self.show_instructions,
            viewport_width=self.viewport_width,
            viewport_height=self.viewport_height,
        )


@dataclass(frozen=True)
class MovingSnapshot:
    """Position and size of the mover at snapshot time."""
    left: float
    top: float
    width: float
    height: float


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable view of a GameSession handed to the render side."""
    tower: Tuple[Block, ...]
    moving: Optional[MovingSnapshot]
    score: int
    high_score: int
    status_message: str
    game_over: bool
    show_instructions: bool
    viewport_width: float
    viewport_height: float
