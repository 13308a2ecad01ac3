"""Block stacking simulation."""

from stacker.game.session import Block, GameSession, MovingBlock, SessionSnapshot
from stacker.game.colors import PALETTE, CycleColorSource, RandomColorSource
from stacker.game.placement import PlacementEngine, PlacementOutcome, PlacementResult
from stacker.game.controller import SessionController, bind_controller

__all__ = [
    # State
    "Block",
    "GameSession",
    "MovingBlock",
    "SessionSnapshot",
    # Colors
    "PALETTE",
    "CycleColorSource",
    "RandomColorSource",
    # Placement
    "PlacementEngine",
    "PlacementOutcome",
    "PlacementResult",
    # Control
    "SessionController",
    "bind_controller",
]
