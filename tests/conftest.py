"""
Pytest fixtures for STACKER tests.
"""

import pytest

from stacker.config.settings import GameSettings
from stacker.core.events import EventBus
from stacker.game.colors import CycleColorSource
from stacker.game.controller import SessionController
from stacker.game.session import Block, GameSession, MovingBlock

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLUE = (0, 0, 255)


@pytest.fixture
def settings() -> GameSettings:
    """Default gameplay settings."""
    return GameSettings()


@pytest.fixture
def colors() -> CycleColorSource:
    """Deterministic color source: red, green, blue, red, ..."""
    return CycleColorSource([RED, GREEN, BLUE])


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()


@pytest.fixture
def controller(settings, colors, event_bus) -> SessionController:
    """A fresh game in the classic 420x720 window."""
    return SessionController(420, 720, settings=settings, next_color=colors, event_bus=event_bus)


@pytest.fixture
def narrow_session() -> GameSession:
    """A hand-built session with a 50 wide top block at x=0."""
    return GameSession(
        viewport_width=420,
        viewport_height=720,
        tower=[Block(0, 696, 50, 24, RED)],
        moving=MovingBlock(left=100, top=672, width=50, height=24, direction=1, speed=3.2),
    )


@pytest.fixture
def drop_at():
    """Line the mover up ``offset`` pixels right of the top block and place it."""
    def _drop(controller: SessionController, offset: float):
        session = controller.session
        session.moving.left = session.top_block.left + offset
        return controller.place()
    return _drop
