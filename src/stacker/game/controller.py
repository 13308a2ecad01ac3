"""Session controller - the only entry point the host talks to.

The host owns the clock and the input devices and calls ``tick``, ``place``,
``resize`` and ``restart`` from one thread. Renderers read ``snapshot()``.
"""

import logging
import random
from typing import Callable, Optional

from stacker.config.settings import GameSettings
from stacker.core.events import Event, EventBus, EventType
from stacker.core.state import State, StateMachine
from stacker.game import oscillator, viewport
from stacker.game.colors import RandomColorSource
from stacker.game.placement import PlacementEngine, PlacementOutcome, PlacementResult
from stacker.game.session import Block, ColorToken, GameSession, MovingBlock, SessionSnapshot

logger = logging.getLogger(__name__)


class SessionController:
    """Owns one GameSession and drives it through PLAYING and GAME_OVER."""

    def __init__(
        self,
        width: float,
        height: float,
        settings: Optional[GameSettings] = None,
        next_color: Optional[Callable[[], ColorToken]] = None,
        event_bus: Optional[EventBus] = None,
    ) -> None:
        self.settings = settings or GameSettings()
        self.next_color = next_color or RandomColorSource(random.Random())
        self.event_bus = event_bus
        self.state_machine = StateMachine(State.PLAYING)
        self.engine = PlacementEngine(self.settings, self.next_color)

        self._session = self._new_session(width, height, high_score=0)
        logger.info(f"Session created for {width}x{height} viewport")

    @property
    def session(self) -> GameSession:
        return self._session

    @property
    def state(self) -> State:
        return self.state_machine.state

    def snapshot(self) -> SessionSnapshot:
        return self._session.snapshot()

    # Public operations

    def tick(self) -> None:
        """Advance one fixed step. Does nothing after game over."""
        if not self.state_machine.is_playing:
            return
        oscillator.advance(self._session)
        oscillator.countdown_status(self._session)

    def place(self) -> Optional[PlacementResult]:
        """Drop the mover, or start over when the game has ended.

        Returns:
            The placement result, or None if the call restarted the game
        """
        if self.state == State.GAME_OVER:
            self.restart()
            return None

        result = self.engine.place(self._session)

        if result.outcome == PlacementOutcome.MISS:
            self.state_machine.transition(State.GAME_OVER)
            self._emit(EventType.GAME_OVER, score=self._session.score)
            if self._session.score > self._session.high_score:
                self._announce_high_score(self._session.score)
        elif result.landed:
            self._emit(
                EventType.BLOCK_PLACED,
                score=self._session.score,
                width=result.overlap_width,
                height=len(self._session.tower) - 1,
            )
            if result.outcome == PlacementOutcome.PERFECT:
                self._emit(EventType.PERFECT_PLACEMENT, score=self._session.score)

        return result

    def resize(self, width: float, height: float) -> None:
        """Re-center the tower for a new viewport. Legal in any state."""
        viewport.on_resize(self._session, width, height)

    def restart(self) -> None:
        """Fold the score into the high score and build a fresh session."""
        old = self._session
        if self.state == State.PLAYING and old.score > old.high_score:
            # A miss already announced it otherwise
            self._announce_high_score(old.score)
        high_score = max(old.high_score, old.score)
        self._session = self._new_session(
            old.viewport_width, old.viewport_height, high_score=high_score
        )
        self.state_machine.transition(State.PLAYING)
        logger.info(f"New game (high score {high_score})")
        self._emit(EventType.GAME_RESTARTED, high_score=high_score)

    # Internals

    def _new_session(self, width: float, height: float, high_score: int) -> GameSession:
        if width <= 0 or height <= 0:
            raise ValueError(f"Viewport must be positive, got {width}x{height}")

        cfg = self.settings
        base_height = cfg.base_height
        base_width = width * cfg.base_width_ratio
        base_left = (width - base_width) / 2
        base_top = height - base_height

        base = Block(
            left=base_left,
            top=base_top,
            width=base_width,
            height=base_height,
            color=self.next_color(),
        )
        moving = MovingBlock(
            left=0.0,
            top=base_top - base_height,
            width=base_width,
            height=base_height,
            direction=1,
            speed=cfg.initial_speed,
        )
        return GameSession(
            viewport_width=width,
            viewport_height=height,
            tower=[base],
            moving=moving,
            high_score=high_score,
        )

    def _announce_high_score(self, score: int) -> None:
        logger.info(f"New high score: {score}")
        self._emit(EventType.HIGH_SCORE, score=score)

    def _emit(self, event_type: EventType, **data) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(Event(event_type, data=data, source="session"))


def bind_controller(bus: EventBus, controller: SessionController) -> Callable[[], None]:
    """Route input events from the bus into the controller.

    Returns:
        Function that removes all the subscriptions
    """
    unsubscribers = [
        bus.subscribe(EventType.PLACE, lambda event: controller.place()),
        bus.subscribe(EventType.RESTART, lambda event: controller.restart()),
        bus.subscribe(EventType.TICK, lambda event: controller.tick()),
        bus.subscribe(
            EventType.RESIZE,
            lambda event: controller.resize(event.data["width"], event.data["height"]),
        ),
    ]

    def unbind() -> None:
        for unsubscribe in unsubscribers:
            unsubscribe()

    return unbind
