"""
Game window using pygame.

Hosts a SessionController: owns the clock, turns keyboard, mouse and window
events into bus events, and draws snapshots.
"""

import pygame
import asyncio
import logging

from ..config.settings import DisplaySettings
from ..core.events import EventBus, EventType, Event, place_event, restart_event, resize_event, tick_event
from ..core.state import State
from ..game.controller import SessionController, bind_controller
from ..graphics.renderer import SnapshotRenderer, TextLine, overlay_lines

logger = logging.getLogger(__name__)

SHADOW_COLOR = (0, 0, 0)
DEBUG_COLOR = (150, 200, 150)


class GameWindow:
    """
    Desktop window running one STACKER session.

    Keyboard Mapping:
        SPACE / UP / RETURN: Place block (restart after game over)
        MOUSE BUTTON: Place block (restart after game over)
        R: Restart
        D: Toggle debug overlay
        ESC / Q: Exit
    """

    def __init__(
        self,
        controller: SessionController,
        config: DisplaySettings | None = None,
        event_bus: EventBus | None = None
    ) -> None:
        self.config = config or DisplaySettings()
        self.controller = controller
        self.event_bus = event_bus or EventBus()
        self.renderer = SnapshotRenderer(block_radius=self.config.block_radius)

        # Pygame setup
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._running = False
        self._frame_count = 0
        self._show_debug = False
        self._fonts: dict[tuple[int, bool], pygame.font.Font] = {}
        self._buffer = None

        self._unbind = bind_controller(self.event_bus, self.controller)
        self.event_bus.subscribe(EventType.QUIT, self._on_quit)

        logger.info("GameWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        self._screen = pygame.display.set_mode(
            (self.config.width, self.config.height),
            pygame.DOUBLEBUF | pygame.RESIZABLE
        )
        self._clock = pygame.time.Clock()
        pygame.font.init()

        logger.info(f"Pygame initialized: {self.config.width}x{self.config.height}")

    def _font(self, size: int, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont(None, size, bold=bold)
        return self._fonts[key]

    def _handle_events(self) -> None:
        """Translate pygame events into bus events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.event_bus.queue_event(Event(EventType.QUIT, source="window"))

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.MOUSEBUTTONDOWN:
                self.event_bus.queue_event(place_event(source="mouse"))

            elif event.type == pygame.VIDEORESIZE:
                self.event_bus.queue_event(resize_event(event.w, event.h))

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        """Handle key press."""
        key = event.key

        if key == pygame.K_ESCAPE or key == pygame.K_q:
            self.event_bus.queue_event(Event(EventType.QUIT, source="keyboard"))
        elif key == pygame.K_d:
            self._show_debug = not self._show_debug
        elif key == pygame.K_r:
            self.event_bus.queue_event(restart_event(source="keyboard"))
        elif key in (pygame.K_SPACE, pygame.K_UP, pygame.K_RETURN):
            self.event_bus.queue_event(place_event(source="keyboard"))

    def _on_quit(self, event: Event) -> None:
        self._running = False

    def _render(self) -> None:
        """Draw the current snapshot and HUD."""
        if not self._screen:
            return

        snapshot = self.controller.snapshot()
        self._buffer = self.renderer.render(snapshot, self._buffer)
        surface = pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))
        self._screen.blit(surface, (0, 0))

        for line in overlay_lines(snapshot):
            self._draw_text(line)

        if self._show_debug:
            self._render_debug()

        pygame.display.flip()

    def _draw_text(self, line: TextLine) -> None:
        font = self._font(line.size, line.bold)
        text_surface = font.render(line.text, True, line.color)
        rect = text_surface.get_rect()
        if line.centered:
            rect.midtop = (int(line.x), int(line.y))
        else:
            rect.topleft = (int(line.x), int(line.y))

        if line.shadow:
            shadow = font.render(line.text, True, SHADOW_COLOR)
            shadow.set_alpha(80)
            self._screen.blit(shadow, rect.move(1, 1))
        self._screen.blit(text_surface, rect)

    def _render_debug(self) -> None:
        session = self.controller.session
        moving = session.moving
        lines = [
            f"FPS: {self._clock.get_fps():.1f}" if self._clock else "FPS: --",
            f"Frame: {self._frame_count}",
            f"State: {self.controller.state.name}",
            f"Height: {len(session.tower) - 1}",
        ]
        if moving is not None and self.controller.state == State.PLAYING:
            lines.append(f"Speed: {moving.speed:.2f}")
            lines.append(f"Width: {moving.width:.1f}")

        font = self._font(14)
        y = 10
        for line in lines:
            self._screen.blit(font.render(line, True, DEBUG_COLOR), (10, y))
            y += 16

    async def run(self) -> None:
        """Main game loop."""
        self._init_pygame()
        self._running = True

        logger.info("Game started")

        while self._running:
            self._handle_events()

            # Input first, then the fixed step, all through one queue
            self.event_bus.queue_event(tick_event(self._frame_count))
            await self.event_bus.process_queue()

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        self._unbind()
        pygame.quit()
        logger.info("Game window closed")

    def stop(self) -> None:
        """Stop the game loop."""
        self._running = False
