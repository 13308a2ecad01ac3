"""
Main entry point for STACKER.

Loads settings, builds the session and runs the pygame window.
"""

import asyncio
import logging
import random
import sys

from stacker.config.settings import Settings, get_settings
from stacker.core.events import EventBus
from stacker.game.colors import RandomColorSource
from stacker.game.controller import SessionController


def setup_logging(debug: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S"
    )


def build_controller(settings: Settings, event_bus: EventBus | None = None) -> SessionController:
    """Create a session controller from settings."""
    return SessionController(
        width=settings.display.width,
        height=settings.display.height,
        settings=settings.game,
        next_color=RandomColorSource(random.Random(settings.seed)),
        event_bus=event_bus,
    )


async def run_game(settings: Settings) -> None:
    """Run the game in a desktop window."""
    from stacker.simulator.window import GameWindow

    event_bus = EventBus()
    controller = build_controller(settings, event_bus)
    window = GameWindow(
        controller=controller,
        config=settings.display,
        event_bus=event_bus
    )

    await window.run()


def main() -> None:
    """Main entry point."""
    from dotenv import load_dotenv

    # Load environment variables
    load_dotenv()

    settings = get_settings()
    setup_logging(settings.debug)

    logger = logging.getLogger(__name__)
    logger.info("STACKER starting...")

    try:
        asyncio.run(run_game(settings))
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)

    logger.info("STACKER stopped")


if __name__ == "__main__":
    main()
