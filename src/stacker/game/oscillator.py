"""Per-tick motion of the moving block and the status countdown."""

from stacker.game.session import GameSession


def advance(session: GameSession) -> None:
    """Move the block one step and bounce it off the viewport edges."""
    moving = session.moving
    if session.game_over or moving is None:
        return

    moving.left += moving.speed * moving.direction

    if moving.left <= 0:
        moving.left = 0.0
        moving.direction = 1
    elif moving.left + moving.width >= session.viewport_width:
        moving.left = session.viewport_width - moving.width
        moving.direction = -1


def countdown_status(session: GameSession) -> None:
    """Tick the status message timer, clearing the message at zero."""
    if session.game_over:
        return
    if session.status_ticks_remaining > 0:
        session.status_ticks_remaining -= 1
        if session.status_ticks_remaining == 0:
            session.status_message = ""
