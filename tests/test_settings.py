"""Tests for settings loading."""

import pytest
from pydantic import ValidationError

from stacker.config.settings import DisplaySettings, GameSettings, Settings


def test_game_defaults_keep_classic_feel():
    game = GameSettings()
    assert game.base_height == 24
    assert game.base_width_ratio == 0.8
    assert game.initial_speed == 3.2
    assert game.speed_step == 0.12
    assert game.max_speed == 12
    assert game.perfect_tolerance == 4
    assert game.perfect_points == 2
    assert game.normal_points == 1
    assert game.perfect_message == "PERFECT!"
    assert game.status_ticks == 25
    assert game.scroll_band == 0.25


def test_display_defaults():
    display = DisplaySettings()
    assert (display.width, display.height) == (420, 720)
    assert display.fps == 60


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("STACKER_GAME_MAX_SPEED", "8")
    monkeypatch.setenv("STACKER_DISPLAY_WIDTH", "600")
    monkeypatch.setenv("STACKER_SEED", "99")

    settings = Settings()

    assert settings.game.max_speed == 8
    assert settings.display.width == 600
    assert settings.seed == 99


@pytest.mark.parametrize("field, value", [
    ("base_height", 0),
    ("base_width_ratio", 1.5),
    ("initial_speed", -1),
    ("scroll_band", 2),
])
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        GameSettings(**{field: value})


def test_controller_uses_settings(colors):
    from stacker.game.controller import SessionController

    controller = SessionController(
        500, 600,
        settings=GameSettings(base_height=30, base_width_ratio=0.5, initial_speed=5),
        next_color=colors,
    )

    session = controller.session
    assert session.base_block.width == 250
    assert session.base_block.left == 125
    assert session.base_block.top == 570
    assert session.moving.top == 540
    assert session.moving.speed == 5
