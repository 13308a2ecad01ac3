"""Tests for per-tick motion and the status countdown."""

import pytest

from stacker.game import oscillator


def test_moves_by_speed_in_direction(narrow_session):
    oscillator.advance(narrow_session)
    assert narrow_session.moving.left == pytest.approx(103.2)

    narrow_session.moving.direction = -1
    oscillator.advance(narrow_session)
    assert narrow_session.moving.left == pytest.approx(100)


def test_bounces_off_right_edge(narrow_session):
    moving = narrow_session.moving
    moving.left = 420 - 50 - 1

    oscillator.advance(narrow_session)

    assert moving.left == 370
    assert moving.direction == -1


def test_bounces_off_left_edge(narrow_session):
    moving = narrow_session.moving
    moving.left = 2
    moving.direction = -1

    oscillator.advance(narrow_session)

    assert moving.left == 0
    assert moving.direction == 1


def test_exact_edge_counts_as_bounce(narrow_session):
    moving = narrow_session.moving
    moving.speed = 4
    moving.left = 366

    oscillator.advance(narrow_session)

    assert moving.left == 370
    assert moving.direction == -1


def test_stays_inside_viewport_over_many_ticks(narrow_session):
    moving = narrow_session.moving
    moving.speed = 12
    for _ in range(500):
        oscillator.advance(narrow_session)
        assert 0 <= moving.left <= 420 - moving.width


def test_no_motion_after_game_over(narrow_session):
    narrow_session.game_over = True
    oscillator.advance(narrow_session)
    assert narrow_session.moving.left == 100


def test_countdown_clears_message(narrow_session):
    narrow_session.status_message = "PERFECT!"
    narrow_session.status_ticks_remaining = 2

    oscillator.countdown_status(narrow_session)
    assert narrow_session.status_message == "PERFECT!"
    oscillator.countdown_status(narrow_session)
    assert narrow_session.status_message == ""
    assert narrow_session.status_ticks_remaining == 0


def test_countdown_idle_at_zero(narrow_session):
    narrow_session.status_message = "sticky"
    oscillator.countdown_status(narrow_session)
    assert narrow_session.status_message == "sticky"
    assert narrow_session.status_ticks_remaining == 0


def test_countdown_frozen_after_game_over(narrow_session):
    narrow_session.status_message = "PERFECT!"
    narrow_session.status_ticks_remaining = 1
    narrow_session.game_over = True

    oscillator.countdown_status(narrow_session)

    assert narrow_session.status_message == "PERFECT!"
    assert narrow_session.status_ticks_remaining == 1
