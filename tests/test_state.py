"""Tests for the session state machine."""

from stacker.core.state import State, StateMachine


def test_starts_playing():
    machine = StateMachine()
    assert machine.state == State.PLAYING
    assert machine.is_playing


def test_game_over_and_back():
    machine = StateMachine()
    assert machine.transition(State.GAME_OVER)
    assert not machine.is_playing
    assert machine.transition(State.PLAYING)
    assert machine.is_playing


def test_rejects_game_over_twice():
    machine = StateMachine(State.GAME_OVER)
    assert not machine.can_transition(State.GAME_OVER)
    assert not machine.transition(State.GAME_OVER)
    assert machine.state == State.GAME_OVER


def test_listeners_see_transitions():
    machine = StateMachine()
    seen = []
    machine.add_listener(lambda old, new: seen.append((old, new)))

    machine.transition(State.GAME_OVER)
    machine.transition(State.PLAYING)

    assert seen == [
        (State.PLAYING, State.GAME_OVER),
        (State.GAME_OVER, State.PLAYING),
    ]


def test_failing_listener_does_not_block():
    machine = StateMachine()

    def broken(old, new):
        raise RuntimeError("boom")

    machine.add_listener(broken)
    assert machine.transition(State.GAME_OVER)
    assert machine.state == State.GAME_OVER


def test_remove_listener():
    machine = StateMachine()
    seen = []
    listener = lambda old, new: seen.append(new)
    machine.add_listener(listener)
    machine.remove_listener(listener)

    machine.transition(State.GAME_OVER)

    assert seen == []
