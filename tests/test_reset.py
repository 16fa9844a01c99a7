import pytest

from slidemerge.components.direction import Direction
from slidemerge.components.game_state import GamePhase
from slidemerge.components.tile import Tile
from slidemerge.events.bus import EVENT_BOARD_RESET, EVENT_SCORE_CHANGED
from tests.helpers import arrange_board, make_engine


def _assert_fresh(engine):
    assert engine.current_state() is GamePhase.LOADED
    assert engine.score() == 0
    assert engine.board_snapshot().tile_count() == 0
    assert list(engine.world.get_component(Tile)) == []


def test_reset_from_loaded():
    engine = make_engine()
    engine.reset()
    _assert_fresh(engine)


def test_reset_mid_game_clears_score_and_tiles():
    engine = make_engine()
    arrange_board(engine, [
        [2, 2, 4, 4],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])
    engine.apply_move(Direction.LEFT)
    assert engine.score() == 12
    events = []
    engine.event_bus.subscribe(EVENT_BOARD_RESET, lambda s, **k: events.append(("reset", k)))
    engine.event_bus.subscribe(EVENT_SCORE_CHANGED, lambda s, **k: events.append(("score", k)))
    engine.reset()
    _assert_fresh(engine)
    assert events == [
        ("reset", {"reason": "reset"}),
        ("score", {"score": 0, "delta": -12}),
    ]


def test_reset_from_game_over_allows_new_game():
    engine = make_engine()
    arrange_board(engine, [
        [2, 4, 2, 4],
        [4, 2, 4, 2],
        [2, 4, 2, 4],
        [4, 2, 4, 2],
    ])
    engine.apply_move(Direction.DOWN)
    assert engine.is_game_over()
    engine.reset()
    _assert_fresh(engine)
    engine.step()
    assert engine.current_state() is GamePhase.WAITING_FOR_INPUT
    assert engine.board_snapshot().tile_count() == 2


@pytest.mark.parametrize("rounds", [1, 3])
def test_repeated_reset_is_stable(rounds):
    engine = make_engine()
    for _ in range(rounds):
        engine.step()
        engine.apply_move(Direction.RIGHT)
        engine.reset()
        _assert_fresh(engine)
