from slidemerge.components.board import Board
from slidemerge.config import EngineConfig
from slidemerge.events.bus import EventBus
from slidemerge.world import create_world


def test_board_component_exists():
    bus = EventBus(); world = create_world(bus, EngineConfig(rows=6, cols=7))
    boards = list(world.get_component(Board))
    assert boards, 'Board component missing'
    ent, comp = boards[0]
    assert comp.rows == 6 and comp.cols == 7
    assert len(comp.cells) == 6 and all(len(row) == 7 for row in comp.cells)
    assert comp.occupied_count() == 0


def test_board_bounds():
    board = Board(rows=2, cols=3, max_value=2048, lowest_value=2)
    assert board.in_bounds(0, 0)
    assert board.in_bounds(2, 1)
    assert not board.in_bounds(3, 0)
    assert not board.in_bounds(0, 2)
    assert not board.in_bounds(-1, 0)
    assert board.capacity == 6
