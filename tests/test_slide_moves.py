import pytest

from slidemerge.components.direction import Direction
from slidemerge.config import EngineConfig
from slidemerge.events.bus import EventBus
from slidemerge.systems.board_ops import (
    board_snapshot,
    get_tile_at,
    load_values,
    slide_tiles,
    traversal_order,
    get_board,
)
from slidemerge.world import create_world


def _world(layout, max_value=2048):
    rows, cols = len(layout), len(layout[0])
    world = create_world(EventBus(), EngineConfig(rows=rows, cols=cols, max_value=max_value))
    load_values(world, layout)
    return world


def _values(world):
    return board_snapshot(world).values()


def test_two_equal_tiles_merge_left_at_origin():
    world = _world([
        [2, 2, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ])
    result = slide_tiles(world, Direction.LEFT)
    assert result.changed
    assert result.points == 4
    assert len(result.merges) == 1
    merged = get_tile_at(world, 0, 0)
    assert merged.value == 4
    assert merged.power == 1
    assert merged.upgraded_this_turn is True
    assert get_tile_at(world, 1, 0) is None


@pytest.mark.parametrize(
    "direction, row_in, row_out",
    [
        (Direction.LEFT, [0, 2, 0, 4], [2, 4, 0, 0]),
        (Direction.RIGHT, [2, 0, 4, 0], [0, 0, 2, 4]),
        (Direction.LEFT, [2, 2, 2, 2], [4, 4, 0, 0]),
        (Direction.RIGHT, [2, 2, 2, 2], [0, 0, 4, 4]),
        (Direction.LEFT, [2, 2, 4, 0], [4, 4, 0, 0]),
        (Direction.LEFT, [4, 2, 2, 0], [4, 4, 0, 0]),
        (Direction.RIGHT, [0, 4, 2, 2], [0, 0, 4, 4]),
        (Direction.LEFT, [2, 0, 0, 2], [4, 0, 0, 0]),
        (Direction.LEFT, [8, 4, 2, 2], [8, 4, 4, 0]),
    ],
)
def test_horizontal_rows(direction, row_in, row_out):
    world = _world([row_in])
    slide_tiles(world, direction)
    assert _values(world) == [row_out]


def test_vertical_moves_use_columns():
    world = _world([
        [2, 0, 0],
        [2, 4, 0],
        [0, 4, 8],
        [4, 0, 0],
    ])
    slide_tiles(world, Direction.UP)
    assert _values(world) == [
        [4, 8, 8],
        [4, 0, 0],
        [0, 0, 0],
        [0, 0, 0],
    ]


def test_move_down_compacts_toward_bottom():
    world = _world([
        [2, 0],
        [0, 4],
        [2, 0],
        [0, 0],
    ])
    result = slide_tiles(world, Direction.DOWN)
    assert _values(world) == [
        [0, 0],
        [0, 0],
        [0, 0],
        [4, 4],
    ]
    assert result.points == 4
    moved = {(m.src, m.dst) for m in result.moves}
    assert ((1, 1), (1, 3)) in moved


def test_merged_tile_cannot_merge_again_same_turn():
    world = _world([[4, 2, 2, 0]])
    # First pass on its own would merge 2+2 -> 4 next to the existing 4.
    result = slide_tiles(world, Direction.LEFT)
    assert _values(world) == [[4, 4, 0, 0]]
    assert len(result.merges) == 1
    assert get_tile_at(world, 1, 0).upgraded_this_turn is True
    assert get_tile_at(world, 0, 0).upgraded_this_turn is False


def test_upgraded_flag_blocks_merge_until_cleared():
    from slidemerge.systems.board_ops import ready_tiles_for_upgrading

    world = _world([[4, 2, 2, 0]])
    slide_tiles(world, Direction.LEFT)
    second = slide_tiles(world, Direction.LEFT)
    assert not second.changed
    assert ready_tiles_for_upgrading(world) == 1
    third = slide_tiles(world, Direction.LEFT)
    assert _values(world) == [[8, 0, 0, 0]]
    assert third.points == 8


def test_max_value_tiles_do_not_merge():
    world = _world([[8, 8, 4, 4]], max_value=8)
    result = slide_tiles(world, Direction.LEFT)
    assert _values(world) == [[8, 8, 8, 0]]
    assert result.points == 8


def test_blocked_board_reports_no_change():
    world = _world([
        [2, 4],
        [4, 2],
    ])
    for direction in Direction:
        result = slide_tiles(world, direction)
        assert not result.changed
        assert result.moves == [] and result.merges == []
    assert _values(world) == [[2, 4], [4, 2]]


def test_tile_already_at_border_does_not_count_as_move():
    world = _world([[2, 0, 0, 0]])
    assert not slide_tiles(world, Direction.LEFT).changed
    assert slide_tiles(world, Direction.RIGHT).changed
    assert _values(world) == [[0, 0, 0, 2]]


def test_merge_removes_exactly_one_tile():
    world = _world([
        [2, 2, 4, 4],
        [8, 8, 0, 0],
    ])
    before = board_snapshot(world).tile_count()
    result = slide_tiles(world, Direction.LEFT)
    after = board_snapshot(world).tile_count()
    assert before - after == len(result.merges) == 3
    assert result.points == 4 + 8 + 16


def test_traversal_starts_at_destination_edge():
    world = _world([[0, 0, 0], [0, 0, 0]])
    board = get_board(world)
    assert traversal_order(board, Direction.LEFT)[:2] == [(0, 0), (0, 1)]
    assert traversal_order(board, Direction.RIGHT)[0] == (2, 0)
    assert traversal_order(board, Direction.UP)[:3] == [(0, 0), (1, 0), (2, 0)]
    assert traversal_order(board, Direction.DOWN)[0] == (0, 1)
    assert len(traversal_order(board, Direction.DOWN)) == 6
