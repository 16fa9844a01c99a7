from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from esper import World

from slidemerge.components.board import Board
from slidemerge.components.direction import Direction
from slidemerge.components.tile import Tile
from slidemerge.utils.tile_math import power_for_value

Position = Tuple[int, int]


class BoardFullError(RuntimeError):
    """Raised when a tile is spawned on a board without empty cells."""


@dataclass(slots=True)
class TileMove:
    src: Position
    dst: Position
    value: int


@dataclass(slots=True)
class TileMerge:
    src: Position
    dst: Position
    value: int
    power: int
    points: int


@dataclass(slots=True)
class SlideResult:
    direction: Direction
    moves: List[TileMove] = field(default_factory=list)
    merges: List[TileMerge] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.moves or self.merges)

    @property
    def points(self) -> int:
        return sum(merge.points for merge in self.merges)


@dataclass(frozen=True, slots=True)
class TileSnapshot:
    value: int
    power: int
    upgraded_this_turn: bool


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Read-only copy of the grid for renderers; ``cells[y][x]``."""
    rows: int
    cols: int
    cells: Tuple[Tuple[Optional[TileSnapshot], ...], ...]

    def tile_at(self, x: int, y: int) -> Optional[TileSnapshot]:
        return self.cells[y][x]

    def tiles(self) -> Iterator[Tuple[Position, TileSnapshot]]:
        for y, row in enumerate(self.cells):
            for x, tile in enumerate(row):
                if tile is not None:
                    yield (x, y), tile

    def tile_count(self) -> int:
        return sum(1 for _ in self.tiles())

    def values(self) -> List[List[int]]:
        """Plain value grid with 0 marking empty cells."""
        return [[tile.value if tile else 0 for tile in row] for row in self.cells]


def get_board(world: World) -> Board:
    for _, board in world.get_component(Board):
        return board
    raise RuntimeError("Board component not found")


def tile_entity_at(world: World, x: int, y: int) -> int | None:
    board = get_board(world)
    if not board.in_bounds(x, y):
        return None
    return board.cells[y][x]


def get_tile_at(world: World, x: int, y: int) -> Tile | None:
    entity = tile_entity_at(world, x, y)
    if entity is None:
        return None
    return world.component_for_entity(entity, Tile)


def occupied_count(world: World) -> int:
    return get_board(world).occupied_count()


def has_empty_cell(world: World) -> bool:
    board = get_board(world)
    return board.occupied_count() < board.capacity


def place_tile(world: World, x: int, y: int, value: int, *, upgraded: bool = False) -> int:
    """Create a tile entity at (x, y); the cell must be inside the board and empty."""
    board = get_board(world)
    if not board.in_bounds(x, y):
        raise ValueError(f"Position ({x}, {y}) is outside the {board.cols}x{board.rows} board")
    if board.cells[y][x] is not None:
        raise ValueError(f"Position ({x}, {y}) is already occupied")
    power = power_for_value(value, board.lowest_value)
    entity = world.create_entity(Tile(value=value, power=power, upgraded_this_turn=upgraded))
    board.cells[y][x] = entity
    return entity


def remove_tile(world: World, x: int, y: int) -> Tile | None:
    board = get_board(world)
    entity = tile_entity_at(world, x, y)
    if entity is None:
        return None
    tile = world.component_for_entity(entity, Tile)
    board.cells[y][x] = None
    world.delete_entity(entity, immediate=True)
    return tile


def load_values(world: World, layout: Sequence[Sequence[int]]) -> None:
    """Replace the board contents with a row-major value grid (0 = empty)."""
    board = get_board(world)
    if len(layout) != board.rows or any(len(row) != board.cols for row in layout):
        raise ValueError(f"Layout must be {board.rows} rows of {board.cols} values")
    clear_board(world)
    for y, row in enumerate(layout):
        for x, value in enumerate(row):
            if value:
                place_tile(world, x, y, value)


def spawn_random_tile(world: World, rng: random.Random | None = None) -> Position:
    """Place a lowest-value tile at the first empty cell from a random start.

    Cells are scanned in row-major order, wrapping around the board.
    """
    board = get_board(world)
    if board.occupied_count() >= board.capacity:
        raise BoardFullError("Unable to create new tile - grid is already full")
    if rng is None:
        candidate_rng = getattr(world, "random", None)
        rng = candidate_rng if isinstance(candidate_rng, random.Random) else random.Random()
    x = rng.randrange(board.cols)
    y = rng.randrange(board.rows)
    for _ in range(board.capacity):
        if board.cells[y][x] is None:
            place_tile(world, x, y, board.lowest_value)
            return x, y
        x += 1
        if x >= board.cols:
            x = 0
            y += 1
            if y >= board.rows:
                y = 0
    # occupied_count said otherwise; the grid and the count disagree.
    raise BoardFullError("Unable to create new tile - no empty cell found")


def can_upgrade(board: Board, moving: Tile, target: Tile) -> bool:
    return (
        moving.value < board.max_value
        and moving.power == target.power
        and not moving.upgraded_this_turn
        and not target.upgraded_this_turn
    )


def traversal_order(board: Board, direction: Direction) -> List[Position]:
    """Cells ordered from the edge tiles move toward, outward."""
    xs: Iterable[int] = range(board.cols)
    ys: Iterable[int] = range(board.rows)
    if direction is Direction.RIGHT:
        xs = reversed(range(board.cols))
    elif direction is Direction.DOWN:
        ys = reversed(range(board.rows))
    if direction in (Direction.LEFT, Direction.RIGHT):
        return [(x, y) for x in xs for y in range(board.rows)]
    return [(x, y) for y in ys for x in range(board.cols)]


def slide_tiles(world: World, direction: Direction) -> SlideResult:
    """Compact and merge every tile toward ``direction``; returns what happened."""
    board = get_board(world)
    result = SlideResult(direction=direction)
    dx, dy = direction.dx, direction.dy
    for x, y in traversal_order(board, direction):
        entity = board.cells[y][x]
        if entity is None:
            continue
        tile: Tile = world.component_for_entity(entity, Tile)
        nx, ny = x + dx, y + dy
        while board.in_bounds(nx, ny) and board.cells[ny][nx] is None:
            nx += dx
            ny += dy
        if board.in_bounds(nx, ny):
            obstruction = board.cells[ny][nx]
            target: Tile = world.component_for_entity(obstruction, Tile)
            if can_upgrade(board, tile, target):
                result.merges.append(_merge_into(world, board, (x, y), (nx, ny), target))
                continue
        dest = (nx - dx, ny - dy)
        if dest != (x, y):
            board.cells[y][x] = None
            board.cells[dest[1]][dest[0]] = entity
            result.moves.append(TileMove(src=(x, y), dst=dest, value=tile.value))
    return result


def _merge_into(world: World, board: Board, src: Position, dst: Position, target: Tile) -> TileMerge:
    points = target.value * 2
    for px, py in (src, dst):
        world.delete_entity(board.cells[py][px], immediate=True)
        board.cells[py][px] = None
    upgraded = Tile(value=target.value * 2, power=target.power + 1, upgraded_this_turn=True)
    board.cells[dst[1]][dst[0]] = world.create_entity(upgraded)
    return TileMerge(src=src, dst=dst, value=upgraded.value, power=upgraded.power, points=points)


def moves_left(world: World) -> bool:
    board = get_board(world)
    if board.occupied_count() < board.capacity:
        return True
    values = [[world.component_for_entity(entity, Tile).value for entity in row] for row in board.cells]
    for y in range(board.rows):
        for x in range(board.cols):
            current = values[y][x]
            if x != board.cols - 1 and current == values[y][x + 1]:
                return True
            if y != board.rows - 1 and current == values[y + 1][x]:
                return True
    return False


def ready_tiles_for_upgrading(world: World) -> int:
    """Clear upgraded_this_turn on every tile; returns how many flags were set."""
    cleared = 0
    for _, tile in world.get_component(Tile):
        if tile.upgraded_this_turn:
            tile.upgraded_this_turn = False
            cleared += 1
    return cleared


def clear_board(world: World) -> int:
    board = get_board(world)
    removed = 0
    for y in range(board.rows):
        for x in range(board.cols):
            entity = board.cells[y][x]
            if entity is None:
                continue
            world.delete_entity(entity, immediate=True)
            board.cells[y][x] = None
            removed += 1
    return removed


def board_snapshot(world: World) -> BoardSnapshot:
    board = get_board(world)
    rows: List[Tuple[Optional[TileSnapshot], ...]] = []
    for y in range(board.rows):
        row: List[Optional[TileSnapshot]] = []
        for x in range(board.cols):
            entity = board.cells[y][x]
            if entity is None:
                row.append(None)
                continue
            tile = world.component_for_entity(entity, Tile)
            row.append(TileSnapshot(tile.value, tile.power, tile.upgraded_this_turn))
        rows.append(tuple(row))
    return BoardSnapshot(rows=board.rows, cols=board.cols, cells=tuple(rows))
