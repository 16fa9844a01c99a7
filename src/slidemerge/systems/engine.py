"""Turn-based state machine driving the sliding merge grid."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from esper import World

from slidemerge.config import EngineConfig
from slidemerge.components.direction import Direction
from slidemerge.components.game_state import GamePhase
from slidemerge.components.score import Score
from slidemerge.constants import GRID_COLS, GRID_ROWS, LOWEST_TILE_VALUE, MAX_TILE_VALUE, STARTING_TILES
from slidemerge.events.bus import (
    EVENT_BOARD_RESET,
    EVENT_GAME_OVER,
    EVENT_MOVE_APPLIED,
    EVENT_MOVE_REQUEST,
    EVENT_RESET_REQUEST,
    EVENT_SCORE_CHANGED,
    EVENT_TILE_MOVED,
    EVENT_TILE_SPAWNED,
    EVENT_TILES_MERGED,
    EventBus,
)
from slidemerge.systems import board_ops
from slidemerge.systems.board_ops import BoardSnapshot, SlideResult
from slidemerge.utils.game_state import get_game_state, set_game_phase
from slidemerge.world import create_world

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveOutcome:
    changed: bool
    merges: int = 0
    points: int = 0


class GridEngine:
    """Owns the board, the score and the turn phase.

    Flow:
      - ``step`` leaves LOADED by spawning the starting tiles.
      - ``apply_move`` slides/merges while WAITING_FOR_INPUT; a move that changed the
        board runs the CHECKING_MATCHES pass (spawn, ready tiles, termination test)
        before returning.
      - ``reset`` is accepted in every phase and returns to LOADED.
    Bus commands (EVENT_MOVE_REQUEST, EVENT_RESET_REQUEST) map onto the same calls, so
    the engine never advances on frame ticks.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_MOVE_REQUEST, self.on_move_request)
        self.event_bus.subscribe(EVENT_RESET_REQUEST, self.on_reset_request)

    @classmethod
    def new_game(
        cls,
        rows: int = GRID_ROWS,
        cols: int = GRID_COLS,
        max_value: int = MAX_TILE_VALUE,
        *,
        lowest_value: int = LOWEST_TILE_VALUE,
        event_bus: EventBus | None = None,
        rng: random.Random | None = None,
    ) -> "GridEngine":
        config = EngineConfig(rows=rows, cols=cols, max_value=max_value, lowest_value=lowest_value)
        bus = event_bus or EventBus()
        world = create_world(bus, config, rng=rng)
        return cls(world, bus)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def config(self) -> EngineConfig:
        return getattr(self.world, "config")

    def current_state(self) -> GamePhase:
        return get_game_state(self.world).phase

    def is_game_over(self) -> bool:
        return self.current_state() is GamePhase.GAME_OVER

    def moves_left(self) -> bool:
        return board_ops.moves_left(self.world)

    def board_snapshot(self) -> BoardSnapshot:
        return board_ops.board_snapshot(self.world)

    def score(self) -> int:
        return self._score().points

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def step(self) -> None:
        """Spawn the starting tiles when the game is freshly loaded."""
        if self.current_state() is not GamePhase.LOADED:
            return
        for _ in range(STARTING_TILES):
            self._spawn_tile()
        set_game_phase(self.world, self.event_bus, GamePhase.WAITING_FOR_INPUT)

    def apply_move(self, direction: Direction | str) -> MoveOutcome:
        if isinstance(direction, str):
            direction = Direction.from_name(direction)
        phase = self.current_state()
        if phase is not GamePhase.WAITING_FOR_INPUT:
            logger.debug("Ignoring %s while %s", direction.name, phase.name)
            return MoveOutcome(changed=False)

        result = board_ops.slide_tiles(self.world, direction)
        self._publish_slide(result)
        logger.debug(
            "Move %s: %d moved, %d merged, +%d points",
            direction.name, len(result.moves), len(result.merges), result.points,
        )
        if result.changed or not board_ops.moves_left(self.world):
            set_game_phase(self.world, self.event_bus, GamePhase.CHECKING_MATCHES)
            self._check_matches()
        self.event_bus.emit(EVENT_MOVE_APPLIED, direction=direction, changed=result.changed)
        return MoveOutcome(changed=result.changed, merges=len(result.merges), points=result.points)

    def reset(self, reason: str = "reset") -> None:
        removed = board_ops.clear_board(self.world)
        score = self._score()
        previous = score.points
        score.points = 0
        logger.info("Board reset (%s): cleared %d tiles, score was %d", reason, removed, previous)
        self.event_bus.emit(EVENT_BOARD_RESET, reason=reason)
        if previous:
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=0, delta=-previous)
        set_game_phase(self.world, self.event_bus, GamePhase.LOADED)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------

    def on_move_request(self, sender, **payload):
        direction = payload.get("direction")
        if direction is None:
            return
        self.apply_move(direction)

    def on_reset_request(self, sender, **payload):
        # A reset command from the player starts the next game straight away.
        self.reset(reason="reset_request")
        self.step()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _check_matches(self) -> None:
        if board_ops.has_empty_cell(self.world):
            self._spawn_tile()
        board_ops.ready_tiles_for_upgrading(self.world)
        if board_ops.moves_left(self.world):
            set_game_phase(self.world, self.event_bus, GamePhase.WAITING_FOR_INPUT)
            return
        set_game_phase(self.world, self.event_bus, GamePhase.GAME_OVER)
        logger.info("Game over with score %d", self.score())
        self.event_bus.emit(EVENT_GAME_OVER, score=self.score())

    def _spawn_tile(self) -> None:
        x, y = board_ops.spawn_random_tile(self.world)
        tile = board_ops.get_tile_at(self.world, x, y)
        self.event_bus.emit(EVENT_TILE_SPAWNED, pos=(x, y), value=tile.value, power=tile.power)

    def _publish_slide(self, result: SlideResult) -> None:
        for move in result.moves:
            self.event_bus.emit(EVENT_TILE_MOVED, src=move.src, dst=move.dst, value=move.value)
        for merge in result.merges:
            self.event_bus.emit(
                EVENT_TILES_MERGED,
                src=merge.src,
                dst=merge.dst,
                value=merge.value,
                power=merge.power,
                points=merge.points,
            )
        if result.points:
            score = self._score()
            score.points += result.points
            self.event_bus.emit(EVENT_SCORE_CHANGED, score=score.points, delta=result.points)

    def _score(self) -> Score:
        for _, score in self.world.get_component(Score):
            return score
        raise RuntimeError("Score component not found")
