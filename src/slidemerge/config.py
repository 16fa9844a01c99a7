from __future__ import annotations

from dataclasses import dataclass

from slidemerge.constants import GRID_COLS, GRID_ROWS, LOWEST_TILE_VALUE, MAX_TILE_VALUE, STARTING_TILES
from slidemerge.utils.tile_math import is_on_ladder, power_for_value


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable engine settings supplied when a game is created.

    ``max_value`` is the upgrade cap: a tile already at this value never merges.
    """

    rows: int = GRID_ROWS
    cols: int = GRID_COLS
    max_value: int = MAX_TILE_VALUE
    lowest_value: int = LOWEST_TILE_VALUE

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.rows}x{self.cols}")
        if self.rows * self.cols < STARTING_TILES:
            raise ValueError(
                f"A {self.rows}x{self.cols} board cannot hold the {STARTING_TILES} starting tiles"
            )
        if self.lowest_value <= 0:
            raise ValueError(f"Lowest tile value must be positive, got {self.lowest_value}")
        if not is_on_ladder(self.max_value, self.lowest_value):
            raise ValueError(
                f"max_value {self.max_value} is not a power-of-two multiple of {self.lowest_value}"
            )

    @property
    def capacity(self) -> int:
        return self.rows * self.cols

    @property
    def max_power(self) -> int:
        return power_for_value(self.max_value, self.lowest_value)
