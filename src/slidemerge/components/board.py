from dataclasses import dataclass, field
from typing import List, Optional

@dataclass(slots=True)
class Board:
    """Indexed grid storage: ``cells[y][x]`` holds the tile entity or None.

    x is the column, y is the row with row 0 at the top.
    """
    rows: int
    cols: int
    max_value: int
    lowest_value: int
    cells: List[List[Optional[int]]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.cells:
            self.cells = [[None] * self.cols for _ in range(self.rows)]

    @property
    def capacity(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.cols and 0 <= y < self.rows

    def occupied_count(self) -> int:
        return sum(1 for row in self.cells for entity in row if entity is not None)
