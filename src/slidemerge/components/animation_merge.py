from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class MergeAnimation:
    """Upgrade pop played at the cell of a merge result."""
    pos: Tuple[int,int]
    linear: float = 0.0
