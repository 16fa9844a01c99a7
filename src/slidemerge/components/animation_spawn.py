from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class SpawnAnimation:
    """Entry animation for a freshly spawned tile; linear runs 0 -> 1."""
    pos: Tuple[int,int]
    linear: float = 0.0
