from dataclasses import dataclass

@dataclass(slots=True)
class Score:
    points: int = 0
