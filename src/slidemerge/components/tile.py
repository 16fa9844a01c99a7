from dataclasses import dataclass

@dataclass(slots=True)
class Tile:
    """Logical tile data (no visual state).

    power indexes the tile ladder (value = lowest * 2**power) and is what merge
    eligibility compares. upgraded_this_turn marks a merge result until the engine
    readies tiles for the next input phase.
    """
    value: int
    power: int
    upgraded_this_turn: bool = False
