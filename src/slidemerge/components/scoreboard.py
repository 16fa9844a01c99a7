from dataclasses import dataclass

@dataclass(slots=True)
class Scoreboard:
    """Display state for the score text and the game-over panel."""
    score_text: str = "0"
    game_over_visible: bool = False
    last_delta: int = 0
