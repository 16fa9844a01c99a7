from dataclasses import dataclass

@dataclass(slots=True)
class Duration:
    """Animation length in seconds."""
    value: float
