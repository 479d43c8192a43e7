from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Movie:
    id: str
    title: str
    year: int
    director: str
    duration: int
    poster: str
    genre: Tuple[str, ...] = field(default_factory=tuple)
    rate: float = 5

    def __post_init__(self):
        object.__setattr__(self, "genre", tuple(self.genre))
