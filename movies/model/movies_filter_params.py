from typing import Optional
from dataclasses import dataclass


@dataclass
class MoviesFilterParams:
    genre: Optional[str] = None
