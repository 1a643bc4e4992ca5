"""Movie record model"""
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class MovieRecord:
    id: int
    name: str
    director: str
    year: int
    genre: str
    description: str
    duration_minutes: int
    rating: float

    def to_dict(self):
        """JSON-safe representation used by the API"""
        return asdict(self)
