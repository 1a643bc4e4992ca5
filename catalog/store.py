"""In-memory movie catalog built once at startup"""
import logging
from types import MappingProxyType
from typing import Optional, Protocol, Sequence

from catalog.loader import CatalogLoadError, load_movies_from_json
from catalog.models import MovieRecord

logger = logging.getLogger(__name__)


class MovieSource(Protocol):
    """Read-only view of a movie collection"""

    def get_all_movies(self) -> Sequence[MovieRecord]:
        ...

    def get_movie_by_id(self, movie_id) -> Optional[MovieRecord]:
        ...


class Catalog:
    """
    Ordered movie collection plus an id index.

    The index is derived from the sequence here and nothing mutates either
    afterwards, so reads need no locking.
    """

    def __init__(self, movies=()):
        self._movies = tuple(movies)

        index = {}
        for movie in self._movies:
            if movie.id <= 0:
                raise ValueError(f'Movie id must be positive, got {movie.id}')
            if movie.id in index:
                raise ValueError(f'Duplicate movie id {movie.id}')
            index[movie.id] = movie
        self._by_id = MappingProxyType(index)

    @classmethod
    def from_json_file(cls, filepath):
        """Build from the data file; an unloadable file gives an empty catalog"""
        try:
            movies = load_movies_from_json(filepath)
        except CatalogLoadError as e:
            logger.error('Failed to load movies, starting with an empty catalog: %s', e)
            return cls()
        return cls(movies)

    def __len__(self):
        return len(self._movies)

    def get_all_movies(self):
        return self._movies

    def get_movie_by_id(self, movie_id):
        if movie_id is None or movie_id <= 0:
            return None
        return self._by_id.get(movie_id)

    def get_all_genres(self):
        """Distinct genres, sorted case-sensitively"""
        return sorted({movie.genre for movie in self._movies})
