"""Search movies by name, id and genre"""
import logging
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)


def _clean(text):
    """Trimmed lower-case text, or None when blank"""
    if text is None:
        return None
    text = text.strip()
    return text.lower() if text else None


@dataclass(frozen=True)
class SearchCriteria:
    name: Optional[str] = None
    movie_id: Optional[int] = None
    genre: Optional[str] = None

    @property
    def usable_id(self):
        if isinstance(self.movie_id, bool) or not isinstance(self.movie_id, int):
            return None
        return self.movie_id if self.movie_id > 0 else None

    @property
    def name_needle(self):
        return _clean(self.name)

    @property
    def genre_needle(self):
        return _clean(self.genre)

    def is_empty(self):
        return self.usable_id is None and self.name_needle is None and self.genre_needle is None


class SearchResolver:
    """
    Resolves search criteria against a movie source.

    A usable id wins over everything else: the lookup result (or nothing) is
    returned and name/genre are never looked at. Otherwise movies are kept in
    source order when the name contains the needle and the genre equals the
    requested one, both case-insensitively.
    """

    def __init__(self, source):
        self.source = source

    def search(self, name=None, movie_id=None, genre=None):
        return self.resolve(SearchCriteria(name=name, movie_id=movie_id, genre=genre))

    def resolve(self, criteria):
        logger.info(
            "Searching movies - name: %r, id: %r, genre: %r",
            criteria.name, criteria.movie_id, criteria.genre
        )

        try:
            results = self._resolve(criteria)
        except Exception:
            logger.exception('Search failed, returning no results')
            return []

        if not results:
            logger.info('No movies matched the search criteria')
        else:
            logger.info('Found %d movies matching the search', len(results))
        return results

    def _resolve(self, criteria):
        movie_id = criteria.usable_id
        if movie_id is not None:
            movie = self.source.get_movie_by_id(movie_id)
            if movie is None:
                logger.warning('No movie found with id %d', movie_id)
                return []
            return [movie]

        name = criteria.name_needle
        genre = criteria.genre_needle

        return [
            movie
            for movie in self.source.get_all_movies()
            if (name is None or name in movie.name.lower())
            and (genre is None or movie.genre.lower() == genre)
        ]
