"""Load movie records from the JSON data file"""
import json
import logging

from catalog.models import MovieRecord

logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """Data file is missing, unreadable or malformed"""


# record field -> (data file key, accepted types)
FIELDS = {
    'id': ('id', (int,)),
    'name': ('movieName', (str,)),
    'director': ('director', (str,)),
    'year': ('year', (int,)),
    'genre': ('genre', (str,)),
    'description': ('description', (str,)),
    'duration_minutes': ('duration', (int,)),
    'rating': ('imdbRating', (int, float)),
}


def parse_movie(data):
    """
    Convert one raw JSON object into a MovieRecord

    Args:
        data: dict as read from the data file

    Returns:
        MovieRecord

    Raises:
        CatalogLoadError: missing key or wrong value type
    """
    if not isinstance(data, dict):
        raise CatalogLoadError(f'Movie entry must be an object, got {type(data).__name__}')

    values = {}
    for field, (key, types) in FIELDS.items():
        if key not in data:
            raise CatalogLoadError(f"Movie entry is missing '{key}'")

        value = data[key]
        # bool is an int subclass
        if isinstance(value, bool) or not isinstance(value, types):
            raise CatalogLoadError(f"Movie entry has invalid '{key}': {value!r}")
        values[field] = value

    values['rating'] = float(values['rating'])
    return MovieRecord(**values)


def load_movies_from_json(filepath):
    """
    Read the data file (a JSON array of movie objects)

    Returns:
        list: MovieRecord in file order

    Raises:
        CatalogLoadError: on any I/O, JSON or validation problem
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except OSError as e:
        raise CatalogLoadError(f'Cannot read movie data {filepath}: {e}') from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f'Invalid JSON in {filepath}: {e}') from e

    if not isinstance(raw, list):
        raise CatalogLoadError(f'Movie data in {filepath} must be a JSON array')

    movies = []
    seen_ids = set()
    for position, data in enumerate(raw):
        try:
            movie = parse_movie(data)
        except CatalogLoadError as e:
            raise CatalogLoadError(f'Entry {position} in {filepath}: {e}') from e

        if movie.id <= 0:
            raise CatalogLoadError(f'Entry {position} in {filepath}: id must be positive, got {movie.id}')
        if movie.id in seen_ids:
            raise CatalogLoadError(f'Entry {position} in {filepath}: duplicate id {movie.id}')

        seen_ids.add(movie.id)
        movies.append(movie)

    logger.info('Loaded %d movies from %s', len(movies), filepath)
    return movies
