from catalog.models import MovieRecord
from catalog.loader import CatalogLoadError, load_movies_from_json
from catalog.store import Catalog, MovieSource
from catalog.search import SearchCriteria, SearchResolver

__all__ = [
    'Catalog',
    'CatalogLoadError',
    'MovieRecord',
    'MovieSource',
    'SearchCriteria',
    'SearchResolver',
    'load_movies_from_json',
]
