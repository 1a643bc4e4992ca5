import pytest

from catalog import Catalog, SearchCriteria, SearchResolver
from conftest import make_movie


@pytest.fixture
def resolver(catalog):
    return SearchResolver(catalog)


def ids(movies):
    return [m.id for m in movies]


class StubSource:
    """Records lookups so tests can see which path the resolver took"""

    def __init__(self, movies):
        self.movies = list(movies)
        self.lookups = []
        self.listed = 0

    def get_all_movies(self):
        self.listed += 1
        return self.movies

    def get_movie_by_id(self, movie_id):
        self.lookups.append(movie_id)
        return next((m for m in self.movies if m.id == movie_id), None)


class BrokenSource:
    def get_all_movies(self):
        raise RuntimeError('catalog corrupted')

    def get_movie_by_id(self, movie_id):
        raise RuntimeError('catalog corrupted')


def test_scenario_from_two_movies():
    resolver = SearchResolver(Catalog([
        make_movie(1, 'The Prison Escape', 'Drama'),
        make_movie(2, 'The Masked Hero', 'Action/Crime'),
    ]))

    assert ids(resolver.search(name='hero')) == [2]
    assert ids(resolver.search(genre='Drama')) == [1]
    assert ids(resolver.search(movie_id=1, genre='Action/Crime')) == [1]
    assert resolver.search(movie_id=999) == []


@pytest.mark.parametrize('name', ['prison', 'PRISON', '  Prison  ', 'Prison'])
def test_name_is_partial_and_case_insensitive(resolver, name):
    assert ids(resolver.search(name=name)) == [1]


def test_name_keeps_interior_whitespace(resolver):
    assert ids(resolver.search(name='prison escape')) == [1]
    assert resolver.search(name='prison  escape') == []


def test_name_matches_many_in_catalog_order(resolver):
    assert ids(resolver.search(name='the')) == [1, 2, 3]


def test_name_not_found(resolver):
    assert resolver.search(name='NonExistentMovie') == []


def test_genre_is_exact_not_substring():
    resolver = SearchResolver(Catalog([make_movie(1, 'The Family Boss', 'Crime/Drama')]))

    assert resolver.search(genre='Crime') == []
    assert ids(resolver.search(genre='Crime/Drama')) == [1]
    assert ids(resolver.search(genre='crime/drama')) == [1]
    assert ids(resolver.search(genre='  CRIME/DRAMA ')) == [1]


def test_genre_matches_in_catalog_order(resolver):
    assert ids(resolver.search(genre='drama')) == [1, 5]


def test_name_and_genre_must_both_match(resolver):
    assert ids(resolver.search(name='The', genre='Drama')) == [1]
    assert resolver.search(name='Hero', genre='Drama') == []


def test_id_wins_over_contradicting_criteria(resolver, catalog):
    for movie in catalog.get_all_movies():
        assert resolver.search(name='AnythingElse', movie_id=movie.id, genre='AnyGenre') == [movie]


def test_missing_id_returns_empty_without_filtering():
    source = StubSource([make_movie(1, 'The Prison Escape', 'Drama')])

    assert SearchResolver(source).search(name='Prison', movie_id=42) == []
    assert source.lookups == [42]
    assert source.listed == 0


@pytest.mark.parametrize('movie_id', [None, 0, -3])
def test_unusable_id_falls_back_to_filter(movie_id):
    source = StubSource([
        make_movie(1, 'The Prison Escape', 'Drama'),
        make_movie(2, 'The Masked Hero', 'Action/Crime'),
    ])

    results = SearchResolver(source).search(name='hero', movie_id=movie_id)

    assert ids(results) == [2]
    assert source.lookups == []


@pytest.mark.parametrize('name, genre', [
    (None, None),
    ('', ''),
    ('   ', '   '),
    ('', None),
    (None, '\t'),
])
def test_blank_criteria_return_everything(resolver, movies, name, genre):
    assert resolver.search(name=name, genre=genre) == movies


def test_search_is_repeatable(resolver):
    first = resolver.search(name='the', genre=None)
    second = resolver.search(name='the', genre=None)

    assert ids(first) == ids(second)


def test_empty_catalog_returns_nothing():
    resolver = SearchResolver(Catalog())

    assert resolver.search() == []
    assert resolver.search(name='anything') == []
    assert resolver.search(movie_id=1) == []


def test_internal_error_gives_no_results():
    resolver = SearchResolver(BrokenSource())

    assert resolver.search(name='anything') == []
    assert resolver.search(movie_id=1) == []


def test_criteria_usable_id():
    assert SearchCriteria(movie_id=3).usable_id == 3
    assert SearchCriteria(movie_id=0).usable_id is None
    assert SearchCriteria(movie_id=-1).usable_id is None
    assert SearchCriteria(movie_id=True).usable_id is None
    assert SearchCriteria().usable_id is None


def test_criteria_is_empty():
    assert SearchCriteria().is_empty()
    assert SearchCriteria(name='  ', movie_id=0, genre='').is_empty()
    assert not SearchCriteria(name='x').is_empty()
    assert not SearchCriteria(movie_id=1).is_empty()
    assert not SearchCriteria(genre='Drama').is_empty()
