import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from catalog import Catalog, MovieRecord


def make_movie(movie_id, name, genre, **overrides):
    fields = {
        'id': movie_id,
        'name': name,
        'director': 'Test Director',
        'year': 2000,
        'genre': genre,
        'description': f'{name} description',
        'duration_minutes': 120,
        'rating': 4.0,
    }
    fields.update(overrides)
    return MovieRecord(**fields)


@pytest.fixture
def movies():
    return [
        make_movie(1, 'The Prison Escape', 'Drama'),
        make_movie(2, 'The Masked Hero', 'Action/Crime'),
        make_movie(3, 'The Family Boss', 'Crime/Drama'),
        make_movie(4, 'Space Voyage', 'Adventure/Sci-Fi'),
        make_movie(5, 'Coastal Drift', 'Drama'),
    ]


@pytest.fixture
def catalog(movies):
    return Catalog(movies)


@pytest.fixture
def client(catalog):
    from app import create_app

    flask_app = create_app(catalog)
    flask_app.config['TESTING'] = True
    return flask_app.test_client()
