from flask import Blueprint, Flask, current_app, jsonify, redirect, render_template, request, url_for
from config import Config
import logging

from catalog import Catalog, SearchCriteria, SearchResolver

from metrics import (
    metrics_endpoint, track_request,
    CATALOG_SIZE, SEARCH_QUERY_COUNT, SEARCH_RESULTS_COUNT,
    MOVIE_VIEWS
)

logging.basicConfig(
    level=Config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


movies_bp = Blueprint('movies', __name__)


class InvalidMovieId(ValueError):
    pass


def get_catalog():
    return current_app.extensions['catalog']


def get_resolver():
    return current_app.extensions['search_resolver']


def parse_movie_id(raw):
    """
    Parse the optional 'id' query parameter

    Returns:
        int or None when the parameter is absent/blank

    Raises:
        InvalidMovieId: value is not an integer
    """
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise InvalidMovieId(raw)


def search_criteria_from_request():
    return SearchCriteria(
        name=request.args.get('name'),
        movie_id=parse_movie_id(request.args.get('id')),
        genre=request.args.get('genre')
    )


def build_search_message(result_count, name=None, movie_id=None, genre=None):
    criteria = []

    if name and name.strip():
        criteria.append(f"name containing '{name}'")
    if movie_id is not None and movie_id > 0:
        criteria.append(f"ID {movie_id}")
    if genre and genre.strip():
        criteria.append(f"genre '{genre}'")

    described = ' and '.join(criteria)

    if result_count == 0:
        return f"No movies found with {described}. Try a different search."
    if result_count == 1:
        return f"Found 1 movie with {described}."
    return f"Found {result_count} movies with {described}."


@movies_bp.route('/')
def home():
    return redirect(url_for('movies.movies_list'))


@movies_bp.route('/health')
@track_request
def health():
    return jsonify({
        'status': 'healthy',
        'service': 'movie-catalog',
        'movies': len(get_catalog())
    }), 200


@movies_bp.route('/movies')
@track_request
def movies_list():
    logger.info("Fetching movies")
    catalog = get_catalog()
    return render_template(
        'movies.html',
        movies=catalog.get_all_movies(),
        genres=catalog.get_all_genres(),
        search_performed=False,
        search_message=''
    )


@movies_bp.route('/movies/<int:movie_id>/details')
@track_request
def movie_details(movie_id):
    logger.info("Fetching details for movie ID: %s", movie_id)

    movie = get_catalog().get_movie_by_id(movie_id)

    if movie is None:
        logger.warning("Movie with ID %s not found", movie_id)
        return render_template(
            'error.html',
            title='Movie Not Found',
            message=f'Movie with ID {movie_id} was not found.'
        ), 404

    MOVIE_VIEWS.labels(movie_id=movie_id).inc()

    return render_template('movie_detail.html', movie=movie)


@movies_bp.route('/movies/search')
@track_request
def movies_search():
    catalog = get_catalog()

    try:
        criteria = search_criteria_from_request()
    except InvalidMovieId as e:
        logger.warning("Rejected search with invalid id: %r", str(e))
        return render_template(
            'error.html',
            title='Invalid Search',
            message=f"'{e}' is not a valid movie ID."
        ), 400

    SEARCH_QUERY_COUNT.labels(interface='html').inc()

    if criteria.is_empty():
        logger.warning("No search criteria provided, showing all movies")
        return render_template(
            'movies.html',
            movies=catalog.get_all_movies(),
            genres=catalog.get_all_genres(),
            search_performed=True,
            search_message='Provide a name, ID or genre to search. Showing all movies instead.'
        )

    results = get_resolver().resolve(criteria)
    SEARCH_RESULTS_COUNT.observe(len(results))

    return render_template(
        'movies.html',
        movies=results,
        genres=catalog.get_all_genres(),
        search_performed=True,
        search_message=build_search_message(len(results), criteria.name, criteria.movie_id, criteria.genre),
        search_name=criteria.name,
        search_id=criteria.movie_id,
        search_genre=criteria.genre
    )


@movies_bp.route('/api/movies')
@track_request
def api_movies():
    movies = get_catalog().get_all_movies()
    return jsonify({
        'movies': [movie.to_dict() for movie in movies],
        'count': len(movies)
    })


@movies_bp.route('/api/movies/<int:movie_id>')
@track_request
def api_movie_detail(movie_id):
    movie = get_catalog().get_movie_by_id(movie_id)

    if movie is None:
        return jsonify({'error': 'Movie not found'}), 404

    MOVIE_VIEWS.labels(movie_id=movie_id).inc()
    return jsonify(movie.to_dict())


@movies_bp.route('/api/genres')
@track_request
def api_genres():
    return jsonify({
        'genres': get_catalog().get_all_genres()
    })


@movies_bp.route('/api/movies/search')
@track_request
def api_movies_search():
    try:
        criteria = search_criteria_from_request()
    except InvalidMovieId as e:
        return jsonify({
            'success': False,
            'message': f"'{e}' is not a valid movie ID.",
            'movies': []
        }), 400

    if criteria.is_empty():
        return jsonify({
            'success': False,
            'message': 'Provide at least one search criterion: name, id or genre.',
            'movies': []
        }), 400

    SEARCH_QUERY_COUNT.labels(interface='api').inc()

    try:
        results = get_resolver().resolve(criteria)
        SEARCH_RESULTS_COUNT.observe(len(results))

        return jsonify({
            'success': True,
            'message': build_search_message(len(results), criteria.name, criteria.movie_id, criteria.genre),
            'movies': [movie.to_dict() for movie in results],
            'totalResults': len(results)
        })

    except Exception as e:
        logger.exception("Error during search")
        return jsonify({
            'success': False,
            'message': f'Search failed: {e}',
            'movies': []
        }), 500


@movies_bp.route('/metrics')
@track_request
def metrics():
    return metrics_endpoint()


def create_app(catalog=None):
    """
    Build the Flask app around a catalog

    Args:
        catalog: read-only movie catalog; loaded from Config.MOVIES_DATA_PATH when omitted
    """
    app = Flask(__name__)
    app.config.from_object(Config)

    if catalog is None:
        catalog = Catalog.from_json_file(app.config['MOVIES_DATA_PATH'])

    app.extensions['catalog'] = catalog
    app.extensions['search_resolver'] = SearchResolver(catalog)
    CATALOG_SIZE.set(len(catalog))

    app.register_blueprint(movies_bp)
    return app


app = create_app()


if __name__ == '__main__':
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
