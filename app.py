from flask import Flask, jsonify, request, render_template, redirect, url_for
from config import Config
import logging
import time

from database.movie_catalog import MovieCatalog
from database.review_store import ReviewStore
from search_criteria import SearchCriteria, InvalidSearchParameter
from services.catalog_check import check_catalog
from services.movie_icons import get_movie_icon

from metrics import (
    metrics_endpoint, track_request,
    SEARCH_QUERY_COUNT, SEARCH_RESULTS_COUNT,
    INVALID_SEARCH_COUNT, MOVIE_VIEWS
)


def log_level(name):
    """Numeric logging level for a level name, INFO when the name is unknown"""
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


logging.basicConfig(
    level=log_level(Config.LOG_LEVEL),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


INVALID_ID_PAGE_MESSAGE = 'Shiver me timbers! The movie id must be a positive number, ye landlubber!'
INVALID_ID_API_MESSAGE = 'Arrr! Movie id must be a positive number, ye landlubber!'


def page_search_message(count):
    if count == 0:
        return 'Arrr! No treasures found matching yer search, matey! Try different search terms.'
    return f"Ahoy! Found {count} movie treasure{'' if count == 1 else 's'} for ye, me hearty!"


def api_search_message(count):
    if count == 0:
        return 'Arrr! No treasures found, matey!'
    return f"Ahoy! Found {count} movie treasure{'' if count == 1 else 's'}!"


def error_page(title, message, status_code=200):
    return render_template('error.html', title=title, message=message), status_code


def create_app(catalog=None, reviews=None, config=None):
    """
    Build the Flask application.

    The movie catalog and review store are loaded once from the configured
    JSON files unless passed in; both are read-only afterwards and shared by
    every request.
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    if catalog is None:
        catalog = MovieCatalog.from_json_file(app.config['MOVIES_DATA_PATH'])
    if reviews is None:
        reviews = ReviewStore.from_json_file(app.config['REVIEWS_DATA_PATH'])

    app.extensions['movie_catalog'] = catalog
    app.extensions['review_store'] = reviews

    @app.route('/')
    def home():
        return redirect(url_for('movies_list'))

    @app.route('/health')
    @track_request
    def health():
        return jsonify({
            'status': 'healthy',
            'service': 'movie-catalog',
            'version': app.config['APP_VERSION']
        }), 200

    @app.route('/check/catalog')
    def check_catalog_endpoint():
        result = check_catalog(catalog, reviews)
        status_code = 200 if result['status'] == 'healthy' else 503
        return jsonify(result), status_code

    @app.route('/movies')
    @track_request
    def movies_list():
        logger.info("Fetching movies")
        return render_template('movies.html', movies=catalog.get_all())

    @app.route('/movies/search')
    @track_request
    def movies_search():
        logger.info(f"Movie search requested with parameters - name: '{request.args.get('name')}', "
                    f"id: {request.args.get('id')}, genre: '{request.args.get('genre')}'")

        try:
            criteria = SearchCriteria.from_args(request.args)
        except InvalidSearchParameter as e:
            logger.warning(f"Invalid movie search parameters: {e}")
            INVALID_SEARCH_COUNT.labels(surface='page').inc()
            return error_page('Invalid Search Parameters', INVALID_ID_PAGE_MESSAGE, 400)

        SEARCH_QUERY_COUNT.labels(surface='page').inc()
        if criteria.is_empty():
            logger.info("No search criteria provided, returning all movies")

        try:
            results = catalog.search(criteria.name, criteria.movie_id, criteria.genre)
        except Exception as e:
            logger.exception(f"Error during movie search: {e}")
            return error_page(
                'Search Error',
                f'Batten down the hatches! Something went wrong during the treasure hunt: {e}',
                500
            )

        SEARCH_RESULTS_COUNT.observe(len(results))
        logger.info(f"Found {len(results)} movies matching the search criteria")

        return render_template(
            'movies.html',
            movies=results,
            search_message=page_search_message(len(results)),
            search_performed=True,
            **criteria.form_values()
        )

    @app.route('/api/movies/search')
    @track_request
    def api_movies_search():
        logger.info(f"API movie search requested with name: '{request.args.get('name')}', "
                    f"id: {request.args.get('id')}, genre: '{request.args.get('genre')}'")

        try:
            criteria = SearchCriteria.from_args(request.args)
        except InvalidSearchParameter as e:
            logger.warning(f"Invalid movie search parameters provided to API: {e}")
            INVALID_SEARCH_COUNT.labels(surface='api').inc()
            return jsonify({'error': INVALID_ID_API_MESSAGE}), 400

        SEARCH_QUERY_COUNT.labels(surface='api').inc()
        if criteria.is_empty():
            logger.info("No search criteria provided, returning all movies")

        try:
            results = catalog.search(criteria.name, criteria.movie_id, criteria.genre)
        except Exception as e:
            logger.exception(f"Error during API movie search: {e}")
            return jsonify({
                'error': f'Shiver me timbers! Error during treasure hunt: {e}',
                'timestamp': int(time.time() * 1000)
            }), 500

        SEARCH_RESULTS_COUNT.observe(len(results))
        logger.info(f"API movie search complete, found {len(results)} movies")

        return jsonify({
            'movies': [movie.to_dict() for movie in results],
            'totalCount': len(results),
            'message': api_search_message(len(results))
        })

    @app.route('/movies/<int(signed=True):movie_id>/details')
    @track_request
    def movie_details(movie_id):
        logger.info(f"Fetching details for movie ID: {movie_id}")

        movie = catalog.get_by_id(movie_id)
        if movie is None:
            logger.warning(f"Movie with ID {movie_id} not found")
            return error_page('Movie Not Found', f'Movie with ID {movie_id} was not found.')

        MOVIE_VIEWS.labels(movie_id=movie.id).inc()

        return render_template(
            'movie_details.html',
            movie=movie,
            movie_icon=get_movie_icon(movie.title),
            reviews=reviews.get_reviews_for_movie(movie.id)
        )

    @app.route('/metrics')
    @track_request
    def metrics():
        return metrics_endpoint()

    @app.errorhandler(404)
    def page_not_found(e):
        return error_page('Page Not Found', 'The page you requested does not exist.', 404)

    return app


app = create_app()


if __name__ == '__main__':
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
