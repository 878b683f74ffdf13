from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, make_response, request
import time
import functools


REQUEST_COUNT = Counter(
    'movie_catalog_request_count',
    'Total Flask Request Count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'movie_catalog_request_duration_seconds',
    'Flask Request Duration',
    ['method', 'endpoint']
)


SEARCH_QUERY_COUNT = Counter(
    'movie_catalog_search_queries_total',
    'Total search queries',
    ['surface']
)

SEARCH_RESULTS_COUNT = Histogram(
    'movie_catalog_search_results',
    'Number of search results returned',
    buckets=(0, 1, 2, 5, 10, 25, 50, 100, 250, 1000)
)

INVALID_SEARCH_COUNT = Counter(
    'movie_catalog_invalid_searches_total',
    'Searches rejected because of invalid parameters',
    ['surface']
)


MOVIE_VIEWS = Counter(
    'movie_catalog_movie_views_total',
    'Total movie detail page views',
    ['movie_id']
)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = make_response(f(*args, **kwargs))

            # Track metrics
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=response.status_code
            ).inc()

            duration = time.time() - start_time
            REQUEST_DURATION.labels(
                method=request.method,
                endpoint=f.__name__
            ).observe(duration)

            return response

        except Exception:
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=500
            ).inc()
            raise

    return wrapper


def metrics_endpoint():
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)
