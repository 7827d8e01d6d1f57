from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST
from flask import Response, make_response, request
from werkzeug.exceptions import HTTPException
import time
import functools


REQUEST_COUNT = Counter(
    'movie_catalog_request_count',
    'Total request count',
    ['method', 'endpoint', 'http_status']
)

REQUEST_DURATION = Histogram(
    'movie_catalog_request_duration_seconds',
    'Request duration',
    ['method', 'endpoint']
)


MOVIE_VIEWS = Counter(
    'movie_catalog_movie_views_total',
    'Total movie detail page views'
)

LOGIN_ATTEMPTS = Counter(
    'movie_catalog_login_attempts_total',
    'Admin login attempts',
    ['result']
)

MOVIE_CHANGES = Counter(
    'movie_catalog_movie_changes_total',
    'Movies created, updated or deleted from the admin panel',
    ['action']
)


def track_request(f):
    @functools.wraps(f)
    def wrapper(*args, **kwargs):
        start_time = time.time()

        try:
            response = make_response(f(*args, **kwargs))
            status_code = response.status_code

            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=status_code
            ).inc()

            duration = time.time() - start_time
            REQUEST_DURATION.labels(
                method=request.method,
                endpoint=f.__name__
            ).observe(duration)

            return response

        except HTTPException as e:
            REQUEST_COUNT.labels(
                method=request.method,
                endpoint=f.__name__,
                http_status=e.code
            ).inc()
            raise

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
