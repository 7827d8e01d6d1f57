from flask import Blueprint, Flask, Response, current_app, jsonify, redirect, request
from config import Config
import logging

from auth import (
    check_credentials, clear_auth_cookie, ensure_cookie_secret,
    is_logged_in, requires_login, set_auth_cookie, LOGIN_PATH
)
from database.memory_store import MemoryMovieStore
from database.movie_store import MovieStore, get_redis_client
from forms import movie_from_form, updated_movie
from services.redis_check import check_redis
import views

from metrics import (
    metrics_endpoint, track_request,
    MOVIE_VIEWS, LOGIN_ATTEMPTS, MOVIE_CHANGES
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


catalog = Blueprint('catalog', __name__)


def text_response(body, status):
    return Response(body, status=status, mimetype='text/plain')


def see_other(location):
    return redirect(location, code=303)


def get_store():
    return current_app.extensions['movie_store']


def build_store(config):
    backend = config['STORE_BACKEND']
    if backend == 'memory':
        logger.warning("Using in-memory movie store, data is lost on restart")
        return MemoryMovieStore()
    if backend != 'redis':
        raise ValueError(f"Unknown STORE_BACKEND: {backend}")
    return MovieStore(get_redis_client(
        host=config['REDIS_HOST'],
        port=config['REDIS_PORT'],
        db=config['REDIS_DB']
    ))


@catalog.before_app_request
def require_admin_login():
    if requires_login(request.path) and not is_logged_in():
        return see_other(LOGIN_PATH)


@catalog.app_errorhandler(404)
def not_found(error):
    return text_response('404: Page not found', 404)


@catalog.app_errorhandler(405)
def method_not_allowed(error):
    # Only the dashboard answers a wrong method with 405
    if request.path == '/admin':
        return text_response('Method Not Allowed', 405)
    return not_found(error)


@catalog.route('/')
@track_request
def home():
    return views.render_index(get_store().list_all())


@catalog.route('/movie/<movie_id>')
@track_request
def movie_detail(movie_id):
    movie = get_store().get_by_id(movie_id)

    if movie is None:
        return text_response('Movie not found', 404)

    MOVIE_VIEWS.inc()
    return views.render_movie_detail(movie)


@catalog.route('/admin/login', methods=['GET', 'POST'])
@track_request
def login():
    if request.method == 'GET':
        return views.render_login(error='error' in request.args)

    username = request.form.get('username', '')
    password = request.form.get('password', '')

    if check_credentials(username, password):
        LOGIN_ATTEMPTS.labels(result='success').inc()
        logger.info("Admin logged in")
        return set_auth_cookie(see_other('/admin'))

    LOGIN_ATTEMPTS.labels(result='failure').inc()
    logger.warning(f"Failed admin login for username {username!r}")
    return see_other(f"{LOGIN_PATH}?error=1")


@catalog.route('/logout', methods=['GET', 'POST'])
@track_request
def logout():
    return clear_auth_cookie(see_other(LOGIN_PATH))


@catalog.route('/admin')
@track_request
def admin_dashboard():
    return views.render_admin_list(get_store().list_all())


@catalog.route('/admin/add', methods=['GET', 'POST'])
@track_request
def admin_add():
    if request.method == 'GET':
        return views.render_add_form()

    movie = movie_from_form(request.form)
    get_store().upsert(movie)
    MOVIE_CHANGES.labels(action='create').inc()
    return see_other('/admin')


@catalog.route('/admin/edit/<movie_id>', methods=['GET', 'POST'])
@track_request
def admin_edit(movie_id):
    store = get_store()
    movie = store.get_by_id(movie_id)

    if movie is None:
        return text_response('Not Found', 404)

    if request.method == 'GET':
        return views.render_edit_form(movie)

    store.upsert(updated_movie(movie, request.form))
    MOVIE_CHANGES.labels(action='update').inc()
    return see_other('/admin')


@catalog.route('/admin/delete/<movie_id>', methods=['POST'])
@track_request
def admin_delete(movie_id):
    get_store().delete_by_id(movie_id)
    MOVIE_CHANGES.labels(action='delete').inc()
    return see_other('/admin')


@catalog.route('/health')
@track_request
def health():
    return jsonify({
        'status': 'healthy',
        'service': 'movie-catalog',
        'version': '1.0.0'
    }), 200


@catalog.route('/check/redis')
def check_redis_endpoint():
    config = current_app.config
    result = check_redis(
        host=config['REDIS_HOST'],
        port=config['REDIS_PORT'],
        db=config['REDIS_DB']
    )
    status_code = 200 if result['status'] == 'healthy' else 503
    return jsonify(result), status_code


@catalog.route('/metrics')
@track_request
def metrics():
    return metrics_endpoint()


def create_app(config_overrides=None, store=None):
    """
    Build the application.

    Args:
        config_overrides: dict applied on top of Config
        store: movie store to use instead of the configured backend
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    ensure_cookie_secret(app)
    app.extensions['movie_store'] = store if store is not None else build_store(app.config)
    app.register_blueprint(catalog)

    return app


app = create_app()


if __name__ == '__main__':
    app.run(
        host=Config.FLASK_HOST,
        port=Config.FLASK_PORT,
        debug=Config.FLASK_DEBUG
    )
