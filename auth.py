"""Shared-secret cookie authentication for the admin panel"""
import hmac
import logging
import secrets

from flask import current_app, request

logger = logging.getLogger(__name__)

LOGIN_PATH = '/admin/login'


def _matches(submitted, expected):
    if not submitted or not expected:
        return False
    return hmac.compare_digest(submitted.encode('utf-8'), expected.encode('utf-8'))


def ensure_cookie_secret(app):
    """Fall back to a random secret so a missing setting never opens the panel"""
    if not app.config.get('SECRET_COOKIE_VALUE'):
        logger.warning("SECRET_COOKIE_VALUE is not set, using a random secret for this process")
        app.config['SECRET_COOKIE_VALUE'] = secrets.token_urlsafe(32)


def check_credentials(username, password):
    config = current_app.config
    # Evaluate both so timing does not reveal which one failed
    user_ok = _matches(username, config.get('ADMIN_USERNAME'))
    password_ok = _matches(password, config.get('ADMIN_PASSWORD'))
    return user_ok and password_ok


def is_logged_in():
    config = current_app.config
    return _matches(
        request.cookies.get(config['AUTH_COOKIE_NAME']),
        config['SECRET_COOKIE_VALUE']
    )


def requires_login(path):
    """Every /admin* path except the login page is gated"""
    return path.startswith('/admin') and path != LOGIN_PATH


def set_auth_cookie(response):
    config = current_app.config
    response.set_cookie(
        config['AUTH_COOKIE_NAME'],
        config['SECRET_COOKIE_VALUE'],
        max_age=config['AUTH_COOKIE_MAX_AGE'],
        path='/',
        httponly=True,
        samesite='Lax'
    )
    return response


def clear_auth_cookie(response):
    response.delete_cookie(current_app.config['AUTH_COOKIE_NAME'], path='/')
    return response
