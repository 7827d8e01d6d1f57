import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from app import create_app  # noqa: E402
from database.memory_store import MemoryMovieStore  # noqa: E402
from database.movie_store import Movie  # noqa: E402

ADMIN_USERNAME = 'admin'
ADMIN_PASSWORD = 'hunter2'
SECRET = 'test-cookie-secret'


@pytest.fixture
def store():
    return MemoryMovieStore()


@pytest.fixture
def app(store):
    return create_app({
        'TESTING': True,
        'ADMIN_USERNAME': ADMIN_USERNAME,
        'ADMIN_PASSWORD': ADMIN_PASSWORD,
        'SECRET_COOKIE_VALUE': SECRET,
    }, store=store)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_client(app):
    client = app.test_client()
    client.set_cookie('auth', SECRET)
    return client


@pytest.fixture
def inception():
    return Movie(
        id='m-1',
        title='Inception',
        poster='https://x/p.jpg',
        review='Great',
        screenshots=['https://x/1.jpg', 'https://x/2.jpg'],
        download_url='https://x/d.mp4',
        created_at=100.0
    )
