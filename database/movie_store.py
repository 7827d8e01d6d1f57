"""Movie persistence on top of Redis"""
import json
import logging
import time
import uuid
from dataclasses import dataclass, field

import redis

from config import Config

logger = logging.getLogger(__name__)

NAMESPACE = 'movies'


@dataclass
class Movie:
    id: str
    title: str
    poster: str
    review: str
    screenshots: list = field(default_factory=list)
    download_url: str = ''
    created_at: float = 0.0

    @classmethod
    def new(cls, title, poster, review, screenshots, download_url):
        """Create a movie with a fresh random id and creation timestamp"""
        return cls(
            id=str(uuid.uuid4()),
            title=title,
            poster=poster,
            review=review,
            screenshots=list(screenshots),
            download_url=download_url,
            created_at=time.time()
        )

    def to_dict(self):
        return {
            'id': self.id,
            'title': self.title,
            'poster': self.poster,
            'review': self.review,
            'screenshots': list(self.screenshots),
            'downloadUrl': self.download_url,
            'createdAt': self.created_at
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data['id'],
            title=data.get('title', ''),
            poster=data.get('poster', ''),
            review=data.get('review', ''),
            screenshots=list(data.get('screenshots') or []),
            download_url=data.get('downloadUrl', ''),
            created_at=float(data.get('createdAt') or 0)
        )


def movie_key(movie_id):
    """Key for a movie record: the two-part key ("movies", id)"""
    return f"{NAMESPACE}:{movie_id}"


def newest_first(movies):
    return sorted(movies, key=lambda m: (m.created_at, m.id), reverse=True)


def get_redis_client(host=None, port=None, db=None):
    """Create Redis client with its own connection pool"""
    return redis.Redis(
        host=host or Config.REDIS_HOST,
        port=port or Config.REDIS_PORT,
        db=db if db is not None else Config.REDIS_DB,
        decode_responses=True,
        socket_timeout=5
    )


class MovieStore:
    """
    Movie records stored as JSON strings under ``movies:<id>``.

    Every call is a round trip to Redis. Errors raised by the client
    are not caught here.
    """

    def __init__(self, client=None):
        self.client = client if client is not None else get_redis_client()

    def list_all(self):
        """
        Get every movie in the namespace

        Returns:
            list: Movie objects, newest first
        """
        keys = list(self.client.scan_iter(match=f"{NAMESPACE}:*"))
        if not keys:
            return []

        movies = []
        # Keys may vanish between SCAN and MGET
        for raw in self.client.mget(keys):
            if raw:
                movies.append(Movie.from_dict(json.loads(raw)))

        return newest_first(movies)

    def get_by_id(self, movie_id):
        """
        Get one movie

        Returns:
            Movie or None if no record exists
        """
        raw = self.client.get(movie_key(movie_id))
        if raw is None:
            return None
        return Movie.from_dict(json.loads(raw))

    def upsert(self, movie):
        """Write the full record, replacing whatever was stored before"""
        self.client.set(movie_key(movie.id), json.dumps(movie.to_dict()))
        logger.info(f"Saved movie {movie.id} ({movie.title!r})")

    def delete_by_id(self, movie_id):
        """
        Remove a movie. Missing ids are ignored.

        Returns:
            bool: True if a record was removed
        """
        removed = self.client.delete(movie_key(movie_id)) > 0
        if removed:
            logger.info(f"Deleted movie {movie_id}")
        else:
            logger.info(f"Delete of missing movie {movie_id} ignored")
        return removed
