"""In-process movie store for tests and local development"""
import copy
import logging

from database.movie_store import newest_first

logger = logging.getLogger(__name__)


class MemoryMovieStore:
    """Same contract as MovieStore, backed by a dict"""

    def __init__(self, movies=None):
        self._movies = {}
        for movie in movies or []:
            self.upsert(movie)

    def list_all(self):
        return newest_first(copy.deepcopy(m) for m in self._movies.values())

    def get_by_id(self, movie_id):
        movie = self._movies.get(movie_id)
        return copy.deepcopy(movie) if movie is not None else None

    def upsert(self, movie):
        # Copies keep callers from mutating stored records in place
        self._movies[movie.id] = copy.deepcopy(movie)
        logger.info(f"Saved movie {movie.id} ({movie.title!r})")

    def delete_by_id(self, movie_id):
        removed = self._movies.pop(movie_id, None) is not None
        if removed:
            logger.info(f"Deleted movie {movie_id}")
        return removed

    def __len__(self):
        return len(self._movies)
