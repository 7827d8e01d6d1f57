#!/usr/bin/env python3
"""Load movies from a JSON file into the configured store"""
import json
import logging
import os
import sys
import time
import uuid

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from database.movie_store import Movie  # noqa: E402

logger = logging.getLogger(__name__)


def load_movies_from_file(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def to_movie(entry, now=None):
    """Fill in id and createdAt for entries that lack them"""
    data = dict(entry)
    data.setdefault("id", str(uuid.uuid4()))
    data.setdefault("createdAt", now if now is not None else time.time())
    return Movie.from_dict(data)


def import_movies(store, entries):
    now = time.time()
    count = 0

    # Later entries get later timestamps
    for offset, entry in enumerate(entries):
        store.upsert(to_movie(entry, now=now + offset * 0.001))
        count += 1

    logger.info(f"Imported {count} movies")
    return count


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("Usage: import_movies.py <movies.json>", file=sys.stderr)
        return 2

    from app import build_store
    from config import Config

    store = build_store({
        "STORE_BACKEND": Config.STORE_BACKEND,
        "REDIS_HOST": Config.REDIS_HOST,
        "REDIS_PORT": Config.REDIS_PORT,
        "REDIS_DB": Config.REDIS_DB,
    })
    import_movies(store, load_movies_from_file(argv[0]))
    return 0


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    sys.exit(main())
