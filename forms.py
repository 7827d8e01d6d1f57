from dataclasses import replace

from database.movie_store import Movie


def parse_screenshots(raw):
    """Split a comma-separated URL list, dropping blanks"""
    if not raw:
        return []
    return [url.strip() for url in raw.split(',') if url.strip()]


def movie_fields(form):
    """
    Read the movie form.

    Missing required fields raise werkzeug's BadRequestKeyError (400).
    """
    return {
        'title': form['title'],
        'poster': form['poster'],
        'review': form['review'],
        'screenshots': parse_screenshots(form.get('screenshots', '')),
        'download_url': form['downloadUrl']
    }


def movie_from_form(form):
    return Movie.new(**movie_fields(form))


def updated_movie(existing, form):
    """Replace every editable field; id and created_at are kept"""
    return replace(existing, **movie_fields(form))
