"""
HTML pages.

Each view is a pure function returning a full document string. Record
fields only reach the page through Markup.format, which escapes them.
"""
from urllib.parse import urlsplit

from markupsafe import Markup

STYLE = Markup("""
    body { font-family: sans-serif; margin: 0; background-color: #f4f4f4; }
    .container { max-width: 800px; margin: 20px auto; padding: 20px; background-color: white; border-radius: 8px; box-shadow: 0 2px 4px rgba(0,0,0,0.1); }
    a { color: #007bff; text-decoration: none; }
    .movie-grid { display: grid; grid-template-columns: repeat(2, 1fr); gap: 16px; }
    .movie-card img { width: 100%; border-radius: 8px; }
    .movie-card h3 { margin: 8px 0; font-size: 1rem; text-align: center; }
    .screenshots { display: flex; flex-wrap: wrap; gap: 10px; }
    .screenshots img { width: 48%; border-radius: 4px; }
    .download { display: inline-block; margin-top: 2rem; padding: 10px 15px; background: #007bff; color: white; border-radius: 5px; }
    .error { color: #dc3545; }
    .admin-row { display: flex; justify-content: space-between; align-items: center; padding: 10px; border-bottom: 1px solid #eee; }
    .admin-row form { display: inline; }
    .admin-row button { all: unset; color: red; cursor: pointer; padding-left: 5px; }
    input, textarea, button { width: 100%; padding: 12px; margin-bottom: 1rem; border-radius: 4px; border: 1px solid #ccc; box-sizing: border-box; }
    button { background-color: #007bff; color: white; cursor: pointer; border: none; font-size: 1rem; }
    .admin-nav { background-color: #343a40; padding: 1rem; text-align: center; }
    .admin-nav a { color: white; margin: 0 15px; }
""")

ADMIN_NAV = Markup("""
<div class="admin-nav">
  <a href="/admin">Dashboard</a>
  <a href="/admin/add">Add New</a>
  <a href="/logout">Logout</a>
</div>""")

SAFE_SCHEMES = ('http', 'https', '')


def safe_url(url):
    """Only http(s) and relative URLs may end up in href/src"""
    url = (url or '').strip()
    if urlsplit(url).scheme.lower() not in SAFE_SCHEMES:
        return '#'
    return url


def layout(body, title='Movie App'):
    return str(Markup("""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>{style}</style>
</head>
<body>
{body}
</body>
</html>""").format(title=title, style=STYLE, body=body))


def render_index(movies):
    cards = Markup('').join(
        Markup("""
    <a href="/movie/{id}" class="movie-card">
      <img src="{poster}" alt="{title}" />
      <h3>{title}</h3>
    </a>""").format(id=m.id, poster=safe_url(m.poster), title=m.title)
        for m in movies
    )
    if not cards:
        cards = Markup('<p>No movies have been added yet.</p>')

    body = Markup("""
<div class="container">
  <h1>Movies</h1>
  <div class="movie-grid">{cards}
  </div>
  <p style="text-align:center; margin-top:2rem;"><a href="/admin">Go to Admin Panel</a></p>
</div>""").format(cards=cards)
    return layout(body, 'All Movies')


def render_movie_detail(movie):
    shots = Markup('').join(
        Markup('<img src="{}" alt="screenshot" />').format(safe_url(url))
        for url in movie.screenshots
    )
    body = Markup("""
<div class="container">
  <h1>{title}</h1>
  <img src="{poster}" alt="{title}" style="max-width:250px; border-radius:8px;" />
  <h2>Review</h2>
  <p>{review}</p>
  <h2>Screenshots</h2>
  <div class="screenshots">{shots}</div>
  <a class="download" href="{download}">Download</a>
  <p style="margin-top: 2rem;"><a href="/">&laquo; Back to Home</a></p>
</div>""").format(
        title=movie.title,
        poster=safe_url(movie.poster),
        review=movie.review,
        shots=shots,
        download=safe_url(movie.download_url)
    )
    return layout(body, movie.title)


def render_login(error=False):
    notice = Markup('<p class="error">Invalid username or password.</p>') if error else ''
    body = Markup("""
<div class="container">
  <h1>Admin Login</h1>
  {notice}
  <form method="POST" action="/admin/login">
    <input type="text" name="username" placeholder="Username" required />
    <input type="password" name="password" placeholder="Password" required />
    <button type="submit">Login</button>
  </form>
</div>""").format(notice=notice)
    return layout(body, 'Admin Login')


def render_admin_list(movies):
    rows = Markup('').join(
        Markup("""
  <div class="admin-row">
    <span>{title}</span>
    <div>
      <a href="/admin/edit/{id}">Edit</a> |
      <form method="POST" action="/admin/delete/{id}" onsubmit="return confirm('Are you sure you want to delete this?');">
        <button type="submit">Delete</button>
      </form>
    </div>
  </div>""").format(id=m.id, title=m.title)
        for m in movies
    )
    if not rows:
        rows = Markup('<p>No movies yet.</p>')

    body = Markup("""{nav}
<div class="container">
  <h2>Movie List</h2>{rows}
</div>""").format(nav=ADMIN_NAV, rows=rows)
    return layout(body, 'Admin Dashboard')


def render_add_form():
    body = Markup("""{nav}
<div class="container">
  <h2>Add New Movie</h2>
  <form method="POST" action="/admin/add">
    <input type="text" name="title" placeholder="Movie Title" required />
    <input type="url" name="poster" placeholder="Poster URL" required />
    <textarea name="review" placeholder="Review" required rows="4"></textarea>
    <textarea name="screenshots" placeholder="Screenshot URLs (comma-separated)" rows="3"></textarea>
    <input type="url" name="downloadUrl" placeholder="Download URL" required />
    <button type="submit">Save Movie</button>
  </form>
</div>""").format(nav=ADMIN_NAV)
    return layout(body, 'Add New Movie')


def render_edit_form(movie):
    # URLs skip safe_url so the form round-trips what was stored
    body = Markup("""{nav}
<div class="container">
  <h2>Edit: {title}</h2>
  <form method="POST" action="/admin/edit/{id}">
    <input type="text" name="title" value="{title}" required />
    <input type="url" name="poster" value="{poster}" required />
    <textarea name="review" required rows="4">{review}</textarea>
    <textarea name="screenshots" rows="3">{screenshots}</textarea>
    <input type="url" name="downloadUrl" value="{download}" required />
    <button type="submit">Update Movie</button>
  </form>
</div>""").format(
        nav=ADMIN_NAV,
        id=movie.id,
        title=movie.title,
        poster=movie.poster,
        review=movie.review,
        screenshots=', '.join(movie.screenshots),
        download=movie.download_url
    )
    return layout(body, f"Edit: {movie.title}")
