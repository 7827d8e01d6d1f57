INCEPTION_FORM = {
    'title': 'Inception',
    'poster': 'https://x/p.jpg',
    'review': 'Great',
    'screenshots': 'https://x/1.jpg, https://x/2.jpg',
    'downloadUrl': 'https://x/d.mp4',
}


def test_dashboard_empty(admin_client):
    response = admin_client.get('/admin')
    assert response.status_code == 200
    assert b'No movies yet.' in response.data


def test_dashboard_rejects_other_methods(admin_client):
    response = admin_client.post('/admin')
    assert response.status_code == 405
    assert response.get_data(as_text=True) == 'Method Not Allowed'


def test_add_form(admin_client):
    response = admin_client.get('/admin/add')
    assert response.status_code == 200
    assert b'Add New Movie' in response.data


def test_add_movie_flow(admin_client, store):
    response = admin_client.post('/admin/add', data=INCEPTION_FORM)

    assert response.status_code == 303
    assert response.headers['Location'] == '/admin'

    assert b'Inception' in admin_client.get('/admin').data

    [movie] = store.list_all()
    detail = admin_client.get(f'/movie/{movie.id}').get_data(as_text=True)
    assert '<img src="https://x/1.jpg"' in detail
    assert '<img src="https://x/2.jpg"' in detail
    assert 'href="https://x/d.mp4"' in detail


def test_created_movie_round_trips(admin_client, store):
    admin_client.post('/admin/add', data=INCEPTION_FORM)

    [movie] = store.list_all()
    assert movie.title == 'Inception'
    assert movie.poster == 'https://x/p.jpg'
    assert movie.review == 'Great'
    assert movie.screenshots == ['https://x/1.jpg', 'https://x/2.jpg']
    assert movie.download_url == 'https://x/d.mp4'


def test_add_generates_distinct_ids(admin_client, store):
    admin_client.post('/admin/add', data=INCEPTION_FORM)
    admin_client.post('/admin/add', data=INCEPTION_FORM)

    ids = {m.id for m in store.list_all()}
    assert len(ids) == 2


def test_add_missing_field_is_bad_request(admin_client, store):
    data = dict(INCEPTION_FORM)
    del data['title']

    response = admin_client.post('/admin/add', data=data)
    assert response.status_code == 400
    assert len(store) == 0


def test_edit_form(admin_client, store, inception):
    store.upsert(inception)

    response = admin_client.get('/admin/edit/m-1')
    assert response.status_code == 200
    assert b'value="Inception"' in response.data


def test_edit_missing_movie(admin_client, store):
    assert admin_client.get('/admin/edit/nope').status_code == 404

    response = admin_client.post('/admin/edit/nope', data=INCEPTION_FORM)
    assert response.status_code == 404
    assert store.get_by_id('nope') is None


def test_edit_replaces_all_fields(admin_client, store, inception):
    store.upsert(inception)

    response = admin_client.post('/admin/edit/m-1', data={
        'title': 'Interstellar',
        'poster': 'https://y/p.jpg',
        'review': 'Long',
        'screenshots': '',
        'downloadUrl': 'https://y/d.mp4',
    })

    assert response.status_code == 303
    assert response.headers['Location'] == '/admin'

    movie = store.get_by_id('m-1')
    assert movie.id == 'm-1'
    assert movie.created_at == inception.created_at
    assert movie.title == 'Interstellar'
    assert movie.poster == 'https://y/p.jpg'
    assert movie.review == 'Long'
    assert movie.screenshots == []
    assert movie.download_url == 'https://y/d.mp4'


def test_delete(admin_client, store, inception):
    store.upsert(inception)

    response = admin_client.post('/admin/delete/m-1')
    assert response.status_code == 303
    assert response.headers['Location'] == '/admin'
    assert admin_client.get('/movie/m-1').status_code == 404


def test_delete_missing_is_noop(admin_client):
    response = admin_client.post('/admin/delete/does-not-exist')
    assert response.status_code == 303
    assert response.headers['Location'] == '/admin'


def test_delete_requires_post(admin_client):
    assert admin_client.get('/admin/delete/m-1').status_code == 404


def test_unknown_admin_path_when_logged_in(admin_client):
    assert admin_client.get('/admin/unknown').status_code == 404
