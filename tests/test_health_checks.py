def test_health_check_structure():
    from services.redis_check import check_redis

    # Nothing listens on port 1, this should fail fast with a proper structure
    result = check_redis(host='127.0.0.1', port=1)

    assert 'status' in result
    assert 'service' in result
    assert 'message' in result
    assert result['service'] == 'redis'
    assert result['status'] == 'unhealthy'


def test_check_redis_endpoint_unhealthy(store):
    from app import create_app

    app = create_app({'REDIS_HOST': '127.0.0.1', 'REDIS_PORT': 1}, store=store)
    response = app.test_client().get('/check/redis')

    assert response.status_code == 503
    assert response.get_json()['status'] == 'unhealthy'


def test_check_redis_endpoint_uses_configured_db(store, monkeypatch):
    import redis
    from app import create_app
    from services import redis_check

    seen = {}

    class RefusingRedis:
        def __init__(self, **kwargs):
            seen.update(kwargs)

        def ping(self):
            raise redis.ConnectionError('refused')

    monkeypatch.setattr(redis_check.redis, 'Redis', RefusingRedis)

    app = create_app({'REDIS_HOST': '127.0.0.1', 'REDIS_PORT': 1, 'REDIS_DB': 3}, store=store)
    response = app.test_client().get('/check/redis')

    assert response.status_code == 503
    assert seen['db'] == 3
    assert seen['host'] == '127.0.0.1'
