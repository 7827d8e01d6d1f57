import redis
from config import Config

from database.movie_store import NAMESPACE


def check_redis(host=None, port=None, db=None):
    host = host or Config.REDIS_HOST
    port = port or Config.REDIS_PORT
    db = db if db is not None else Config.REDIS_DB

    try:
        client = redis.Redis(
            host=host,
            port=port,
            db=db,
            socket_connect_timeout=5,
            decode_responses=True
        )

        client.ping()

        info = client.info()

        # Database size (keys count)
        db_size = client.dbsize()
        movie_keys = sum(1 for _ in client.scan_iter(match=f"{NAMESPACE}:*"))

        uptime_seconds = info['uptime_in_seconds']
        uptime_days = uptime_seconds // 86400
        uptime_hours = (uptime_seconds % 86400) // 3600
        uptime_str = f"{uptime_days}d {uptime_hours}h"

        client.close()

        return {
            'status': 'healthy',
            'service': 'redis',
            'message': 'Successfully connected to Redis',
            'details': {
                'connection': {
                    'host': host,
                    'port': port,
                    'connected_clients': info['connected_clients']
                },
                'version': info['redis_version'],
                'uptime': uptime_str,
                'memory': {
                    'used': info['used_memory_human'],
                    'peak': info['used_memory_peak_human']
                },
                'data': {
                    'total_keys': db_size,
                    'movie_keys': movie_keys,
                    'other_keys': db_size - movie_keys
                }
            }
        }

    except redis.ConnectionError as e:
        return {
            'status': 'unhealthy',
            'service': 'redis',
            'message': f'Connection error: {str(e)}'
        }
    except redis.RedisError as e:
        return {
            'status': 'unhealthy',
            'service': 'redis',
            'message': f'Unexpected error: {str(e)}'
        }
