import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    FLASK_HOST = os.getenv('FLASK_HOST', '0.0.0.0')
    FLASK_PORT = int(os.getenv('FLASK_PORT', '5000'))
    FLASK_DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'


    # 'redis' or 'memory'
    STORE_BACKEND = os.getenv('STORE_BACKEND', 'redis').lower()


    REDIS_HOST = os.getenv('REDIS_HOST', 'localhost')
    REDIS_PORT = int(os.getenv('REDIS_PORT', '6379'))
    REDIS_DB = int(os.getenv('REDIS_DB', '0'))


    ADMIN_USERNAME = os.getenv('ADMIN_USERNAME')
    ADMIN_PASSWORD = os.getenv('ADMIN_PASSWORD')
    SECRET_COOKIE_VALUE = os.getenv('SECRET_COOKIE_VALUE')


    AUTH_COOKIE_NAME = 'auth'
    AUTH_COOKIE_MAX_AGE = 60 * 60 * 24
