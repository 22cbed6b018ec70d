"""Application settings, read from the environment (and a local .env file).

Loaded into Flask with app.config.from_object(Config).
"""
import os

from dotenv import load_dotenv

load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


def _env_int(name):
    value = os.environ.get(name)
    if value is None or value.strip() == '':
        return None
    return int(value)


def _env_bool(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_list(name, default):
    value = os.environ.get(name, default).strip()
    if value == '*':
        return value
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key')
    SQLALCHEMY_DATABASE_URI = os.environ.get(
        'DATABASE_URL', 'sqlite:///' + os.path.join(BASE_DIR, 'inventory.db')
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # The JSON API is consumed by a separate frontend; forms are not rendered.
    WTF_CSRF_ENABLED = False
    # Products with quantity below this value are reported as low stock.
    # No default: /api/dashboard answers 503 until this is set.
    LOW_STOCK_THRESHOLD = _env_int('LOW_STOCK_THRESHOLD')
    SEED_ON_STARTUP = _env_bool('SEED_ON_STARTUP', True)
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    # Comma-separated list of origins allowed to call /api/*, or "*"
    CORS_ORIGINS = _env_list('CORS_ORIGINS', '*')
    HOST = os.environ.get('HOST', '127.0.0.1')
    PORT = _env_int('PORT') or 10000
    DEBUG = _env_bool('FLASK_DEBUG', False)


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOW_STOCK_THRESHOLD = 6
    SEED_ON_STARTUP = False
    CORS_ORIGINS = '*'
