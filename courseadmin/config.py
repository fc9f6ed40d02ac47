"""
Configuration settings for the Course Platform Admin Dashboard
"""
import os
from datetime import timedelta


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    """Flask application configuration"""

    # Flask secret key for the signed session cookie
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # The session cookie is the administrator's durable browser-local store
    PERMANENT_SESSION_LIFETIME = timedelta(days=int(os.environ.get('SESSION_LIFETIME_DAYS', '30')))
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Flask-Login only reads identity from the session store
    SESSION_PROTECTION = None

    # Remote REST API
    API_BASE_URL = (os.environ.get('API_BASE_URL') or 'http://localhost:5050/api/admin').rstrip('/')
    VIDEOS_API_URL = os.environ.get('VIDEOS_API_URL') or 'http://localhost:5050/api/videos'
    API_TIMEOUT_SECONDS = float(os.environ.get('API_TIMEOUT_SECONDS', '10'))
    # Optional requests transport adapter mounted on every API session
    API_TRANSPORT_ADAPTER = None

    # Route guard. False turns protected pages into pass-through (demo mode).
    AUTH_GUARD_ENABLED = _env_flag('AUTH_GUARD_ENABLED', True)
    DEFAULT_LANDING_ENDPOINT = 'dashboard.index'

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    API_BASE_URL = 'http://api.test/api/admin'
    VIDEOS_API_URL = 'http://api.test/api/videos'
    AUTH_GUARD_ENABLED = True
    LOG_LEVEL = 'DEBUG'
