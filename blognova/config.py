"""
Configuration settings for BlogNova
"""
import os
from datetime import timedelta

# Fallback signing key used when SESSION_SECRET is not set
DEFAULT_SESSION_SECRET = 'mysupersecretcode'


class Config:
    """Flask application configuration"""

    # Session signing key (CHANGE THIS IN PRODUCTION!)
    SECRET_KEY = os.environ.get('SESSION_SECRET') or DEFAULT_SESSION_SECRET

    # Database configuration (relational via Flask-SQLAlchemy; MONGO_URL is not read)
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'blognova.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Session cookie: HTTP-only, seven days from the moment it is issued
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
