"""
Configuration settings for the SoftVeda web backend
"""
import os
from datetime import timedelta

from sqlalchemy.engine import URL


def _mysql_uri():
    """Build a MySQL URI from the DB_* variables, or None when DB_NAME is unset."""
    name = os.environ.get('DB_NAME')
    if not name:
        return None
    return URL.create(
        'mysql+pymysql',
        username=os.environ.get('DB_USER') or 'root',
        password=os.environ.get('DB_PASS') or None,
        host=os.environ.get('DB_HOST') or 'localhost',
        database=name,
    ).render_as_string(hide_password=False)


class Config:
    """Flask application configuration"""

    SECRET_KEY = os.environ.get('SESSION_SECRET') or os.environ.get('SECRET_KEY') or 'softveda_secret'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or _mysql_uri() or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'softveda.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Shared secret allowing admin accounts to be created without an admin session
    ADMIN_SECRET = os.environ.get('ADMIN_SECRET') or 'SOFTVEDA2025'

    # Fixed work factor for stored password digests
    PASSWORD_HASH_METHOD = os.environ.get('PASSWORD_HASH_METHOD') or 'pbkdf2:sha256:600000'

    # Server-side session cookie
    AUTH_COOKIE_NAME = os.environ.get('AUTH_COOKIE_NAME') or 'softveda_sid'
    AUTH_COOKIE_SECURE = os.environ.get('AUTH_COOKIE_SECURE', '').lower() in ('1', 'true', 'yes')
    AUTH_SESSION_LIFETIME = timedelta(hours=int(os.environ.get('SESSION_MAX_AGE_HOURS') or 24))

    PORT = int(os.environ.get('PORT') or 3000)


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    ADMIN_SECRET = 'test-admin-secret'
    PASSWORD_HASH_METHOD = 'pbkdf2:sha256:1000'
