"""
SoftVeda - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from softveda.config import Config
from softveda.errors import SoftvedaError, StoreUnavailable, handle_softveda_error
from softveda.extensions import db, login_manager

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance

    Raises:
        StoreUnavailable: the database cannot be reached
    """
    app = Flask(__name__, static_folder='public', static_url_path='')
    app.config.from_object(config_class)

    from softveda.auth.credentials import CredentialStore
    from softveda.auth.identity import Anonymous, require_user, require_admin
    from softveda.auth.passwords import PasswordHasher
    from softveda.auth.service import AuthService, get_session_store
    from softveda.auth.sessions import SessionStore, session_id_from

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = '/login.html'
    login_manager.login_message = None
    login_manager.session_protection = None
    login_manager.anonymous_user = Anonymous

    # Wire the auth core; handlers reach it through app.extensions
    sessions = SessionStore(db, app.config['AUTH_SESSION_LIFETIME'])
    app.extensions['softveda.sessions'] = sessions
    app.extensions['softveda.auth'] = AuthService(
        CredentialStore(db),
        sessions,
        PasswordHasher(app.config['PASSWORD_HASH_METHOD']),
        app.config['ADMIN_SECRET'],
    )

    # Identity loader for Flask-Login, read from the server-side session
    @login_manager.request_loader
    def load_identity(request):
        identity = get_session_store().load(session_id_from(request))
        if require_user(identity) or require_admin(identity):
            return identity
        return None

    # Register blueprints
    from softveda.auth import auth_bp
    from softveda.admin import admin_bp, admin_api_bp
    from softveda.dashboard import dashboard_bp
    from softveda.contact import contact_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(admin_api_bp, url_prefix='/api/admin')
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(contact_bp)

    app.register_error_handler(SoftvedaError, handle_softveda_error)

    # Create database tables; without a store the app must not start
    with app.app_context():
        _ensure_store()

    return app


def _ensure_store():
    """Create missing tables and check the database answers."""
    from softveda import models  # noqa: F401

    url = db.engine.url
    try:
        if url.get_backend_name() == 'sqlite' and url.database not in (None, '', ':memory:'):
            os.makedirs(os.path.dirname(os.path.abspath(url.database)), exist_ok=True)
        db.create_all()
        db.session.execute(text('SELECT 1'))
    except (SQLAlchemyError, OSError) as e:
        logger.error('Database error: %s', e)
        raise StoreUnavailable('Could not connect to the database') from e

    logger.info('Connected to %s', url.render_as_string(hide_password=True))
