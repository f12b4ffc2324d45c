"""
Authentication service

Registration and login for both account roles. Registration never opens a
session; a session is only minted by a successful login.
"""

import hmac
import logging

from flask import current_app

from softveda.auth.credentials import (
    CredentialStore,
    DuplicateEmail,
    DuplicateUsername,
    normalize_email,
    normalize_name,
)
from softveda.auth.identity import AuthenticatedAdmin, AuthenticatedUser, require_admin
from softveda.auth.passwords import PasswordHasher
from softveda.auth.sessions import SessionStore
from softveda.errors import (
    AdminExists,
    EmailExists,
    Forbidden,
    InvalidCredentials,
    InvalidRole,
    ValidationError,
)

logger = logging.getLogger(__name__)

ROLE_USER = 'user'
ROLE_ADMIN = 'admin'


def _text(data, key):
    value = data.get(key)
    return value.strip() if isinstance(value, str) else ''


class AuthService:
    """Registers accounts and turns valid credentials into sessions."""

    def __init__(self, credentials: CredentialStore, sessions: SessionStore,
                 hasher: PasswordHasher, admin_secret: str):
        self.credentials = credentials
        self.sessions = sessions
        self.hasher = hasher
        self.admin_secret = admin_secret

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(self, data, identity):
        """Register an account from submitted form fields.

        Args:
            data: mapping of submitted fields, `role` selecting the account type
            identity: identity of the requesting session

        Returns:
            id of the created user or admin

        Raises:
            InvalidRole, ValidationError, Forbidden, EmailExists, AdminExists
        """
        role = _text(data, 'role')
        if role == ROLE_USER:
            return self.register_user(_text(data, 'name'), _text(data, 'email'), _text(data, 'password'))
        if role == ROLE_ADMIN:
            return self.register_admin(_text(data, 'username'), _text(data, 'password'),
                                       data.get('adminSecret'), identity)
        raise InvalidRole()

    def register_user(self, name, email, password) -> int:
        name, email, password = normalize_name(name), normalize_email(email), (password or '').strip()
        if not name or not email or not password:
            raise ValidationError()

        try:
            user_id = self.credentials.create_user(name, email, self.hasher.hash(password))
        except DuplicateEmail:
            logger.info('Registration refused, email taken: %s', email)
            raise EmailExists()

        logger.info('Registered user %s (id %s)', email, user_id)
        return user_id

    def register_admin(self, username, password, admin_secret, identity) -> int:
        if not (self._secret_matches(admin_secret) or require_admin(identity)):
            logger.warning('Admin registration denied for %r', username)
            raise Forbidden()

        username, password = normalize_name(username), (password or '').strip()
        if not username or not password:
            raise ValidationError()

        try:
            admin_id = self.credentials.create_admin(username, self.hasher.hash(password))
        except DuplicateUsername:
            logger.info('Registration refused, admin exists: %s', username)
            raise AdminExists()

        logger.info('Registered admin %s (id %s)', username, admin_id)
        return admin_id

    def _secret_matches(self, provided):
        if not self.admin_secret or not isinstance(provided, str) or not provided:
            return False
        return hmac.compare_digest(provided.encode('utf-8'), self.admin_secret.encode('utf-8'))

    # -------------------------------------------------------------------------
    # Login / logout
    # -------------------------------------------------------------------------

    def login(self, role, identifier, password, previous_session_id=None):
        """Check credentials and open a fresh session.

        The identifier is trimmed and lowercased for both roles; emails then
        match case-insensitively and admin usernames exactly. Whatever
        session the client presented is destroyed first, so a session never
        switches from one identity to another.

        Returns:
            (session_id, identity)
        """
        role = role.strip() if isinstance(role, str) else ''
        if role not in (ROLE_USER, ROLE_ADMIN):
            raise InvalidRole()

        identifier = identifier.strip().lower() if isinstance(identifier, str) else ''
        password = password.strip() if isinstance(password, str) else ''
        if not identifier or not password:
            raise ValidationError()

        logger.info('Login attempt role=%s identifier=%s', role, identifier)
        identity = self._authenticate(role, identifier, password)

        self.sessions.destroy(previous_session_id)
        self.sessions.purge_expired()
        return self.sessions.create(identity), identity

    def _authenticate(self, role, identifier, password):
        if role == ROLE_USER:
            user = self.credentials.find_user_by_email(identifier)
            if user is None:
                logger.warning('Login failed: no user with email %s', normalize_email(identifier))
                raise InvalidCredentials()
            if not self.hasher.verify(password, user.password):
                logger.warning('Login failed: wrong password for user %s', user.email)
                raise InvalidCredentials()
            return AuthenticatedUser(user_id=user.id, user_name=user.name)

        admin = self.credentials.find_admin_by_username(identifier)
        if admin is None:
            logger.warning('Login failed: no admin named %s', identifier)
            raise InvalidCredentials()
        if not self.hasher.verify(password, admin.password):
            logger.warning('Login failed: wrong password for admin %s', admin.username)
            raise InvalidCredentials()
        return AuthenticatedAdmin(admin_id=admin.id)

    def logout(self, session_id):
        if self.sessions.destroy(session_id):
            logger.info('Session closed')


def get_auth_service() -> AuthService:
    """The AuthService wired into the current application."""
    return current_app.extensions['softveda.auth']


def get_session_store() -> SessionStore:
    return current_app.extensions['softveda.sessions']
