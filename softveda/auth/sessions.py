"""
Server-side session store

The cookie holds an opaque random id, signed with SECRET_KEY; the identity
behind it lives in the `sessions` table and expires after
AUTH_SESSION_LIFETIME.
"""

import logging
import secrets
from contextlib import contextmanager
from datetime import timedelta
from typing import Optional

from flask import current_app
from itsdangerous import BadData, URLSafeSerializer
from sqlalchemy.exc import SQLAlchemyError

from softveda.auth.identity import ANONYMOUS, AuthenticatedAdmin, AuthenticatedUser
from softveda.errors import StoreUnavailable
from softveda.models import SessionRecord
from softveda.models.clock import utcnow

logger = logging.getLogger(__name__)

COOKIE_SALT = 'softveda.session'


class SessionStore:
    """Mint, resolve and destroy sessions keyed by an unguessable id."""

    def __init__(self, db, lifetime=timedelta(hours=24)):
        self.db = db
        self.lifetime = lifetime

    @contextmanager
    def _guard(self, action):
        try:
            yield
            self.db.session.commit()
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error('Session store failure while %s: %s', action, e)
            raise StoreUnavailable() from e

    def create(self, identity) -> str:
        """Persist a new session for an authenticated identity and return its id."""
        if isinstance(identity, AuthenticatedUser):
            kind, subject_id, subject_name = 'user', identity.user_id, identity.user_name
        elif isinstance(identity, AuthenticatedAdmin):
            kind, subject_id, subject_name = 'admin', identity.admin_id, None
        else:
            raise ValueError(f'Cannot open a session for {identity!r}')

        now = utcnow()
        record = SessionRecord(
            id=secrets.token_urlsafe(32),
            kind=kind,
            subject_id=subject_id,
            subject_name=subject_name,
            created_at=now,
            expires_at=now + self.lifetime,
        )
        with self._guard('creating a session'):
            self.db.session.add(record)
        logger.debug('Opened %s session for id %s', kind, subject_id)
        return record.id

    def load(self, session_id: Optional[str]):
        """Resolve a session id to its identity; unknown or expired ids are anonymous."""
        if not session_id:
            return ANONYMOUS
        with self._guard('loading a session'):
            record = self.db.session.get(SessionRecord, session_id)
            if record is not None and record.is_expired:
                self.db.session.delete(record)
                record = None

        if record is None:
            return ANONYMOUS
        if record.kind == 'user':
            return AuthenticatedUser(user_id=record.subject_id, user_name=record.subject_name)
        if record.kind == 'admin':
            return AuthenticatedAdmin(admin_id=record.subject_id)
        logger.warning('Session with unknown kind %r ignored', record.kind)
        return ANONYMOUS

    def destroy(self, session_id: Optional[str]) -> bool:
        if not session_id:
            return False
        with self._guard('destroying a session'):
            deleted = SessionRecord.query.filter_by(id=session_id).delete()
        return deleted > 0

    def purge_expired(self) -> int:
        """Delete every expired session; returns how many were removed."""
        with self._guard('purging expired sessions'):
            count = SessionRecord.query.filter(SessionRecord.expires_at <= utcnow()).delete()
        if count:
            logger.info('Purged %d expired sessions', count)
        return count


# -----------------------------------------------------------------------------
# Cookie helpers
# -----------------------------------------------------------------------------

def _serializer():
    return URLSafeSerializer(current_app.config['SECRET_KEY'], salt=COOKIE_SALT)


def session_id_from(request) -> Optional[str]:
    """Extract the session id from request cookies; a tampered cookie yields None."""
    token = request.cookies.get(current_app.config['AUTH_COOKIE_NAME'])
    if not token:
        return None
    try:
        return _serializer().loads(token)
    except BadData:
        logger.warning('Rejected session cookie with a bad signature')
        return None


def set_session_cookie(response, session_id):
    config = current_app.config
    response.set_cookie(
        config['AUTH_COOKIE_NAME'],
        _serializer().dumps(session_id),
        max_age=int(config['AUTH_SESSION_LIFETIME'].total_seconds()),
        httponly=True,
        samesite='Lax',
        secure=config['AUTH_COOKIE_SECURE'],
    )
    return response


def clear_session_cookie(response):
    response.delete_cookie(
        current_app.config['AUTH_COOKIE_NAME'],
        httponly=True,
        samesite='Lax',
    )
    return response
