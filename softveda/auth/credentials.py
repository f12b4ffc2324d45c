"""
Credential store

Direct access to the users and admin tables. Uniqueness of emails and
usernames is left to the tables' unique constraints.
"""

import logging
from contextlib import contextmanager
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from softveda.errors import StoreUnavailable
from softveda.models import Admin, User

logger = logging.getLogger(__name__)


class DuplicateEmail(Exception):
    """A user with this email is already registered."""


class DuplicateUsername(Exception):
    """An admin with this username already exists."""


def normalize_email(email):
    return (email or '').strip().lower()


def normalize_name(name):
    return (name or '').strip()


class CredentialStore:
    """Create, look up and list user and admin accounts."""

    def __init__(self, db):
        self.db = db

    @contextmanager
    def _guard(self, action):
        try:
            yield
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error('Store failure while %s: %s', action, e)
            raise StoreUnavailable() from e

    def _insert(self, record, duplicate):
        self.db.session.add(record)
        try:
            self.db.session.commit()
        except IntegrityError as e:
            self.db.session.rollback()
            raise duplicate from e
        except SQLAlchemyError as e:
            self.db.session.rollback()
            logger.error('Store failure while inserting %r: %s', record, e)
            raise StoreUnavailable() from e
        return record.id

    def create_user(self, name: str, email: str, password_hash: str) -> int:
        email = normalize_email(email)
        user = User(name=normalize_name(name), email=email, password=password_hash)
        return self._insert(user, DuplicateEmail(email))

    def create_admin(self, username: str, password_hash: str) -> int:
        username = normalize_name(username)
        admin = Admin(username=username, password=password_hash)
        return self._insert(admin, DuplicateUsername(username))

    def find_user_by_email(self, email: str) -> Optional[User]:
        with self._guard('looking up a user'):
            return User.query.filter(func.lower(User.email) == normalize_email(email)).first()

    def find_admin_by_username(self, username: str) -> Optional[Admin]:
        with self._guard('looking up an admin'):
            admin = Admin.query.filter_by(username=normalize_name(username)).first()
        # Some backends collate case-insensitively; usernames match exactly
        if admin is not None and admin.username != normalize_name(username):
            return None
        return admin

    def list_users(self) -> List[dict]:
        with self._guard('listing users'):
            return [u.to_dict() for u in User.query.order_by(User.id).all()]

    def list_admins(self) -> List[dict]:
        with self._guard('listing admins'):
            return [a.to_dict() for a in Admin.query.order_by(Admin.id).all()]
