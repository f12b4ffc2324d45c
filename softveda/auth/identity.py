"""
Session identity

A session carries exactly one of three identities. They double as
Flask-Login user objects so `current_user` is always one of them.
"""

from dataclasses import dataclass

from flask_login import AnonymousUserMixin, UserMixin


@dataclass(frozen=True)
class Anonymous(AnonymousUserMixin):
    """No one is logged in on this session."""


@dataclass(frozen=True)
class AuthenticatedUser(UserMixin):
    user_id: int
    user_name: str

    def get_id(self):
        return f'user:{self.user_id}'


@dataclass(frozen=True)
class AuthenticatedAdmin(UserMixin):
    admin_id: int

    def get_id(self):
        return f'admin:{self.admin_id}'


ANONYMOUS = Anonymous()


def require_user(identity):
    """True only for a logged-in user; admins do not pass."""
    return isinstance(identity, AuthenticatedUser)


def require_admin(identity):
    """True only for a logged-in admin; users do not pass."""
    return isinstance(identity, AuthenticatedAdmin)
