"""
Access guards

Route decorators built on the identity predicates. A denied request is
sent to the login page through Flask-Login's unauthorized handler.
"""

from functools import wraps

from flask import current_app
from flask_login import current_user

from softveda.auth.identity import require_admin, require_user


def current_identity():
    """The Anonymous / AuthenticatedUser / AuthenticatedAdmin of this request."""
    return current_user._get_current_object()


def _guarded(predicate, f):
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not predicate(current_identity()):
            return current_app.login_manager.unauthorized()
        return f(*args, **kwargs)
    return wrapper


def user_required(f):
    """Allow only sessions holding a user identity."""
    return _guarded(require_user, f)


def admin_required(f):
    """Allow only sessions holding an admin identity.

    A logged-in user is refused exactly like an anonymous visitor.
    """
    return _guarded(require_admin, f)
