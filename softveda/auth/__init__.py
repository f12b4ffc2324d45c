"""
Auth Blueprint

Registration, login and logout for users and admins.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from softveda.auth import routes  # noqa: E402, F401
