"""
Flask Extensions

Users and admins share one login manager: the identity it loads is read
from the server-side session store, never from Flask's signed cookie session.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager exposing the session identity as current_user
login_manager = LoginManager()
