"""
Contact Blueprint
"""

from flask import Blueprint

contact_bp = Blueprint('contact', __name__)

from softveda.contact import routes  # noqa: E402, F401
