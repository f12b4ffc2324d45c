"""
Admin Blueprints

The dashboard page and the JSON listings behind it. Every route here is
guarded by admin_required.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)
admin_api_bp = Blueprint('admin_api', __name__)

from softveda.admin import routes  # noqa: E402, F401
