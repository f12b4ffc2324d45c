"""
Admin Routes
"""

import os

from flask import current_app, jsonify, send_from_directory

from softveda.admin import admin_api_bp, admin_bp
from softveda.auth.decorators import admin_required
from softveda.auth.service import get_auth_service


@admin_bp.route('/dashboard.html')
@admin_required
def admin_dashboard():
    """Admin dashboard page"""
    return send_from_directory(os.path.join(current_app.root_path, 'views'), 'admin-dashboard.html')


@admin_api_bp.route('/users')
@admin_required
def list_users():
    """All registered users, oldest first, without password digests"""
    return jsonify(get_auth_service().credentials.list_users())


@admin_api_bp.route('/admins')
@admin_required
def list_admins():
    """All admin accounts, oldest first"""
    return jsonify(get_auth_service().credentials.list_admins())
