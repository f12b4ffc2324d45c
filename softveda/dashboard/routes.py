"""
Dashboard Routes

Landing page and the user dashboard. Other public pages are plain static
files served from the `public/` folder.
"""

import os

from flask import current_app, send_from_directory

from softveda.auth.decorators import user_required
from softveda.dashboard import dashboard_bp


@dashboard_bp.route('/')
def index():
    """Public landing page"""
    return current_app.send_static_file('index.html')


@dashboard_bp.route('/user-dashboard.html')
@user_required
def user_dashboard():
    """Dashboard for logged-in users"""
    return send_from_directory(os.path.join(current_app.root_path, 'views'), 'user-dashboard.html')
