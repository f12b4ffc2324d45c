"""
Auth Routes

Both roles post to the same endpoints; `role` in the body picks the flow.
"""

from flask import redirect, request

from softveda.auth import auth_bp
from softveda.auth.decorators import current_identity
from softveda.auth.identity import AuthenticatedAdmin, require_admin
from softveda.auth.service import ROLE_ADMIN, get_auth_service
from softveda.auth.sessions import clear_session_cookie, session_id_from, set_session_cookie

LOGIN_PAGE = '/login.html'
USER_DASHBOARD = '/user-dashboard.html'
ADMIN_DASHBOARD = '/admin/dashboard.html'


def _submitted():
    """Form fields or a JSON object, whichever the client sent."""
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else request.form


@auth_bp.route('/auth/register', methods=['POST'])
def register():
    """Register a user, or an admin when authorized"""
    data = _submitted()
    identity = current_identity()
    get_auth_service().register(data, identity)

    if str(data.get('role') or '').strip() == ROLE_ADMIN and require_admin(identity):
        return redirect(ADMIN_DASHBOARD)
    return redirect(LOGIN_PAGE)


@auth_bp.route('/auth/login', methods=['POST'])
def login():
    """Log in and land on the role's dashboard"""
    data = _submitted()
    session_id, identity = get_auth_service().login(
        data.get('role'),
        data.get('emailOrUsername'),
        data.get('password'),
        previous_session_id=session_id_from(request),
    )
    target = ADMIN_DASHBOARD if isinstance(identity, AuthenticatedAdmin) else USER_DASHBOARD
    return set_session_cookie(redirect(target), session_id)


@auth_bp.route('/logout')
def logout():
    """Destroy the session and return to the landing page"""
    get_auth_service().logout(session_id_from(request))
    return clear_session_cookie(redirect('/'))
