"""
Route Guards

Protected views are gated on the session store. The guard never decides
before ``restore()`` has settled the store, and an unauthenticated visit is
remembered so the login flow can return to it once.
"""

import logging
from functools import wraps
from urllib.parse import urlsplit

from flask import current_app, redirect, render_template, request, url_for
from flask_login import current_user

from courseadmin.extensions import login_manager
from courseadmin.session import get_session_store

logger = logging.getLogger(__name__)


def requested_path():
    """Path plus query string of the current request, without a bare trailing '?'."""
    path = request.full_path
    return path[:-1] if path.endswith('?') else path


def return_path():
    """Where to come back after login, or None.

    A GET returns to itself; any other method returns to the local page it
    was posted from.
    """
    if request.method == 'GET':
        return requested_path()
    if not request.referrer:
        return None
    referrer = urlsplit(request.referrer)
    if referrer.netloc and referrer.netloc != request.host:
        return None
    path = referrer.path or '/'
    return f'{path}?{referrer.query}' if referrer.query else path


@login_manager.unauthorized_handler
def redirect_to_login():
    """Send the visitor to the login view.

    An anonymous visitor's location is remembered for after login. A
    logged-in administrator turned away by a role check is not, and the login
    view is told to explain the refusal.
    """
    if current_user.is_authenticated:
        logger.debug('Role check denied %s for %s', request.path, current_user.email)
        return redirect(url_for('auth.login', denied=1))

    path = return_path()
    if path is not None:
        get_session_store().remember_return_path(path)
    logger.debug('Denied %s %s, redirecting to login', request.method, request.path)
    return redirect(url_for('auth.login'))


def _guard(f, admits):
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_app.config.get('AUTH_GUARD_ENABLED', True):
            return f(*args, **kwargs)

        store = get_session_store()
        if store.is_loading:
            return render_template('loading.html'), 503, {'Retry-After': '1'}

        if not current_user.is_authenticated or not admits(current_user):
            return login_manager.unauthorized()
        return f(*args, **kwargs)
    return wrapper


def admin_required(f):
    """Decorator to ensure the request is from an authenticated administrator.

    - Waits (neutral page, no redirect) while the session store is restoring
    - Redirects to the login view when no administrator and token are present
    - Becomes a pass-through when AUTH_GUARD_ENABLED is off
    """
    return _guard(f, lambda admin: True)


def main_admin_required(f):
    """Like ``admin_required``, but company-scoped administrators are turned away too."""
    return _guard(f, lambda admin: admin.is_main_admin)
