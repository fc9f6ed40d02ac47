"""
Dashboard Routes

Landing page with platform totals.
"""

from flask import render_template

from courseadmin.api import CoursesApi, PaymentsApi, UsersApi, get_api_client
from courseadmin.auth.decorators import admin_required
from courseadmin.dashboard import dashboard_bp
from courseadmin.services import compute_dashboard_stats, fetch


@dashboard_bp.route('/')
@admin_required
def index():
    """Dashboard overview built from the users, courses and payments lists."""
    client = get_api_client()
    users = fetch(UsersApi(client).list, default=[])
    courses = fetch(CoursesApi(client).list, default=[])
    payments = fetch(PaymentsApi(client).list, default=[])

    errors = [f.error for f in (users, courses, payments) if f.error]
    stats = compute_dashboard_stats(users, courses, payments)
    return render_template('dashboard/index.html', stats=stats, errors=errors)
