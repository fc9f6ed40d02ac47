"""
Admin Blueprint

Management screens for the platform's users, courses, videos, payments,
reviews, announcements and companies. Every view is guarded.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from courseadmin.admin import (  # noqa: E402, F401
    announcements, companies, courses, payments, reviews, settings, users, videos,
)
