"""
Auth Blueprint

Login, logout, signup and password reset pages. None of them is guarded.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from courseadmin.auth import routes  # noqa: E402, F401
