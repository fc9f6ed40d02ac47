"""
Flask Extensions

Administrator identity lives in the session store; Flask-Login only exposes
it as ``current_user`` and owns the unauthorized redirect.
"""

from flask_login import LoginManager

login_manager = LoginManager()
