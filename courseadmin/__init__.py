"""
Course Platform Admin Dashboard - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging

from flask import Flask, flash, g, redirect, render_template, request, url_for
from flask import session as flask_session

from courseadmin.config import Config
from courseadmin.extensions import login_manager

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config['LOG_LEVEL'])
    logging.getLogger('courseadmin').setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'

    # Register blueprints
    from courseadmin.auth import auth_bp
    from courseadmin.dashboard import dashboard_bp
    from courseadmin.admin import admin_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(dashboard_bp)
    app.register_blueprint(admin_bp)

    _register_session_store(app)
    _register_error_handlers(app)

    @app.context_processor
    def inject_administrator():
        """Expose the logged-in administrator to templates."""
        store = g.get('session_store')
        return dict(admin=store.administrator if store is not None else None)

    @app.template_filter('money')
    def money_filter(amount, currency='UZS'):
        return f'{amount:,.0f} {currency}'

    return app


def _register_session_store(app):
    from courseadmin.session import CookieStorage, SessionStore

    @app.before_request
    def restore_session_store():
        # Settles before any guard runs
        g.session_store = SessionStore(CookieStorage(flask_session)).restore()

    @login_manager.request_loader
    def load_administrator(_request):
        store = g.get('session_store')
        if store is not None and store.is_authenticated:
            return store.administrator
        return None


def _register_error_handlers(app):
    from courseadmin.api import UnauthorizedError

    @app.errorhandler(UnauthorizedError)
    def handle_unauthorized(error):
        # The response hook has already cleared the stored session
        store = g.get('session_store')
        if store is not None:
            store.logout()
        logger.info('Session rejected by API during %s', request.path)
        if request.endpoint == 'auth.login':
            flash(error.message, 'danger')
            return render_template('auth/login.html'), 401
        flash(error.message, 'warning')
        return redirect(url_for('auth.login'))

    @app.errorhandler(404)
    def not_found(error):
        return render_template('errors/404.html'), 404
