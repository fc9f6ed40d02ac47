"""
Auth Routes

The administrator proves their credentials to the remote API; only a
confirmed identity and token ever reach the session store.
"""

import logging

from flask import current_app, flash, redirect, render_template, request, url_for

from courseadmin.api import ApiError, AuthApi, get_api_client
from courseadmin.auth import auth_bp
from courseadmin.models import PayloadError
from courseadmin.session import get_session_store

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def landing_url():
    return url_for(current_app.config['DEFAULT_LANDING_ENDPOINT'])


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Administrator login."""
    store = get_session_store()

    if request.method == 'GET':
        if store.is_authenticated and not request.args.get('denied'):
            return redirect(landing_url())
        if store.is_authenticated:
            flash('Your account cannot open that page. Sign in with another administrator account.', 'warning')
        return render_template('auth/login.html')

    email = request.form.get('email', '').strip()
    password = request.form.get('password', '')

    if not email or not password:
        flash('Please enter email and password.', 'danger')
        return render_template('auth/login.html', email=email), 400

    try:
        administrator, token = AuthApi(get_api_client()).login(email, password)
    except ApiError as e:
        logger.info('Login failed for %s: %s', email, e)
        flash(e.message or 'Server error', 'danger')
        return render_template('auth/login.html', email=email), 401 if e.status_code == 401 else 400
    except PayloadError as e:
        logger.warning('Unusable login response for %s: %s', email, e)
        flash('Server error', 'danger')
        return render_template('auth/login.html', email=email), 502

    store.login(administrator, token)
    flash('Login successful.', 'success')
    return redirect(store.consume_return_path() or landing_url())


@auth_bp.route('/logout')
def logout():
    """Administrator logout. Safe to call when already logged out."""
    store = get_session_store()
    store.logout()
    store.forget_return_path()
    flash('You have been logged out.', 'info')
    return redirect(url_for('auth.login'))


@auth_bp.route('/signup', methods=['GET', 'POST'])
def signup():
    """Administrator account request."""
    if request.method == 'GET':
        return render_template('auth/signup.html')

    name = request.form.get('name', '').strip()
    email = request.form.get('email', '').strip()
    password = request.form.get('password', '')
    confirm_password = request.form.get('confirm_password', '')

    error = None
    if not name:
        error = 'Please enter your full name.'
    elif not email or '@' not in email:
        error = 'Please provide a valid email address.'
    elif password != confirm_password:
        error = 'Password and confirm password do not match.'
    elif len(password) < MIN_PASSWORD_LENGTH:
        error = f'Password must be at least {MIN_PASSWORD_LENGTH} characters long.'

    if error:
        flash(error, 'danger')
        return render_template('auth/signup.html', name=name, email=email), 400

    try:
        AuthApi(get_api_client()).signup(name, email, password)
    except ApiError as e:
        flash(e.message or 'Could not create the account.', 'danger')
        return render_template('auth/signup.html', name=name, email=email), 400

    flash('Your admin account has been created. Please log in.', 'success')
    return redirect(url_for('auth.login'))


@auth_bp.route('/forgot-password', methods=['GET', 'POST'])
def forgot_password():
    """Password reset request. The answer never reveals whether the account exists."""
    if request.method == 'GET':
        return render_template('auth/forgot_password.html', submitted=False)

    email = request.form.get('email', '').strip()
    if not email:
        flash('Please enter your email address.', 'danger')
        return render_template('auth/forgot_password.html', submitted=False), 400

    try:
        AuthApi(get_api_client()).forgot_password(email)
    except ApiError as e:
        logger.info('Password reset request for %s failed: %s', email, e)

    flash("If an account exists, you'll receive a password reset link shortly.", 'info')
    return render_template('auth/forgot_password.html', submitted=True, email=email)
