"""
Settings Routes

The administrator's own profile. A successful update replaces the identity
record held by the session store.
"""

import logging

from flask import flash, redirect, render_template, url_for

from courseadmin.admin import admin_bp
from courseadmin.admin.helpers import form_fields
from courseadmin.api import ApiError, AuthApi, UnauthorizedError, get_api_client
from courseadmin.auth.decorators import admin_required
from courseadmin.models import PayloadError
from courseadmin.session import get_session_store

logger = logging.getLogger(__name__)


@admin_bp.route('/settings')
@admin_required
def settings():
    return render_template('admin/settings.html', profile=get_session_store().administrator)


@admin_bp.route('/settings', methods=['POST'])
@admin_required
def update_profile():
    changes = {key: value for key, value in form_fields('name', 'surname', 'email', 'image').items() if value}
    if 'email' not in changes:
        flash('Email is required.', 'danger')
        return redirect(url_for('admin.settings'))

    try:
        administrator = AuthApi(get_api_client()).update_profile(changes)
    except UnauthorizedError:
        raise
    except ApiError as e:
        flash(e.message or 'Could not update profile.', 'danger')
        return redirect(url_for('admin.settings'))
    except PayloadError as e:
        logger.warning('Unusable profile response: %s', e)
        flash('The server returned data in an unexpected format.', 'danger')
        return redirect(url_for('admin.settings'))

    get_session_store().update_administrator(administrator)
    flash('Profile updated.', 'success')
    return redirect(url_for('admin.settings'))
