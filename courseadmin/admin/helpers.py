"""
Shared helpers for the admin views.
"""

import logging

from flask import flash, request
from werkzeug.utils import secure_filename

from courseadmin.api import ApiError, UnauthorizedError

logger = logging.getLogger(__name__)


def mutate(action, success_message, failure_message):
    """Run one API mutation and flash its outcome. Returns True on success."""
    try:
        action()
    except UnauthorizedError:
        raise
    except ApiError as e:
        logger.info('%s: %s', failure_message, e)
        flash(e.message or failure_message, 'danger')
        return False
    flash(success_message, 'success')
    return True


def uploaded_files(*names):
    """Collect non-empty file inputs in the shape ``requests`` expects for multipart."""
    files = {}
    for name in names:
        storage = request.files.get(name)
        if storage is not None and storage.filename:
            files[name] = (secure_filename(storage.filename), storage.stream, storage.mimetype)
    return files


def form_fields(*names, **defaults):
    """Stripped form values for ``names``; blank values fall back to ``defaults``."""
    values = {}
    for name in names:
        value = request.form.get(name, '').strip()
        values[name] = value or defaults.get(name, '')
    return values
