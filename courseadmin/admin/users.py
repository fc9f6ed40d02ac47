"""
User Management Routes
"""

from flask import flash, redirect, render_template, request, url_for

from courseadmin.admin import admin_bp
from courseadmin.admin.helpers import form_fields, mutate
from courseadmin.api import UsersApi, get_api_client
from courseadmin.auth.decorators import admin_required
from courseadmin.services import fetch

USER_FILTERS = ('search', 'gender', 'status', 'plan')


def _back_to_list():
    filters = {key: request.args.get(key) for key in USER_FILTERS if request.args.get(key)}
    return redirect(url_for('admin.users', **filters))


@admin_bp.route('/users')
@admin_required
def users():
    """Platform users with search and filters."""
    filters = {key: request.args.get(key, '').strip() for key in USER_FILTERS}
    api = UsersApi(get_api_client())
    user_list = fetch(api.list, default=[], **filters)
    courses = fetch(api.available_courses, default=[]) if user_list.ok else None
    return render_template('admin/users.html', users=user_list, courses=courses, filters=filters)


@admin_bp.route('/users', methods=['POST'])
@admin_required
def add_user():
    fields = form_fields('name', 'surname', 'email', 'password', 'gender')
    if not fields['name'] or not fields['email'] or not fields['password']:
        flash('Name, email and password are required.', 'danger')
        return _back_to_list()
    api = UsersApi(get_api_client())
    mutate(lambda: api.create(fields), 'User added.', 'Failed to add user')
    return _back_to_list()


@admin_bp.route('/users/<user_id>/premium', methods=['POST'])
@admin_required
def toggle_user_premium(user_id):
    api = UsersApi(get_api_client())
    mutate(lambda: api.toggle_premium(user_id), 'Premium access updated.', 'Could not update premium access')
    return _back_to_list()


@admin_bp.route('/users/<user_id>/status', methods=['POST'])
@admin_required
def toggle_user_status(user_id):
    api = UsersApi(get_api_client())
    mutate(lambda: api.toggle_status(user_id), 'User status updated.', 'Could not update user status')
    return _back_to_list()


@admin_bp.route('/users/<user_id>/delete', methods=['POST'])
@admin_required
def delete_user(user_id):
    api = UsersApi(get_api_client())
    mutate(lambda: api.delete(user_id), 'User deleted.', 'Could not delete user')
    return _back_to_list()


@admin_bp.route('/users/<user_id>/assign-course', methods=['POST'])
@admin_required
def assign_course(user_id):
    course_id = request.form.get('course_id', '').strip()
    if not course_id:
        flash('Please select a course to assign.', 'danger')
        return _back_to_list()
    api = UsersApi(get_api_client())
    mutate(lambda: api.assign_course(user_id, course_id), 'Course assigned.', 'Could not assign course')
    return _back_to_list()
