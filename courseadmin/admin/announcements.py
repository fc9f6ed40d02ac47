"""
Announcement Routes
"""

from flask import flash, redirect, render_template, request, url_for

from courseadmin.admin import admin_bp
from courseadmin.admin.helpers import mutate
from courseadmin.api import AnnouncementsApi, get_api_client
from courseadmin.auth.decorators import admin_required
from courseadmin.models import RECIPIENT_OPTIONS
from courseadmin.services import fetch


@admin_bp.route('/announcements')
@admin_required
def announcements():
    listing = fetch(AnnouncementsApi(get_api_client()).list, default=[])
    return render_template('admin/announcements.html', announcements=listing,
                           recipient_options=RECIPIENT_OPTIONS)


@admin_bp.route('/announcements', methods=['POST'])
@admin_required
def create_announcement():
    title = request.form.get('title', '').strip()
    content = request.form.get('content', '').strip()
    expiry_date = request.form.get('expiry_date', '').strip()
    recipients = [r for r in request.form.getlist('recipients') if r in RECIPIENT_OPTIONS]

    if not title or not content or not recipients:
        flash('Please fill title, content, and select at least one recipient.', 'danger')
        return redirect(url_for('admin.announcements'))

    api = AnnouncementsApi(get_api_client())
    mutate(lambda: api.create(title, content, recipients, expiry_date),
           'Announcement published.', 'Failed to create announcement')
    return redirect(url_for('admin.announcements'))


@admin_bp.route('/announcements/<announcement_id>/toggle', methods=['POST'])
@admin_required
def toggle_announcement(announcement_id):
    api = AnnouncementsApi(get_api_client())
    mutate(lambda: api.toggle(announcement_id), 'Announcement status updated.', 'Failed to toggle status')
    return redirect(url_for('admin.announcements'))


@admin_bp.route('/announcements/<announcement_id>/delete', methods=['POST'])
@admin_required
def delete_announcement(announcement_id):
    api = AnnouncementsApi(get_api_client())
    mutate(lambda: api.delete(announcement_id), 'Announcement deleted.', 'Failed to delete announcement')
    return redirect(url_for('admin.announcements'))
