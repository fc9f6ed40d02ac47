"""
Video Routes

Standalone video uploads, video categories and the per-category playlist.
"""

from flask import flash, redirect, render_template, request, url_for

from courseadmin.admin import admin_bp
from courseadmin.admin.helpers import form_fields, mutate, uploaded_files
from courseadmin.api import CategoriesApi, get_api_client, videos_api
from courseadmin.auth.decorators import admin_required
from courseadmin.services import fetch

VIDEO_ACCESS = ('free', 'premium')


@admin_bp.route('/videos')
@admin_required
def videos():
    search = request.args.get('search', '').strip().lower()
    listing = fetch(videos_api().list, default=[])
    shown = [v for v in listing.data
             if not search or search in v.title.lower() or search in v.description.lower()]
    return render_template('admin/videos.html', videos=listing, shown=shown,
                           search=search, access_options=VIDEO_ACCESS)


@admin_bp.route('/videos', methods=['POST'])
@admin_required
def upload_video():
    fields = form_fields('title', 'description', 'access', 'duration', 'thumbnail',
                         'instructor', 'price', access='free', price='0')
    fields['isPreview'] = 'true' if request.form.get('isPreview') else 'false'
    files = uploaded_files('video')

    if 'video' not in files or not fields['title']:
        flash('A title and a video file are required.', 'danger')
        return redirect(url_for('admin.videos'))
    if fields['access'] not in VIDEO_ACCESS:
        flash('Unknown access level.', 'danger')
        return redirect(url_for('admin.videos'))

    api = videos_api()
    mutate(lambda: api.upload(fields, files), 'Video uploaded.', 'Video upload failed')
    return redirect(url_for('admin.videos'))


@admin_bp.route('/videos/<video_id>/delete', methods=['POST'])
@admin_required
def delete_video(video_id):
    api = videos_api()
    mutate(lambda: api.delete(video_id), 'Video deleted.', 'Failed to delete video')
    return redirect(url_for('admin.videos'))


@admin_bp.route('/videos/categories')
@admin_required
def video_categories():
    listing = fetch(CategoriesApi(get_api_client()).list, default=[])
    return render_template('admin/video_categories.html', categories=listing)


@admin_bp.route('/videos/categories', methods=['POST'])
@admin_required
def create_video_category():
    fields = form_fields('title', 'description', 'price', price='0')
    files = uploaded_files('image')
    if not fields['title'] or 'image' not in files:
        flash('A category needs a title and an image.', 'danger')
        return redirect(url_for('admin.video_categories'))
    api = CategoriesApi(get_api_client())
    mutate(lambda: api.create(fields, files), 'Category created!', 'Error creating category')
    return redirect(url_for('admin.video_categories'))


@admin_bp.route('/videos/categories/<category_id>/delete', methods=['POST'])
@admin_required
def delete_video_category(category_id):
    api = CategoriesApi(get_api_client())
    mutate(lambda: api.delete(category_id), 'Category deleted!', 'Failed to delete category')
    return redirect(url_for('admin.video_categories'))


@admin_bp.route('/videos/category/<slug>')
@admin_required
def category_videos(slug):
    listing = fetch(CategoriesApi(get_api_client()).videos, slug, default=[])
    if listing.error:
        listing.error = 'Failed to load videos.'
    selected_id = request.args.get('video')
    selected = next((v for v in listing.data if v.id == selected_id), None)
    if selected is None and listing.data:
        selected = listing.data[0]
    return render_template('admin/category_videos.html', slug=slug, videos=listing, selected=selected)
