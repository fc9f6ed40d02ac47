"""
Course Management Routes

Course list, creation and the course editor with pack videos.
"""

from flask import flash, redirect, render_template, request, url_for

from courseadmin.admin import admin_bp
from courseadmin.admin.helpers import form_fields, mutate, uploaded_files
from courseadmin.api import ApiError, CoursesApi, UnauthorizedError, get_api_client
from courseadmin.auth.decorators import admin_required
from courseadmin.models import PayloadError
from courseadmin.models.course import COURSE_LEVELS, COURSE_TYPES
from courseadmin.services import fetch

COURSE_FIELDS = ('title', 'description', 'price', 'category', 'instructor', 'level', 'totalDuration')


@admin_bp.route('/courses')
@admin_required
def courses():
    course_type = request.args.get('type', 'all')
    if course_type not in COURSE_TYPES:
        course_type = 'all'
    search = request.args.get('search', '').strip().lower()

    listing = fetch(CoursesApi(get_api_client()).list,
                    course_type if course_type != 'all' else None, default=[])
    shown = [c for c in listing.data
             if not search or search in c.title.lower() or search in c.slug.lower()]
    return render_template('admin/courses.html', courses=listing, shown=shown,
                           course_type=course_type, search=search,
                           course_types=COURSE_TYPES, levels=COURSE_LEVELS)


@admin_bp.route('/courses', methods=['POST'])
@admin_required
def create_course():
    fields = form_fields(*COURSE_FIELDS, 'type', 'videoUrl', 'videoTitle', 'videoDuration',
                         price='0', level='beginner', type='single', totalDuration='0 hours')
    files = uploaded_files('thumbnail')

    if not fields['title'] or not fields['description'] or 'thumbnail' not in files:
        flash('Please fill in all required fields.', 'danger')
        return redirect(url_for('admin.courses'))
    if fields['type'] not in COURSE_TYPES:
        flash('Unknown course type.', 'danger')
        return redirect(url_for('admin.courses'))

    if fields['type'] == 'single':
        if not fields['videoUrl']:
            flash('Video URL is required for single video courses.', 'danger')
            return redirect(url_for('admin.courses'))
        fields['videoTitle'] = fields['videoTitle'] or fields['title']
        fields['videoDuration'] = fields['videoDuration'] or '0:00'
    else:
        for key in ('videoUrl', 'videoTitle', 'videoDuration'):
            fields.pop(key)

    api = CoursesApi(get_api_client())
    mutate(lambda: api.create(fields, files), 'Course created successfully.', 'Failed to create course')
    return redirect(url_for('admin.courses'))


@admin_bp.route('/courses/<course_id>/delete', methods=['POST'])
@admin_required
def delete_course(course_id):
    api = CoursesApi(get_api_client())
    mutate(lambda: api.delete(course_id), 'Course deleted.', 'Failed to delete course')
    return redirect(url_for('admin.courses'))


@admin_bp.route('/courses/<course_id>')
@admin_required
def edit_course(course_id):
    """Course editor."""
    try:
        course = CoursesApi(get_api_client()).get(course_id)
    except UnauthorizedError:
        raise
    except (ApiError, PayloadError) as e:
        flash(getattr(e, 'message', None) or 'Failed to fetch course', 'danger')
        return redirect(url_for('admin.courses'))
    return render_template('admin/course_editor.html', course=course, levels=COURSE_LEVELS)


@admin_bp.route('/courses/<course_id>', methods=['POST'])
@admin_required
def update_course(course_id):
    fields = form_fields(*COURSE_FIELDS, price='0', level='beginner')
    if not fields['title']:
        flash('Course title is required.', 'danger')
        return redirect(url_for('admin.edit_course', course_id=course_id))
    api = CoursesApi(get_api_client())
    mutate(lambda: api.update(course_id, fields, uploaded_files('thumbnail')),
           'Course updated successfully.', 'Failed to update course')
    return redirect(url_for('admin.edit_course', course_id=course_id))


@admin_bp.route('/courses/<course_id>/videos', methods=['POST'])
@admin_required
def add_course_video(course_id):
    fields = form_fields('title', 'url', 'duration', duration='0:00')
    files = uploaded_files('video')
    if not fields['title'] or not (fields['url'] or files):
        flash('A video needs a title and either a URL or a file.', 'danger')
        return redirect(url_for('admin.edit_course', course_id=course_id))
    api = CoursesApi(get_api_client())
    mutate(lambda: api.add_video(course_id, fields, files), 'Video added.', 'Failed to add video')
    return redirect(url_for('admin.edit_course', course_id=course_id))


@admin_bp.route('/courses/<course_id>/videos/<video_id>', methods=['POST'])
@admin_required
def update_course_video(course_id, video_id):
    fields = form_fields('title', 'url', 'duration')
    if not fields['title']:
        flash('Video title is required.', 'danger')
        return redirect(url_for('admin.edit_course', course_id=course_id))
    api = CoursesApi(get_api_client())
    mutate(lambda: api.update_video(course_id, video_id, fields), 'Video updated.', 'Failed to update video')
    return redirect(url_for('admin.edit_course', course_id=course_id))


@admin_bp.route('/courses/<course_id>/videos/<video_id>/delete', methods=['POST'])
@admin_required
def delete_course_video(course_id, video_id):
    api = CoursesApi(get_api_client())
    mutate(lambda: api.delete_video(course_id, video_id), 'Video deleted.', 'Failed to delete video')
    return redirect(url_for('admin.edit_course', course_id=course_id))
