"""
Review Moderation Routes
"""

from flask import redirect, render_template, request, url_for

from courseadmin.admin import admin_bp
from courseadmin.admin.helpers import mutate
from courseadmin.api import ReviewsApi, get_api_client
from courseadmin.auth.decorators import admin_required
from courseadmin.services import fetch

REVIEW_FILTERS = ('all', 'spam', 'hidden', 'visible')


def filter_reviews(reviews, search='', kind='all'):
    shown = [r for r in reviews if not search or r.matches(search)]
    if kind == 'spam':
        return [r for r in shown if r.is_spam]
    if kind == 'hidden':
        return [r for r in shown if r.status == 'hidden']
    if kind == 'visible':
        return [r for r in shown if r.is_visible]
    return shown


def _back_to_list():
    return redirect(url_for('admin.reviews', search=request.args.get('search') or None,
                            filter=request.args.get('filter') or None))


@admin_bp.route('/reviews')
@admin_required
def reviews():
    search = request.args.get('search', '').strip()
    kind = request.args.get('filter', 'all')
    if kind not in REVIEW_FILTERS:
        kind = 'all'
    listing = fetch(ReviewsApi(get_api_client()).list, default=[])
    return render_template('admin/reviews.html', reviews=listing,
                           shown=filter_reviews(listing.data, search, kind),
                           search=search, kind=kind, filters=REVIEW_FILTERS)


@admin_bp.route('/reviews/<review_id>/visibility', methods=['POST'])
@admin_required
def toggle_review_visibility(review_id):
    api = ReviewsApi(get_api_client())
    mutate(lambda: api.toggle_visibility(review_id), 'Review visibility updated.', 'Could not update review')
    return _back_to_list()


@admin_bp.route('/reviews/<review_id>/spam', methods=['POST'])
@admin_required
def toggle_review_spam(review_id):
    api = ReviewsApi(get_api_client())
    mutate(lambda: api.toggle_spam(review_id), 'Spam flag updated.', 'Could not update review')
    return _back_to_list()


@admin_bp.route('/reviews/<review_id>/delete', methods=['POST'])
@admin_required
def delete_review(review_id):
    api = ReviewsApi(get_api_client())
    mutate(lambda: api.delete(review_id), 'Review deleted.', 'Could not delete review')
    return _back_to_list()
