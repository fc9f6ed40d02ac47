"""
Payment Ledger Routes
"""

from flask import render_template, request

from courseadmin.admin import admin_bp
from courseadmin.api import PaymentsApi, get_api_client
from courseadmin.auth.decorators import admin_required
from courseadmin.services import fetch


def filter_payments(payments, search='', status='all'):
    shown = [p for p in payments if not search or p.matches(search)]
    if status == 'completed':
        shown = [p for p in shown if p.is_completed]
    return shown


@admin_bp.route('/payments')
@admin_required
def payments():
    search = request.args.get('search', '').strip()
    status = request.args.get('filter', 'all')
    listing = fetch(PaymentsApi(get_api_client()).list, default=[])

    completed = [p for p in listing.data if p.is_completed]
    summary = {
        'total_revenue': sum(p.amount for p in completed),
        'completed': len(completed),
        'total': len(listing.data),
    }
    return render_template('admin/payments.html', payments=listing,
                           shown=filter_payments(listing.data, search, status),
                           summary=summary, search=search, status=status)
