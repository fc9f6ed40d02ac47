"""
Company Management Routes

Partner companies and their company-scoped administrators. Only main
platform administrators may open these screens.
"""

import logging

from flask import flash, redirect, render_template, request, url_for

from courseadmin.admin import admin_bp
from courseadmin.admin.helpers import form_fields, mutate
from courseadmin.api import ApiError, CompaniesApi, UnauthorizedError, get_api_client
from courseadmin.auth.decorators import main_admin_required
from courseadmin.models import PayloadError
from courseadmin.services import fetch

logger = logging.getLogger(__name__)

COMPANY_FIELDS = ('name', 'description', 'contactEmail', 'contactPhone')


def load_companies_with_stats(api):
    """List companies, attaching stats where the stats call succeeds."""
    companies = api.list()
    for company in companies:
        try:
            company.stats = api.stats(company.id)
        except UnauthorizedError:
            raise
        except (ApiError, PayloadError) as e:
            logger.warning('Failed to fetch stats for company %s: %s', company.id, e)
    return companies


@admin_bp.route('/companies')
@main_admin_required
def companies():
    search = request.args.get('search', '').strip().lower()
    listing = fetch(load_companies_with_stats, CompaniesApi(get_api_client()), default=[])
    shown = [c for c in listing.data
             if not search or search in c.name.lower() or search in (c.contact_email or '').lower()]
    return render_template('admin/companies.html', companies=listing, shown=shown, search=search)


@admin_bp.route('/companies', methods=['POST'])
@main_admin_required
def create_company():
    fields = form_fields(*COMPANY_FIELDS)
    if not fields['name']:
        flash('Company name is required.', 'danger')
        return redirect(url_for('admin.companies'))
    api = CompaniesApi(get_api_client())
    mutate(lambda: api.create(fields), 'Company created successfully.', 'Failed to create company')
    return redirect(url_for('admin.companies'))


@admin_bp.route('/companies/<company_id>', methods=['POST'])
@main_admin_required
def update_company(company_id):
    fields = form_fields(*COMPANY_FIELDS)
    if not fields['name']:
        flash('Company name is required.', 'danger')
        return redirect(url_for('admin.companies'))
    api = CompaniesApi(get_api_client())
    mutate(lambda: api.update(company_id, fields), 'Company updated successfully.', 'Failed to update company')
    return redirect(url_for('admin.companies'))


@admin_bp.route('/companies/<company_id>/delete', methods=['POST'])
@main_admin_required
def delete_company(company_id):
    api = CompaniesApi(get_api_client())
    mutate(lambda: api.delete(company_id), 'Company deleted successfully.', 'Failed to delete company')
    return redirect(url_for('admin.companies'))


@admin_bp.route('/companies/<company_id>/toggle-status', methods=['POST'])
@main_admin_required
def toggle_company_status(company_id):
    api = CompaniesApi(get_api_client())
    mutate(lambda: api.toggle_status(company_id), 'Company status updated.', 'Failed to update company status')
    return redirect(url_for('admin.companies'))


@admin_bp.route('/companies/<company_id>/admins', methods=['POST'])
@main_admin_required
def create_company_admin(company_id):
    fields = form_fields('name', 'surname', 'email', 'password')
    if not fields['name'] or not fields['email'] or not fields['password']:
        flash('Name, email and password are required.', 'danger')
        return redirect(url_for('admin.companies'))
    api = CompaniesApi(get_api_client())
    mutate(lambda: api.create_admin(company_id, fields),
           f'Company admin {fields["email"]} created.', 'Failed to create company admin')
    return redirect(url_for('admin.companies'))
