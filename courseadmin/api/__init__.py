"""
API Package

Client for the remote admin REST API, wired to the per-request session store.
"""

from flask import current_app, g

from courseadmin.api.client import ApiClient, BearerTokenAuth
from courseadmin.api.errors import ApiError, UnauthorizedError
from courseadmin.api.resources import (
    AnnouncementsApi, AuthApi, CategoriesApi, CompaniesApi, CoursesApi, PaymentsApi,
    ReviewsApi, UsersApi, VideosApi, decode_login,
)
from courseadmin.session import get_session_store


def get_api_client():
    """Return this request's API client, authenticated as the session's administrator."""
    if 'api_client' not in g:
        store = get_session_store()
        g.api_client = ApiClient.from_config(
            current_app.config,
            token_provider=lambda: store.credential,
            on_unauthorized=store.logout,
        )
    return g.api_client


def videos_api():
    return VideosApi(get_api_client(), current_app.config['VIDEOS_API_URL'])


__all__ = [
    'ApiClient',
    'BearerTokenAuth',
    'ApiError',
    'UnauthorizedError',
    'AuthApi',
    'UsersApi',
    'CoursesApi',
    'VideosApi',
    'CategoriesApi',
    'PaymentsApi',
    'ReviewsApi',
    'AnnouncementsApi',
    'CompaniesApi',
    'decode_login',
    'get_api_client',
    'videos_api',
]
