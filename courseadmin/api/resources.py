"""
Admin API resources.

Thin wrappers around :class:`ApiClient`, one per dashboard area. Each
decodes payloads into the record types in :mod:`courseadmin.models`.
"""

from __future__ import annotations

from typing import Any

from courseadmin.api.client import ApiClient
from courseadmin.models import (
    Administrator, Announcement, Company, CompanyStats, Course, Payment, PayloadError,
    PlatformUser, Review, Video, VideoCategory, decode_list, unwrap,
)


class _Resource:
    def __init__(self, client: ApiClient):
        self._client = client


class AuthApi(_Resource):
    def login(self, email: str, password: str) -> tuple[Administrator, str]:
        payload = self._client.post(
            '/auth/login', {'email': email, 'password': password}, authenticated=False,
        )
        return decode_login(payload)

    def signup(self, name: str, email: str, password: str) -> dict[str, Any]:
        return self._client.post(
            '/auth/signup', {'name': name, 'email': email, 'password': password},
            authenticated=False,
        )

    def forgot_password(self, email: str) -> dict[str, Any]:
        return self._client.post('/auth/forgot-password', {'email': email}, authenticated=False)

    def update_profile(self, changes: dict[str, Any]) -> Administrator:
        payload = unwrap(self._client.put('/auth/profile', changes))
        if isinstance(payload, dict) and isinstance(payload.get('admin'), dict):
            payload = payload['admin']
        return Administrator.from_dict(payload)


def decode_login(payload: Any) -> tuple[Administrator, str]:
    """Split a login response into the administrator record and its token."""
    payload = unwrap(payload)
    if not isinstance(payload, dict):
        raise PayloadError('Login response must be an object')
    token = payload.get('token')
    if not isinstance(token, str) or not token:
        raise PayloadError('Login response carries no token')
    identity = payload.get('admin') or payload.get('user')
    return Administrator.from_dict(identity), token


class UsersApi(_Resource):
    def list(self, search: str = '', gender: str = '', status: str = '', plan: str = '') -> list[PlatformUser]:
        params = {key: value for key, value in
                  (('search', search), ('gender', gender), ('status', status), ('plan', plan))
                  if value}
        return decode_list(self._client.get('/users', params=params), PlatformUser)

    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        return self._client.post('/users', fields)

    def toggle_premium(self, user_id: str) -> dict[str, Any]:
        return self._client.put(f'/users/{user_id}/premium')

    def toggle_status(self, user_id: str) -> dict[str, Any]:
        return self._client.put(f'/users/{user_id}/status')

    def delete(self, user_id: str) -> dict[str, Any]:
        return self._client.delete(f'/users/{user_id}')

    def available_courses(self) -> list[Course]:
        return decode_list(self._client.get('/users/available-courses'), Course)

    def assign_course(self, user_id: str, course_id: str) -> dict[str, Any]:
        return self._client.post(f'/users/{user_id}/assign-course', {'courseId': course_id})


class CoursesApi(_Resource):
    def list(self, course_type: str | None = None) -> list[Course]:
        params = {'type': course_type} if course_type else None
        return decode_list(self._client.get('/courses', params=params), Course)

    def get(self, course_id: str) -> Course:
        return Course.from_dict(unwrap(self._client.get(f'/courses/{course_id}')))

    def create(self, fields: dict[str, Any], files: dict[str, Any]) -> dict[str, Any]:
        return self._client.request('POST', '/courses', data=fields, files=files)

    def update(self, course_id: str, fields: dict[str, Any], files: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._client.request('PUT', f'/courses/{course_id}', data=fields, files=files or None)

    def delete(self, course_id: str) -> dict[str, Any]:
        return self._client.delete(f'/courses/{course_id}')

    def add_video(self, course_id: str, fields: dict[str, Any], files: dict[str, Any] | None = None) -> dict[str, Any]:
        return self._client.request('POST', f'/courses/{course_id}/videos', data=fields, files=files or None)

    def update_video(self, course_id: str, video_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        return self._client.put(f'/courses/{course_id}/videos/{video_id}', fields)

    def delete_video(self, course_id: str, video_id: str) -> dict[str, Any]:
        return self._client.delete(f'/courses/{course_id}/videos/{video_id}')


class VideosApi(_Resource):
    def __init__(self, client: ApiClient, catalogue_url: str):
        super().__init__(client)
        self._catalogue_url = catalogue_url

    def list(self) -> list[Video]:
        return decode_list(self._client.get(self._catalogue_url), Video)

    def upload(self, fields: dict[str, Any], files: dict[str, Any]) -> dict[str, Any]:
        return self._client.request('POST', '/videos/upload', data=fields, files=files)

    def delete(self, video_id: str) -> dict[str, Any]:
        return self._client.delete(f'/videos/{video_id}')


class CategoriesApi(_Resource):
    def list(self) -> list[VideoCategory]:
        return decode_list(self._client.get('/video-categories'), VideoCategory)

    def create(self, fields: dict[str, Any], files: dict[str, Any]) -> dict[str, Any]:
        return self._client.request('POST', '/video-categories', data=fields, files=files)

    def delete(self, category_id: str) -> dict[str, Any]:
        return self._client.delete(f'/video-categories/{category_id}')

    def videos(self, slug: str) -> list[Video]:
        return decode_list(self._client.get(f'/videos/category/{slug}'), Video)


class PaymentsApi(_Resource):
    def list(self) -> list[Payment]:
        return decode_list(self._client.get('/payments'), Payment)


class ReviewsApi(_Resource):
    def list(self) -> list[Review]:
        return decode_list(self._client.get('/reviews'), Review)

    def toggle_visibility(self, review_id: str) -> dict[str, Any]:
        return self._client.patch(f'/reviews/{review_id}/visibility')

    def toggle_spam(self, review_id: str) -> dict[str, Any]:
        return self._client.patch(f'/reviews/{review_id}/spam')

    def delete(self, review_id: str) -> dict[str, Any]:
        return self._client.delete(f'/reviews/{review_id}')


class AnnouncementsApi(_Resource):
    def list(self) -> list[Announcement]:
        return decode_list(self._client.get('/announcements'), Announcement)

    def create(self, title: str, content: str, recipients: list[str], expiry_date: str = '') -> dict[str, Any]:
        return self._client.post('/announcements', {
            'title': title,
            'content': content,
            'recipients': recipients,
            'expiryDate': expiry_date or None,
        })

    def toggle(self, announcement_id: str) -> dict[str, Any]:
        return self._client.patch(f'/announcements/toggle/{announcement_id}')

    def delete(self, announcement_id: str) -> dict[str, Any]:
        return self._client.delete(f'/announcements/{announcement_id}')


class CompaniesApi(_Resource):
    def list(self) -> list[Company]:
        return decode_list(self._client.get('/companies'), Company)

    def stats(self, company_id: str) -> CompanyStats:
        payload = unwrap(self._client.get(f'/companies/{company_id}/stats'))
        if isinstance(payload, dict) and isinstance(payload.get('stats'), dict):
            payload = payload['stats']
        return CompanyStats.from_dict(payload)

    def create(self, fields: dict[str, Any]) -> dict[str, Any]:
        return self._client.post('/companies', fields)

    def update(self, company_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        return self._client.put(f'/companies/{company_id}', fields)

    def delete(self, company_id: str) -> dict[str, Any]:
        return self._client.delete(f'/companies/{company_id}')

    def toggle_status(self, company_id: str) -> dict[str, Any]:
        return self._client.patch(f'/companies/{company_id}/toggle-status')

    def create_admin(self, company_id: str, fields: dict[str, Any]) -> dict[str, Any]:
        return self._client.post(f'/companies/{company_id}/admins', fields)
