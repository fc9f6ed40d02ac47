"""
Admin API HTTP client.

Every outbound request carries the session's bearer token, and every 401
response clears the session before the error reaches the caller, whichever
screen issued the request.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import requests

from courseadmin.api.errors import ApiError, UnauthorizedError

logger = logging.getLogger(__name__)


def _sent_token(response) -> bool:
    request = response.request
    return request is not None and 'Authorization' in request.headers


class BearerTokenAuth(requests.auth.AuthBase):
    """Attaches ``Authorization: Bearer <token>`` read at send time."""

    def __init__(self, token_provider: Callable[[], str | None]):
        self._token_provider = token_provider

    def __call__(self, request):
        token = self._token_provider()
        if token:
            request.headers['Authorization'] = f'Bearer {token}'
        return request


class ApiClient:
    def __init__(
        self,
        base_url: str,
        token_provider: Callable[[], str | None] = lambda: None,
        on_unauthorized: Callable[[], None] | None = None,
        timeout_seconds: float = 10,
        adapter: requests.adapters.BaseAdapter | None = None,
    ):
        self._base_url = base_url.rstrip('/')
        self._timeout_seconds = timeout_seconds
        self._on_unauthorized = on_unauthorized
        self._auth = BearerTokenAuth(token_provider)

        self.session = requests.Session()
        self.session.headers.update({'Accept': 'application/json'})
        self.session.hooks['response'].append(self._handle_unauthorized)
        if adapter is not None:
            self.session.mount('http://', adapter)
            self.session.mount('https://', adapter)

    @classmethod
    def from_config(cls, config, **kwargs) -> 'ApiClient':
        return cls(
            base_url=config['API_BASE_URL'],
            timeout_seconds=config['API_TIMEOUT_SECONDS'],
            adapter=config.get('API_TRANSPORT_ADAPTER'),
            **kwargs,
        )

    def _handle_unauthorized(self, response, *args, **kwargs):
        # Only a rejected bearer token ends the session
        if (response.status_code == 401 and self._on_unauthorized is not None
                and _sent_token(response)):
            logger.info('API answered 401 for %s, clearing session', response.url)
            self._on_unauthorized()
        return response

    def url_for(self, path: str) -> str:
        if path.startswith(('http://', 'https://')):
            return path
        return f'{self._base_url}{path}'

    def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
        authenticated: bool = True,
    ) -> Any:
        url = self.url_for(path)
        try:
            response = self.session.request(
                method,
                url,
                params=params,
                json=json,
                data=data,
                files=files,
                auth=self._auth if authenticated else None,
                timeout=self._timeout_seconds,
            )
        except requests.exceptions.Timeout:
            logger.warning('%s %s timed out', method, url)
            raise ApiError(0, 'The server took too long to respond.') from None
        except requests.exceptions.RequestException as e:
            logger.warning('%s %s failed: %s', method, url, e)
            raise ApiError(0, 'Could not reach the server.') from e

        if response.ok:
            if not response.content:
                return {}
            try:
                return response.json()
            except ValueError:
                raise ApiError(response.status_code, 'The server returned an invalid response.') from None

        message = self._error_message(response)
        logger.debug('%s %s -> %s: %s', method, url, response.status_code, message)
        if response.status_code == 401 and _sent_token(response):
            raise UnauthorizedError(message) if message else UnauthorizedError()
        raise ApiError(response.status_code, message)

    @staticmethod
    def _error_message(response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text[:500]
        if isinstance(body, dict):
            return str(body.get('message') or body.get('error') or '')
        return ''

    def get(self, path: str, params: dict[str, Any] | None = None, **kwargs) -> Any:
        return self.request('GET', path, params=params, **kwargs)

    def post(self, path: str, json: Any = None, **kwargs) -> Any:
        return self.request('POST', path, json=json, **kwargs)

    def put(self, path: str, json: Any = None, **kwargs) -> Any:
        return self.request('PUT', path, json=json, **kwargs)

    def patch(self, path: str, json: Any = None, **kwargs) -> Any:
        return self.request('PATCH', path, json=json, **kwargs)

    def delete(self, path: str, **kwargs) -> Any:
        return self.request('DELETE', path, **kwargs)
