import json

import pytest
import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from courseadmin import create_app
from courseadmin.config import TestConfig
from courseadmin.models import Administrator
from courseadmin.session import ADMIN_KEY, TOKEN_KEY

API = 'http://api.test/api/admin'
VIDEOS_API = 'http://api.test/api/videos'

MAIN_ADMIN = {'_id': 'a1', 'email': 'main@example.com', 'name': 'Main', 'surname': 'Admin', 'adminRole': 'main'}
COMPANY_ADMIN = {'_id': 'a2', 'email': 'company@example.com', 'name': 'Company', 'adminRole': 'company',
                 'companyId': 'c1'}


class FakeApi(BaseAdapter):
    """Transport adapter answering API calls from a routing table."""

    def __init__(self):
        super().__init__()
        self.routes = {}
        self.requests = []

    def add(self, method, url, status=200, body=None, raise_exc=None):
        self.routes[(method, url)] = (status, body, raise_exc)

    def calls(self, method=None, url=None):
        return [r for r in self.requests
                if (method is None or r.method == method) and (url is None or r.url.split('?')[0] == url)]

    def send(self, request, **kwargs):
        self.requests.append(request)
        status, body, raise_exc = self.routes.get(
            (request.method, request.url.split('?')[0]), (404, {'message': 'Not found'}, None))
        if raise_exc is not None:
            raise raise_exc

        response = requests.Response()
        response.status_code = status
        if body is None:
            response._content = b''
        elif isinstance(body, (bytes, str)):
            response._content = body.encode() if isinstance(body, str) else body
        else:
            response._content = json.dumps(body).encode()
        response.headers = CaseInsensitiveDict({'Content-Type': 'application/json'})
        response.encoding = 'utf-8'
        response.url = request.url
        response.request = request
        return response

    def close(self):
        pass


@pytest.fixture()
def api():
    return FakeApi()


@pytest.fixture()
def app(api):
    app = create_app(TestConfig)
    app.config['API_TRANSPORT_ADAPTER'] = api
    return app


@pytest.fixture()
def client(app):
    return app.test_client()


def store_session(client, admin=None, token='tok-123'):
    """Persist an administrator and token the way a successful login does."""
    admin = admin or MAIN_ADMIN
    with client.session_transaction() as sess:
        sess[ADMIN_KEY] = Administrator.from_dict(admin).to_json()
        sess[TOKEN_KEY] = token


@pytest.fixture()
def logged_in(client):
    store_session(client)
    return client
