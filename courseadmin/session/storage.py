"""
Durable Storage

String key/value stores with the browser local-storage surface. The
production store is the signed Flask session cookie, so it lives exactly as
long as the administrator's browser profile keeps the cookie.
"""


class DurableStorage:
    """Interface for the session store's persistence medium."""

    def get_item(self, key):
        raise NotImplementedError

    def set_item(self, key, value):
        raise NotImplementedError

    def remove_item(self, key):
        raise NotImplementedError


class CookieStorage(DurableStorage):
    """Stores values in the Flask ``session`` of the current request."""

    def __init__(self, session):
        self._session = session

    def get_item(self, key):
        return self._session.get(key)

    def set_item(self, key, value):
        self._session.permanent = True
        self._session[key] = value

    def remove_item(self, key):
        self._session.pop(key, None)


class MemoryStorage(DurableStorage):
    """Dict-backed store for tests and scripts."""

    def __init__(self, initial=None):
        self.items = dict(initial or {})

    def get_item(self, key):
        return self.items.get(key)

    def set_item(self, key, value):
        self.items[key] = value

    def remove_item(self, key):
        self.items.pop(key, None)
