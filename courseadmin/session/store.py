"""
Session Store

Single source of truth for who is logged in. The administrator record and
the bearer token are always set and cleared together; the store is the only
writer of their storage keys.
"""

import enum
import logging

from flask import g

from courseadmin.models import Administrator, PayloadError

logger = logging.getLogger(__name__)

ADMIN_KEY = 'admin-user'
TOKEN_KEY = 'admin-token'
RETURN_PATH_KEY = 'admin-return-after-login'


class LoadState(enum.Enum):
    NOT_CHECKED = 'not-yet-checked'
    CHECKING = 'checking'
    SETTLED = 'settled'


class SessionStore:
    """Holds the current administrator and credential, backed by durable storage."""

    def __init__(self, storage):
        self._storage = storage
        self.administrator = None
        self.credential = None
        self.state = LoadState.NOT_CHECKED

    @property
    def is_loading(self):
        return self.state is not LoadState.SETTLED

    @property
    def is_authenticated(self):
        return self.administrator is not None and self.credential is not None

    def restore(self):
        """Load the persisted session. Never raises; bad data means logged out."""
        self.state = LoadState.CHECKING
        try:
            raw_admin = self._storage.get_item(ADMIN_KEY)
            raw_token = self._storage.get_item(TOKEN_KEY)

            if raw_admin and raw_token:
                if not isinstance(raw_token, str):
                    raise PayloadError('Stored token is not a string')
                self.administrator = Administrator.from_json(raw_admin)
                self.credential = raw_token
            elif raw_admin or raw_token:
                logger.warning('Discarding half-persisted admin session')
                self._clear()
        except Exception as e:
            logger.warning('Could not restore admin session, clearing it: %s', e)
            self._wipe()
        finally:
            self.state = LoadState.SETTLED
        return self

    def login(self, administrator, credential):
        """Store a confirmed identity and its token, replacing any previous session."""
        if not credential:
            raise ValueError('A bearer token is required to log in')
        self.administrator = administrator
        self.credential = credential
        self._storage.set_item(ADMIN_KEY, administrator.to_json())
        self._storage.set_item(TOKEN_KEY, credential)
        logger.info('Administrator %s logged in', administrator.email)

    def logout(self):
        was_logged_in = self.administrator is not None
        self._clear()
        if was_logged_in:
            logger.info('Administrator logged out')

    def update_administrator(self, administrator):
        """Replace the identity record after a server-side profile change."""
        if self.credential is None:
            raise RuntimeError('Cannot update the administrator of an empty session')
        self.administrator = administrator
        self._storage.set_item(ADMIN_KEY, administrator.to_json())

    def remember_return_path(self, path):
        self._storage.set_item(RETURN_PATH_KEY, path)

    def forget_return_path(self):
        self._storage.remove_item(RETURN_PATH_KEY)

    def consume_return_path(self):
        """Read and clear the pending-return path. Only local paths are returned."""
        path = self._storage.get_item(RETURN_PATH_KEY)
        self._storage.remove_item(RETURN_PATH_KEY)
        if isinstance(path, str) and path.startswith('/') and not path.startswith('//'):
            return path
        return None

    def _clear(self):
        self.administrator = None
        self.credential = None
        self._storage.remove_item(ADMIN_KEY)
        self._storage.remove_item(TOKEN_KEY)

    def _wipe(self):
        """Best-effort ``_clear`` for when the storage itself is failing."""
        self.administrator = None
        self.credential = None
        for key in (ADMIN_KEY, TOKEN_KEY):
            try:
                self._storage.remove_item(key)
            except Exception as e:
                logger.warning('Could not remove %s from session storage: %s', key, e)


def get_session_store():
    """Return the session store installed for the current request."""
    store = g.get('session_store')
    if store is None:
        raise RuntimeError('No session store installed for this request')
    return store
