"""
Session Package

Administrator session state and its durable storage.
"""

from courseadmin.session.storage import DurableStorage, CookieStorage, MemoryStorage
from courseadmin.session.store import (
    ADMIN_KEY, TOKEN_KEY, RETURN_PATH_KEY, LoadState, SessionStore, get_session_store,
)

__all__ = [
    'DurableStorage',
    'CookieStorage',
    'MemoryStorage',
    'ADMIN_KEY',
    'TOKEN_KEY',
    'RETURN_PATH_KEY',
    'LoadState',
    'SessionStore',
    'get_session_store',
]
