"""
Request lifecycle for list views.

A page tracks each list it shows as a ``Fetch``: idle, in flight, then
settled with data or with an error message. A rejected token is not a list
error; it propagates to the application's 401 handling.
"""

import enum
import logging

from courseadmin.api.errors import ApiError, UnauthorizedError
from courseadmin.models import PayloadError

logger = logging.getLogger(__name__)


class FetchState(enum.Enum):
    IDLE = 'idle'
    IN_FLIGHT = 'in-flight'
    OK = 'ok'
    ERROR = 'error'


class Fetch:
    def __init__(self, default=None):
        self.state = FetchState.IDLE
        self.data = default
        self.error = None
        self._default = default

    @property
    def ok(self):
        return self.state is FetchState.OK

    def run(self, loader, *args, **kwargs):
        self.state = FetchState.IN_FLIGHT
        self.error = None
        try:
            self.data = loader(*args, **kwargs)
            self.state = FetchState.OK
        except UnauthorizedError:
            raise
        except ApiError as e:
            self._fail(e.message or 'Request failed')
        except PayloadError as e:
            logger.warning('Unexpected payload from %s: %s', getattr(loader, '__qualname__', loader), e)
            self._fail('The server returned data in an unexpected format.')
        return self

    def _fail(self, message):
        self.data = self._default
        self.error = message
        self.state = FetchState.ERROR


def fetch(loader, *args, default=None, **kwargs):
    """Run ``loader`` once and return the settled :class:`Fetch`."""
    return Fetch(default=default).run(loader, *args, **kwargs)
