"""
API error types.
"""


class ApiError(RuntimeError):
    """Non-success response (or transport failure, status 0) from the admin API.

    ``message`` is the server-provided text and may be empty.
    """

    def __init__(self, status_code, message=''):
        super().__init__(message or f'HTTP {status_code}')
        self.status_code = status_code
        self.message = message


class UnauthorizedError(ApiError):
    """The API rejected the bearer token; the session has already been cleared."""

    def __init__(self, message='Your session has expired. Please log in again.'):
        super().__init__(401, message)
