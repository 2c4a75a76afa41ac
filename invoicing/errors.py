# invoicing/errors.py
"""
Exception types raised by the query and authentication layers.

Messages on these exceptions are safe to show to a user; the underlying
database error is only ever chained (``raise ... from exc``) and logged.
"""

from typing import Optional


class DashboardError(Exception):
    """Base class for errors raised by the invoicing package."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FetchError(DashboardError):
    """A read operation could not reach or query the datastore."""

    code = "FETCH_FAILED"

    def __init__(self, operation: str, message: str):
        super().__init__(message)
        self.operation = operation


CREDENTIALS_SIGNIN = "CredentialsSignin"
CALLBACK_ROUTE_ERROR = "CallbackRouteError"
CONFIGURATION = "Configuration"


class AuthError(DashboardError):
    """Failure reported by the sign-in flow, classified by ``type``."""

    def __init__(self, type: str, message: Optional[str] = None):
        super().__init__(message or type)
        self.type = type
