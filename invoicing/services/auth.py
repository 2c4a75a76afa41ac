# invoicing/services/auth.py
"""
Credential check for the dashboard login.

``authorize`` answers "which user is this, if any"; ``sign_in`` wraps it
as the "credentials" provider and reports an AuthResult; ``authenticate``
turns that into the single message the login form displays.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

import bcrypt
from pydantic import ValidationError
from sqlalchemy.engine import Engine

from invoicing.errors import (
    CALLBACK_ROUTE_ERROR,
    CONFIGURATION,
    CREDENTIALS_SIGNIN,
    AuthError,
    FetchError,
)
from invoicing.models.users import Credentials, User
from invoicing.services.queries import get_user

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"


class AuthOutcome(str, Enum):
    OK = "ok"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNEXPECTED = "unexpected"


@dataclass
class AuthResult:
    outcome: AuthOutcome
    user: Optional[User] = None
    cause: Optional[AuthError] = None


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def _passwords_match(password: str, hashed: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError as exc:
        # over-long password or a stored value that is not a bcrypt hash
        logger.warning("Password check rejected input: %s", exc)
        return False


def authorize(engine: Engine, credentials: Mapping[str, Any]) -> Optional[User]:
    """
    Return the user for a matching email/password pair, else None.

    An unknown email and a wrong password look the same to the caller.
    Raises FetchError if the user lookup itself fails.
    """
    try:
        parsed = Credentials.model_validate(dict(credentials))
    except ValidationError:
        return None

    user = get_user(engine, parsed.email)
    if user is None:
        return None

    if _passwords_match(parsed.password, user.password):
        return user
    return None


def sign_in(engine: Engine, provider: str, form_data: Mapping[str, Any]) -> AuthResult:
    if provider != CREDENTIALS_PROVIDER:
        return AuthResult(
            outcome=AuthOutcome.UNEXPECTED,
            cause=AuthError(CONFIGURATION, f"Unknown sign-in provider {provider!r}"),
        )

    try:
        user = authorize(engine, form_data)
    except FetchError as exc:
        error = AuthError(CALLBACK_ROUTE_ERROR, exc.message)
        error.__cause__ = exc
        return AuthResult(outcome=AuthOutcome.UNEXPECTED, cause=error)

    if user is None:
        return AuthResult(
            outcome=AuthOutcome.INVALID_CREDENTIALS,
            cause=AuthError(CREDENTIALS_SIGNIN),
        )
    return AuthResult(outcome=AuthOutcome.OK, user=user)


def authenticate(engine: Engine, form_data: Mapping[str, Any]) -> Optional[str]:
    """
    Sign in with the "credentials" provider.

    Returns None on success or the message for the login form. Errors
    other than a failed user lookup propagate out of sign_in unchanged.
    """
    result = sign_in(engine, CREDENTIALS_PROVIDER, form_data)
    if result.outcome is AuthOutcome.OK:
        return None

    if result.outcome is AuthOutcome.INVALID_CREDENTIALS:
        return "Invalid credentials."

    error_code = result.cause.type if result.cause is not None else None
    logger.error("Sign-in failed: %s", result.cause, extra={"error_code": error_code})
    return "Something went wrong."
