"""Tests for the login credential check."""

import bcrypt
import pytest
from sqlalchemy import update

from invoicing.db.schema import users
from invoicing.errors import CALLBACK_ROUTE_ERROR, CONFIGURATION, AuthError, FetchError
from invoicing.services import auth
from invoicing.services.auth import AuthOutcome
from tests.conftest import USER_EMAIL, USER_PASSWORD


class TestAuthorize:
    def test_correct_password(self, engine, user) -> None:
        found = auth.authorize(engine, {"email": USER_EMAIL, "password": USER_PASSWORD})
        assert found is not None
        assert found.id == user["id"]

    def test_wrong_password(self, engine, user) -> None:
        assert auth.authorize(engine, {"email": USER_EMAIL, "password": "654321"}) is None

    def test_unknown_email(self, engine, user) -> None:
        creds = {"email": "nobody@nextmail.com", "password": USER_PASSWORD}
        assert auth.authorize(engine, creds) is None

    @pytest.mark.parametrize(
        "creds",
        [
            {"email": "not-an-email", "password": USER_PASSWORD},
            {"email": USER_EMAIL, "password": "12345"},
            {"email": USER_EMAIL},
            {},
        ],
    )
    def test_malformed_credentials(self, engine, user, creds) -> None:
        assert auth.authorize(engine, creds) is None

    def test_stored_value_not_a_hash(self, engine, user) -> None:
        with engine.begin() as conn:
            conn.execute(update(users).values(password="plaintext"))

        assert auth.authorize(engine, {"email": USER_EMAIL, "password": "plaintext"}) is None

    def test_lookup_failure_raises(self, broken_engine) -> None:
        with pytest.raises(FetchError):
            auth.authorize(broken_engine, {"email": USER_EMAIL, "password": USER_PASSWORD})


class TestSignIn:
    def test_ok(self, engine, user) -> None:
        result = auth.sign_in(
            engine, "credentials", {"email": USER_EMAIL, "password": USER_PASSWORD}
        )
        assert result.outcome is AuthOutcome.OK
        assert result.user.email == USER_EMAIL

    def test_invalid_credentials(self, engine, user) -> None:
        result = auth.sign_in(engine, "credentials", {"email": USER_EMAIL, "password": "wrong-pw"})
        assert result.outcome is AuthOutcome.INVALID_CREDENTIALS
        assert result.user is None

    def test_unknown_provider(self, engine) -> None:
        result = auth.sign_in(engine, "github", {})
        assert result.outcome is AuthOutcome.UNEXPECTED
        assert isinstance(result.cause, AuthError)
        assert result.cause.type == CONFIGURATION

    def test_datastore_failure(self, broken_engine) -> None:
        result = auth.sign_in(
            broken_engine, "credentials", {"email": USER_EMAIL, "password": USER_PASSWORD}
        )
        assert result.outcome is AuthOutcome.UNEXPECTED
        assert result.cause.type == CALLBACK_ROUTE_ERROR
        assert isinstance(result.cause.__cause__, FetchError)


class TestAuthenticate:
    def test_success_returns_none(self, engine, user) -> None:
        assert auth.authenticate(engine, {"email": USER_EMAIL, "password": USER_PASSWORD}) is None

    def test_wrong_password_and_unknown_email_look_the_same(self, engine, user) -> None:
        wrong_password = auth.authenticate(engine, {"email": USER_EMAIL, "password": "wrong-pw"})
        unknown_email = auth.authenticate(
            engine, {"email": "nobody@nextmail.com", "password": USER_PASSWORD}
        )

        assert wrong_password == "Invalid credentials."
        assert unknown_email == "Invalid credentials."

    def test_datastore_failure(self, broken_engine) -> None:
        message = auth.authenticate(
            broken_engine, {"email": USER_EMAIL, "password": USER_PASSWORD}
        )
        assert message == "Something went wrong."

    def test_non_auth_error_is_reraised(self, engine, monkeypatch) -> None:
        def lookup_crashes(*args):
            raise RuntimeError("boom")

        monkeypatch.setattr(auth, "get_user", lookup_crashes)

        with pytest.raises(RuntimeError, match="boom"):
            auth.authenticate(engine, {"email": USER_EMAIL, "password": USER_PASSWORD})


def test_hash_password_is_bcrypt() -> None:
    hashed = auth.hash_password("s3cret-pw", rounds=4)

    assert hashed.startswith("$2")
    assert bcrypt.checkpw(b"s3cret-pw", hashed.encode("utf-8"))
