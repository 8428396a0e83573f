"""Tests for registration, sign-in and tokens."""

import asyncio
from dataclasses import replace

import pytest
from jose import jwt

from fitjourney.errors import (
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from fitjourney.services.accounts import AccountService, get_password_hash, verify_password


@pytest.fixture
def accounts(settings, user_repo):
    return AccountService(settings, user_repo)


class TestPasswords:
    """Tests for password hashing."""

    def test_hash_and_verify(self):
        """Test a hash verifies only its own password."""
        hashed = get_password_hash("hunter2")

        assert hashed != "hunter2"
        assert verify_password("hunter2", hashed)
        assert not verify_password("hunter3", hashed)


class TestTokens:
    """Tests for access tokens."""

    def test_round_trip(self, accounts):
        """Test a token resolves to the user it was issued for."""
        token = accounts.create_access_token(42)
        assert accounts.verify_token(token) == 42

    def test_wrong_secret(self, accounts, settings):
        """Test tokens signed with another key are rejected."""
        token = jwt.encode({"sub": "42"}, "other-secret", algorithm=settings.jwt_algorithm)

        with pytest.raises(AuthenticationError):
            accounts.verify_token(token)

    def test_garbage(self, accounts):
        """Test malformed tokens are rejected."""
        with pytest.raises(AuthenticationError) as exc_info:
            accounts.verify_token("not-a-token")

        assert exc_info.value.status_code == 401

    def test_missing_subject(self, accounts, settings):
        """Test tokens without a subject are rejected."""
        token = jwt.encode({"foo": "bar"}, settings.jwt_secret, algorithm=settings.jwt_algorithm)

        with pytest.raises(AuthenticationError):
            accounts.verify_token(token)


class TestRegisterAndLogin:
    """Tests for AccountService.register and login."""

    def test_register(self, accounts):
        """Test registering stores a hashed password and returns a token."""
        token, user = asyncio.run(
            accounts.register("Jane", "jane@example.com", "hunter2", img="jane.png")
        )

        assert user.id is not None
        assert user.password_hash != "hunter2"
        assert user.img == "jane.png"
        assert accounts.verify_token(token) == user.id

    @pytest.mark.parametrize(
        "name, email, password",
        [(None, "a@b.c", "pw"), ("A", "", "pw"), ("A", "a@b.c", None)],
    )
    def test_register_missing_fields(self, accounts, name, email, password):
        """Test name, e-mail and password are required."""
        with pytest.raises(ValidationError, match="Missing required fields"):
            asyncio.run(accounts.register(name, email, password))

    def test_register_duplicate(self, accounts):
        """Test an e-mail can only be registered once."""
        asyncio.run(accounts.register("Jane", "jane@example.com", "hunter2"))

        with pytest.raises(ConflictError) as exc_info:
            asyncio.run(accounts.register("Jane 2", "jane@example.com", "pw"))

        assert exc_info.value.status_code == 409

    def test_login(self, accounts):
        """Test signing in with the right password."""
        _, registered = asyncio.run(accounts.register("Jane", "jane@example.com", "hunter2"))
        token, user = asyncio.run(accounts.login("jane@example.com", "hunter2"))

        assert user.id == registered.id
        assert accounts.verify_token(token) == user.id

    def test_login_wrong_password(self, accounts):
        """Test a wrong password is a 403."""
        asyncio.run(accounts.register("Jane", "jane@example.com", "hunter2"))

        with pytest.raises(AuthenticationError) as exc_info:
            asyncio.run(accounts.login("jane@example.com", "wrong"))

        assert exc_info.value.status_code == 403

    def test_login_unknown_user(self, accounts):
        """Test an unknown e-mail is a 404."""
        with pytest.raises(NotFoundError):
            asyncio.run(accounts.login("nobody@example.com", "pw"))

    def test_login_missing_fields(self, accounts):
        """Test e-mail and password are required."""
        with pytest.raises(ValidationError):
            asyncio.run(accounts.login("jane@example.com", ""))

    def test_register_lost_race_is_conflict(self, accounts, monkeypatch):
        """Test a duplicate caught by the UNIQUE constraint is still a 409."""
        asyncio.run(accounts.create_account("Jane", "jane@example.com", "hunter2"))

        async def not_found(email):
            return None

        monkeypatch.setattr(accounts.user_repo, "get_by_email", not_found)

        with pytest.raises(ConflictError) as exc_info:
            asyncio.run(accounts.register("Jane 2", "jane@example.com", "pw"))

        assert exc_info.value.status_code == 409

    def test_hashing_runs_in_worker_thread(self, accounts, monkeypatch):
        """Test bcrypt hashing and checking are handed to asyncio.to_thread."""
        offloaded = []
        to_thread = asyncio.to_thread

        async def recording_to_thread(func, *args, **kwargs):
            offloaded.append(func)
            return await to_thread(func, *args, **kwargs)

        monkeypatch.setattr(asyncio, "to_thread", recording_to_thread)

        asyncio.run(accounts.register("Jane", "jane@example.com", "hunter2"))
        asyncio.run(accounts.login("jane@example.com", "hunter2"))

        assert offloaded == [get_password_hash, verify_password]


class TestMissingSecret:
    """Tests for accounts when no signing secret is configured."""

    @pytest.fixture
    def unsigned(self, settings, user_repo):
        return AccountService(replace(settings, jwt_secret=None), user_repo)

    def test_register_refused(self, unsigned, user_repo):
        """Test no account is created when no token could be issued."""
        with pytest.raises(ConfigurationError):
            asyncio.run(unsigned.register("Jane", "jane@example.com", "hunter2"))

        assert asyncio.run(user_repo.get_by_email("jane@example.com")) is None

    def test_verify_refused(self, unsigned):
        with pytest.raises(ConfigurationError):
            unsigned.verify_token("anything")

    def test_create_account_needs_no_secret(self, unsigned):
        user = asyncio.run(unsigned.create_account("Jane", "jane@example.com", "hunter2"))

        assert user.id is not None
