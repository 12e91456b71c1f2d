"""Tests for the form-flow client."""

import pytest

from batchportal.client import AUTH_TOKEN_KEY, PortalApiError, PortalClient, TokenStore
from batchportal.errors import ValidationError


@pytest.fixture
def token_store(tmp_path):
    return TokenStore(tmp_path / "storage.json")


@pytest.fixture
def portal(client, token_store):
    return PortalClient(client, token_store)


class TestTokenStore:
    """Tests for TokenStore."""

    def test_presence_based_authentication(self, token_store):
        """Test that any stored non-empty token counts as authenticated."""
        assert not token_store.is_authenticated()
        token_store.set_token("stale-or-not")
        assert token_store.is_authenticated()
        assert token_store.get_token() == "stale-or-not"

    def test_remove_token(self, token_store):
        """Test that removing the token logs the user out."""
        token_store.set_token("abc")
        token_store.remove_token()
        assert token_store.get_token() is None
        assert not token_store.is_authenticated()

    def test_token_stored_under_fixed_key(self, token_store):
        """Test the on-disk layout."""
        token_store.set_token("abc")
        assert AUTH_TOKEN_KEY in token_store.path.read_text(encoding="utf-8")


class TestPortalClient:
    """Tests for PortalClient against the in-process API."""

    def test_login_then_start_batch(self, portal):
        """Test the full form flow."""
        user = portal.login("admin@test.com", "password123")
        assert user == {"id": 1, "email": "admin@test.com"}
        assert portal.is_authenticated()

        job = portal.start_batch(10, 5, 60)
        assert job["id"] == 1
        assert job["status"] == "pending"

        assert portal.verify()["userId"] == 1

    def test_bad_credentials(self, portal):
        """Test that a rejected login raises and stores nothing."""
        with pytest.raises(PortalApiError) as exc_info:
            portal.login("admin@test.com", "wrong-password")
        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "Invalid email or password"
        assert not portal.is_authenticated()

    def test_client_side_validation(self, portal):
        """Test that invalid input is rejected before any request is sent."""
        with pytest.raises(ValidationError):
            portal.login("not-an-email", "password123")
        portal.login("admin@test.com", "password123")
        with pytest.raises(ValidationError):
            portal.start_batch(10, 0, 60)

    def test_stale_token_detected_only_by_server(self, portal, token_store):
        """Test that a bogus stored token still reads as authenticated locally."""
        token_store.set_token("garbage")
        assert portal.is_authenticated()
        with pytest.raises(PortalApiError) as exc_info:
            portal.verify()
        assert exc_info.value.status_code == 403

    def test_logout(self, portal):
        """Test that logout drops the stored token."""
        portal.login("admin@test.com", "password123")
        portal.logout()
        assert not portal.is_authenticated()
        with pytest.raises(PortalApiError) as exc_info:
            portal.start_batch(10, 5, 60)
        assert exc_info.value.status_code == 401
