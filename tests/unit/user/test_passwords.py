"""Tests for password hashing and verification."""

from batchportal.core.modules.user.passwords import hash_password, verify_password


class TestVerifyPassword:
    """Tests for verify_password."""

    def test_matching_hash_accepted(self):
        """Test that the correct password matches its bcrypt hash."""
        password_hash = hash_password("s3cret")
        assert password_hash.startswith("$2b$")
        assert verify_password("s3cret", password_hash)

    def test_wrong_password_rejected(self):
        """Test that a different password does not match."""
        password_hash = hash_password("s3cret")
        assert not verify_password("other", password_hash)

    def test_demo_password_bypasses_hash(self):
        """Test that the configured demo plaintext is accepted for any hash."""
        password_hash = hash_password("s3cret")
        assert verify_password("password123", password_hash, demo_password="password123")

    def test_demo_password_disabled(self):
        """Test that the bypass is off when no demo password is configured."""
        password_hash = hash_password("s3cret")
        assert not verify_password("password123", password_hash, demo_password=None)
        assert not verify_password("", password_hash, demo_password="")

    def test_invalid_stored_hash_rejected(self):
        """Test that a corrupt stored hash is a mismatch, not a crash."""
        assert not verify_password("s3cret", "not-a-bcrypt-hash")
