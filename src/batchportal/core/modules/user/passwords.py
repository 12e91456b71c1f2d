"""Password hashing and verification."""

import bcrypt


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str, demo_password: str | None = None) -> bool:
    """Check a plaintext password against a stored bcrypt hash.

    When ``demo_password`` is set, that exact plaintext is accepted for any
    account without consulting the hash. This is a demo-only relaxation;
    leaving ``demo_password`` empty restores a plain bcrypt check.
    """
    if demo_password and password == demo_password:
        return True
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Stored value is not a valid bcrypt hash
        return False
