from pydantic_settings import BaseSettings

# bcrypt hash seeded for the default admin account
DEFAULT_ADMIN_PASSWORD_HASH = "$2a$10$92IXUNpkjO0rOQ5byMi.Ye4oKoEa3Ro9llC/.og/at2.uheWG/igi"  # noqa: S105


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    host: str
    port: int
    debug: bool
    jwt_secret: str  # HMAC key used to sign session tokens
    jwt_algorithm: str = "HS256"
    token_ttl_hours: int = 24
    cors_origins: list[str] = []
    admin_email: str = "admin@test.com"
    admin_password_hash: str = DEFAULT_ADMIN_PASSWORD_HASH
    # Plaintext accepted for any account on top of the bcrypt check (demo only, set empty to disable)
    demo_password: str | None = "password123"  # noqa: S105

    model_config = {
        "env_file": [".env"],
        "env_prefix": "BATCHPORTAL_",
        "extra": "ignore",
    }
