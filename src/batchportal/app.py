from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import structlog

from batchportal.config import Config
from batchportal.core.core import Core
from batchportal.core.modules.batch_job.models import BatchJob
from batchportal.core.modules.batch_job.validators import validate_batch_job_request
from batchportal.core.modules.session.models import AuthToken, TokenClaims
from batchportal.core.modules.session.validators import validate_login
from batchportal.core.modules.user.models import UserView
from batchportal.errors import AuthenticationError

logger = structlog.get_logger(__name__)


class App:
    """Facade for all application operations, verifies tokens and validates input before delegating to Core."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    async def login(self, payload: Any) -> tuple[AuthToken, UserView]:
        """Validate credentials payload, authenticate, and issue a session token."""
        login_data = validate_login(payload)
        user_service = self._core.services.user
        if not user_service.verify_password(login_data.email, login_data.password):
            # Same error for unknown email and wrong password
            logger.info("login_failed")
            raise AuthenticationError
        user = user_service.get_user_by_email(login_data.email)
        token = self._core.services.session.create_session(user)
        return token, UserView.from_domain(user)

    async def verify_session(self, auth_token: AuthToken | None) -> TokenClaims:
        """Return the identity claims of a valid token."""
        return self._core.services.session.verify(auth_token)

    async def start_batch(self, auth_token: AuthToken | None, payload: Any) -> BatchJob:
        """Record a pending batch job (authenticated only)."""
        claims = self._core.services.session.verify(auth_token)
        request = validate_batch_job_request(payload)
        job = self._core.services.batch_job.create_job(request)
        logger.debug("batch_started", job_id=job.id, user_id=claims.user_id)
        return job

    async def get_batch_jobs(self, auth_token: AuthToken | None) -> list[BatchJob]:
        """List recorded batch jobs in submission order (authenticated only)."""
        self._core.services.session.verify(auth_token)
        return self._core.services.batch_job.list_jobs()
