from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
import structlog

from batchportal.core.core import Service
from batchportal.core.modules.session.models import AuthToken, TokenClaims
from batchportal.core.modules.user.models import User
from batchportal.errors import AuthorizationError, ExpiredTokenError, InvalidTokenError, MissingTokenError
from batchportal.utils import now

logger = structlog.get_logger(__name__)


class SessionService(Service):
    """Issues and verifies signed, self-contained session tokens.

    Nothing is stored server-side: a token is valid exactly when its
    signature checks out and its expiry has not passed.
    """

    def create_session(self, user: User, issued_at: datetime | None = None) -> AuthToken:
        issued_at = issued_at or now()
        payload = {
            "userId": user.id,
            "email": user.email,
            "iat": issued_at,
            "exp": issued_at + timedelta(hours=self.config.token_ttl_hours),
        }
        token = jwt.encode(payload, self.config.jwt_secret, algorithm=self.config.jwt_algorithm)
        logger.info("session_issued", user_id=user.id)
        return AuthToken(token)

    def verify(self, auth_token: AuthToken | None) -> TokenClaims:
        """Decode a token and return its identity claims."""
        if not auth_token:
            raise MissingTokenError

        try:
            payload: dict[str, Any] = jwt.decode(
                auth_token,
                self.config.jwt_secret,
                algorithms=[self.config.jwt_algorithm],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredTokenError from e
        except jwt.PyJWTError as e:
            raise InvalidTokenError from e

        user_id = payload.get("userId")
        email = payload.get("email")
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(email, str):
            raise InvalidTokenError

        return TokenClaims(
            user_id=user_id,
            email=email,
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )

    def is_auth_token_valid(self, auth_token: AuthToken | None) -> bool:
        try:
            self.verify(auth_token)
        except AuthorizationError:
            return False
        return True
