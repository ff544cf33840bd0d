"""Session token service (adapter).

Issues and validates the bearer tokens that carry the acting identity
(user id, role, institution id) into every request.

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Unique JWT ID (jti) per token
"""

from datetime import UTC, datetime, timedelta

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from firedesk.core.enums import ErrorCode
from firedesk.core.errors import AuthenticationError
from firedesk.core.result import Failure, Result, Success
from firedesk.domain.enums import UserRole
from firedesk.domain.value_objects import Actor


class ActorTokenService:
    """JWT issue/validate service for session identities.

    Claims:
        sub: User id.
        role: UserRole value, omitted when the actor has no role.
        institution_id: Institution id, omitted when absent.

    Usage:
        service = ActorTokenService(secret_key=settings.secret_key)
        token = service.issue_token(actor)

        match service.validate_token(token):
            case Success(value=actor):
                ...
            case Failure(error=error):
                raise HTTPException(status_code=401, detail=error.message)
    """

    def __init__(
        self,
        secret_key: str,
        expiration_minutes: int = 60,
        algorithm: str = "HS256",
    ) -> None:
        """Initialize token service.

        Args:
            secret_key: Secret key for HMAC signing (at least 32 bytes).
            expiration_minutes: Token lifetime in minutes.
            algorithm: JWT signing algorithm.

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        self._secret_key = secret_key
        self._expiration_minutes = expiration_minutes
        self._algorithm = algorithm

    def issue_token(self, actor: Actor) -> str:
        """Generate a signed token for ``actor``.

        Raises:
            ValueError: If the actor has no user id.
        """
        if not actor.user_id:
            raise ValueError("Cannot issue a session token without a user id")

        now = datetime.now(UTC)
        payload: dict[str, str | int] = {
            "sub": actor.user_id,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=self._expiration_minutes)).timestamp()),
            "jti": str(uuid7()),
        }
        if actor.role is not None:
            payload["role"] = actor.role.value
        if actor.institution_id:
            payload["institution_id"] = actor.institution_id

        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def validate_token(self, token: str) -> Result[Actor, AuthenticationError]:
        """Validate a token and rebuild the Actor it carries.

        An unknown role claim yields an Actor with ``role=None`` (denied
        everything by the policy) rather than a failure.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp"]},
            )
        except ExpiredSignatureError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message="Session token has expired",
                )
            )
        except InvalidTokenError:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.TOKEN_INVALID,
                    message="Invalid session token",
                )
            )

        role_claim = payload.get("role")
        role = (
            UserRole(role_claim)
            if isinstance(role_claim, str) and UserRole.is_valid(role_claim)
            else None
        )
        return Success(
            value=Actor(
                role=role,
                user_id=str(payload["sub"]),
                institution_id=payload.get("institution_id"),
            )
        )
