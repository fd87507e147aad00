from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from ..core.constants import DEFAULT_JWT_ALGORITHM, DEFAULT_JWT_EXPIRE_MINUTES
from ..core.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenSettings:
    secret_key: str
    issuer: str
    audience: str
    expire_minutes: int = DEFAULT_JWT_EXPIRE_MINUTES
    algorithm: str = DEFAULT_JWT_ALGORITHM


class TokenService:
    """Issues and verifies signed bearer tokens for API callers."""

    def __init__(self, settings: TokenSettings):
        self._settings = settings

    def issue(
        self,
        *,
        employee_id: str,
        email: str,
        name: str,
        role: str,
        now: Optional[datetime] = None,
    ) -> str:
        now = now or datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "sub": str(employee_id),
            "jti": secrets.token_hex(16),
            "email": email,
            "name": name,
            "role": role,
            "iss": self._settings.issuer,
            "aud": self._settings.audience,
            "iat": now,
            "exp": now + timedelta(minutes=int(self._settings.expire_minutes)),
        }
        token = jwt.encode(payload, self._settings.secret_key, algorithm=self._settings.algorithm)
        logger.debug("Access token issued for employee %s", employee_id)
        return token

    def decode(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self._settings.secret_key,
                algorithms=[self._settings.algorithm],
                audience=self._settings.audience,
                issuer=self._settings.issuer,
                options={"require": ["exp", "sub", "role"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token has expired.")
        except jwt.PyJWTError as e:
            logger.warning("Token verification failed: %s", e)
            raise AuthenticationError("Invalid token.")
