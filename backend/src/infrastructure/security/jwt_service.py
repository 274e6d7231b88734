"""
JWT Service Implementation
Decodes identity-provider bearer tokens into a CallerIdentity
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

from jose import jwt, JWTError
from loguru import logger

from core.config import settings
from core.exceptions import AuthenticationException
from application.services.auth.interfaces import IJwtService
from domain.enums import UserRole
from domain.value_objects import CallerIdentity


class JwtService(IJwtService):
    """JWT service using a shared secret"""

    def __init__(self, secret_key: Optional[str] = None, algorithm: Optional[str] = None):
        self.secret_key = secret_key or settings.JWT_SECRET_KEY
        self.algorithm = algorithm or settings.JWT_ALGORITHM

        if self.secret_key == "your-secret-key-change-in-production" and settings.ENVIRONMENT == "production":
            logger.warning("Using the default JWT secret in production!")

    def create_access_token(self, caller: CallerIdentity, expires_minutes: Optional[int] = None) -> str:
        """Create access token"""
        now = datetime.now(timezone.utc)
        expire = now + timedelta(minutes=expires_minutes or settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)

        payload = {
            "sub": str(caller.user_id),
            "role": caller.role.value,
            "company_id": str(caller.company_id) if caller.company_id else None,
            "exp": expire,
            "iat": now,
            "type": "access"
        }

        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> CallerIdentity:
        """Verify and decode token"""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.warning(f"JWT verification failed: {str(e)}")
            raise AuthenticationException("Invalid or expired token")

        if payload.get("type", "access") != "access":
            raise AuthenticationException("Invalid token type")

        try:
            company_id = payload.get("company_id")
            return CallerIdentity(
                user_id=UUID(payload["sub"]),
                role=UserRole(payload["role"]),
                company_id=UUID(company_id) if company_id else None,
            )
        except (KeyError, ValueError, TypeError) as e:
            logger.warning(f"JWT payload rejected: {str(e)}")
            raise AuthenticationException("Invalid token claims")
