"""
FastAPI Dependencies
Current caller, role checks, rate limiting
"""
from typing import Optional

from fastapi import Depends, HTTPException, status, Header
from slowapi import Limiter
from slowapi.util import get_remote_address

from core.config import settings
from core.exceptions import AuthenticationException
from domain.enums import UserRole
from domain.value_objects import CallerIdentity
from application.services.auth.interfaces import IJwtService
from .container import get_jwt_service


# Rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)


async def get_current_caller(
    authorization: Optional[str] = Header(None),
    jwt_service: IJwtService = Depends(get_jwt_service)
) -> CallerIdentity:
    """
    Get current authenticated caller from JWT token

    Usage:
        @router.get("/protected")
        async def protected_route(caller: CallerIdentity = Depends(get_current_caller)):
            ...
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing authorization header",
            headers={"WWW-Authenticate": "Bearer"},
        )

    # Extract token from "Bearer <token>"
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return jwt_service.verify_token(parts[1])
    except AuthenticationException:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )


def require_roles(*roles: UserRole):
    """Dependency factory restricting a route to the given roles"""

    async def checker(caller: CallerIdentity = Depends(get_current_caller)) -> CallerIdentity:
        if caller.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Not authorized"
            )
        return caller

    return checker
