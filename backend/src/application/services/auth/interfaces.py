"""
Authentication Service Interfaces
Abstract base classes for token handling
"""
from abc import ABC, abstractmethod
from typing import Optional

from domain.value_objects import CallerIdentity


class IJwtService(ABC):
    """JWT token service interface"""

    @abstractmethod
    def create_access_token(self, caller: CallerIdentity, expires_minutes: Optional[int] = None) -> str:
        """Create access token carrying the caller's role and company"""
        pass

    @abstractmethod
    def verify_token(self, token: str) -> CallerIdentity:
        """
        Verify and decode token

        Raises:
            AuthenticationException: token invalid, expired or missing claims
        """
        pass
