"""
Token blacklist repository interface.
Stores revoked access tokens until they expire.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional


class TokenBlacklistRepository(ABC):
    """
    Repository interface for revoked tokens.
    """

    @abstractmethod
    async def add(self, token: str, expires_at: datetime) -> None:
        """
        Record a revoked token. Adding the same token twice is a no-op.
        """
        pass

    @abstractmethod
    async def find_expiry(self, token: str) -> Optional[datetime]:
        """
        Return the recorded expiry of a revoked token, or None if not revoked.
        """
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """
        Remove tokens whose expiry is at or before ``now``.
        Returns number of rows deleted.
        """
        pass
