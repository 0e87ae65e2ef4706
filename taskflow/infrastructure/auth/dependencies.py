"""
Authentication dependencies for FastAPI.
Resolves the bearer token of a request to the current user ID.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from taskflow.infrastructure.container import ServiceContainer, get_container

logger = logging.getLogger(__name__)

# Security scheme; missing credentials are reported as 401 below
security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)]
) -> str:
    """
    FastAPI dependency returning the raw bearer token.

    Raises:
        HTTPException: If no bearer token was sent
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Not authenticated")
    return credentials.credentials


async def get_current_user_id(
    token: Annotated[str, Depends(get_current_token)],
    container: Annotated[ServiceContainer, Depends(get_container)]
) -> str:
    """
    FastAPI dependency to get current authenticated user ID.

    Raises:
        HTTPException: If the token is invalid, expired or revoked
    """
    user_id = container.auth_service.verify_token(token)
    if user_id is None:
        raise _unauthorized("Invalid or expired token")

    if await container.user_service.is_token_revoked(token):
        logger.info(f"Rejected revoked token for user {user_id}")
        raise _unauthorized("Token has been revoked")

    return user_id


CurrentUserId = Annotated[str, Depends(get_current_user_id)]
CurrentToken = Annotated[str, Depends(get_current_token)]
