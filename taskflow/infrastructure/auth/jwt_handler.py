"""
JWT token handler.
Issues and validates access tokens and hashes passwords.
"""

import logging
import uuid
from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from taskflow.domain.models.base import utc_now
from taskflow.domain.services.auth_service import AuthService

logger = logging.getLogger(__name__)

# Password hashing configuration using Argon2id
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class JWTHandler(AuthService):
    """Handles password hashing and JWT issuance and validation."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 60
    ):
        self.jwt_secret = secret_key
        self.jwt_algorithm = algorithm
        self.access_token_expire_minutes = access_token_expire_minutes

    def hash_password(self, password: str) -> str:
        return pwd_context.hash(password)

    def verify_password(self, password: str, hashed_password: str) -> bool:
        try:
            return pwd_context.verify(password, hashed_password)
        except (ValueError, TypeError):
            logger.warning("Stored password hash could not be identified")
            return False

    def generate_access_token(self, user_id: str, email: str) -> str:
        """
        Generate a signed access token.

        Args:
            user_id: User ID stored in the ``sub`` claim
            email: User email

        Returns:
            JWT token string
        """
        now = utc_now()
        expire = now + timedelta(minutes=self.access_token_expire_minutes)

        payload = {
            "sub": user_id,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int(expire.timestamp()),
            "jti": str(uuid.uuid4()),
        }

        return jwt.encode(payload, self.jwt_secret, algorithm=self.jwt_algorithm)

    def decode_token(self, token: str) -> Optional[Dict[str, Any]]:
        """
        Decode and verify a token.

        Returns:
            Token payload dict if valid, None otherwise
        """
        if token.startswith('Bearer '):
            token = token[7:]

        try:
            payload = jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True}
            )
        except JWTError as e:
            logger.debug(f"Rejected access token: {e}")
            return None

        if not payload.get("sub") or "exp" not in payload:
            logger.debug("Rejected access token without sub or exp claim")
            return None

        return payload

    def verify_token(self, token: str) -> Optional[str]:
        payload = self.decode_token(token)
        return payload["sub"] if payload else None

    def get_token_expiry(self, token: str) -> Optional[datetime]:
        """Expiry of a token with a valid signature, even if it already expired."""
        try:
            payload = jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": False}
            )
        except JWTError:
            return None

        exp = payload.get("exp")
        if exp is None:
            return None
        return datetime.fromtimestamp(exp, tz=timezone.utc)
