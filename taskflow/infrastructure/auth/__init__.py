"""
Authentication infrastructure module.
Handles JWT issuance and validation; request dependencies live in ``dependencies``.
"""

from .jwt_handler import JWTHandler

__all__ = [
    "JWTHandler",
]
