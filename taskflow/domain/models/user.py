"""
User domain model.
Represents a registered account that can own categories and tasks.
"""

from dataclasses import dataclass
from typing import Optional

from taskflow.domain.models.base import BaseEntity, ValidationError


@dataclass(kw_only=True, eq=False)
class User(BaseEntity):
    """
    User entity.
    The password is only ever held as a hash produced by the auth service.
    """

    name: str
    email: str
    password_hash: str

    def __post_init__(self):
        """Initialize user after creation."""
        super().__post_init__()
        self.email = self.email.strip().lower() if self.email else self.email
        self.validate()

    def validate(self) -> None:
        """Validate user state."""
        if not self.name or not self.name.strip():
            raise ValidationError("User name is required", "name")

        if len(self.name) > 255:
            raise ValidationError("User name too long (max 255 characters)", "name")

        if not self.email or "@" not in self.email:
            raise ValidationError(f"Invalid email format: {self.email}", "email")

        if not self.password_hash:
            raise ValidationError("Password hash is required", "password_hash")

    def update_profile(
        self,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password_hash: Optional[str] = None
    ) -> None:
        """Update user profile information."""
        if name is not None:
            self.name = name
        if email is not None:
            self.email = email.strip().lower()
        if password_hash is not None:
            self.password_hash = password_hash

        self.validate()
        self.mark_as_updated()
