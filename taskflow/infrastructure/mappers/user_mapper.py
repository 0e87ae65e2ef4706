"""
User mapper for converting between domain entities and database models.
"""

from taskflow.domain.models.base import ensure_utc
from taskflow.domain.models.user import User
from taskflow.infrastructure.db.models import UserModel


class UserMapper:
    """Maps between User domain entity and UserModel database model."""

    def domain_to_model(self, user: User) -> UserModel:
        """Convert User domain entity to UserModel."""
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at
        )

    def update_model(self, model: UserModel, user: User) -> None:
        """Copy mutable fields of the entity onto an existing row."""
        model.name = user.name
        model.email = user.email
        model.password_hash = user.password_hash
        model.updated_at = user.updated_at

    def model_to_domain(self, model: UserModel) -> User:
        """Convert UserModel to User domain entity."""
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            created_at=ensure_utc(model.created_at),
            updated_at=ensure_utc(model.updated_at)
        )
