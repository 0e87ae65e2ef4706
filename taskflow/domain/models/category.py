"""
Category domain model.
Categories group tasks and are private to the user who created them.
"""

import re
from dataclasses import dataclass
from typing import Optional

from taskflow.domain.models.base import BaseEntity, ValidationError


HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


@dataclass(kw_only=True, eq=False)
class Category(BaseEntity):
    """
    Category entity.
    The name is unique within the owner's categories (exact match).
    """

    name: str
    user_id: str
    description: Optional[str] = None
    color: Optional[str] = None

    def __post_init__(self):
        """Initialize category after creation."""
        super().__post_init__()
        self.validate()

    def validate(self) -> None:
        """Validate category state."""
        if not self.name or not self.name.strip():
            raise ValidationError("Category name is required", "name")

        if len(self.name) > 100:
            raise ValidationError("Category name too long (max 100 characters)", "name")

        if not self.user_id:
            raise ValidationError("Category owner is required", "user_id")

        if self.color and not HEX_COLOR_PATTERN.match(self.color):
            raise ValidationError(f"Invalid color: {self.color}", "color")

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    def apply_changes(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        color: Optional[str] = None
    ) -> None:
        """Apply a partial update. None means "leave unchanged"."""
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        if color is not None:
            self.color = color

        self.validate()
        self.mark_as_updated()
