"""Category model - each category is owned by a single user."""
from dataclasses import dataclass

from src.models.fields import require_int, require_str


@dataclass(frozen=True)
class Category:
    id: int
    title: str
    icon: str
    owner_id: int

    @classmethod
    def from_dict(cls, data: dict) -> "Category":
        """Build a Category from a raw record with camelCase keys."""
        return cls(
            id=require_int(data, "id"),
            title=require_str(data, "title"),
            icon=require_str(data, "icon"),
            owner_id=require_int(data, "ownerId"),
        )

    @property
    def label(self) -> str:
        """Return the display label like '🍞 - Grocery'."""
        return f"{self.icon} - {self.title}"

    def __repr__(self) -> str:
        return f"<Category id={self.id} title={self.title!r}>"
