"""Product models: raw records and products enriched with category and owner."""
from dataclasses import dataclass

from src.models.category import Category
from src.models.fields import require_int, require_str
from src.models.user import User


@dataclass(frozen=True)
class Product:
    id: int
    name: str
    category_id: int

    @classmethod
    def from_dict(cls, data: dict) -> "Product":
        return cls(
            id=require_int(data, "id"),
            name=require_str(data, "name"),
            category_id=require_int(data, "categoryId"),
        )

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"


@dataclass(frozen=True)
class EnrichedProduct(Product):
    """A product with its resolved category and the category's owner.

    ``user`` is the owner of the product's category, not a direct owner of
    the product itself.
    """

    category: Category
    user: User

    def __repr__(self) -> str:
        return f"<EnrichedProduct id={self.id} name={self.name!r} user={self.user.name!r}>"
