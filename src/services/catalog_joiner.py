"""Join raw products with their category and the category's owner."""
from typing import Iterable, Sequence

from src.models import Category, EnrichedProduct, Product, User
from src.services.utils import index_by_id


class CatalogIntegrityError(Exception):
    """Raised when a product or category references a record that does not exist."""


def join_catalog(
    products: Iterable[Product],
    categories: Sequence[Category],
    users: Sequence[User],
) -> list[EnrichedProduct]:
    """Return enriched products in the same order as *products*.

    The owner attached to each product is the owner of its category
    (product -> category -> user).

    Raises:
        CatalogIntegrityError: if a product's category or a category's owner
            cannot be resolved.
    """
    categories_by_id = index_by_id(categories)
    users_by_id = index_by_id(users)

    catalog = []
    for product in products:
        category = categories_by_id.get(product.category_id)
        if category is None:
            raise CatalogIntegrityError(
                f"Product {product.id} ({product.name!r}) references "
                f"unknown category {product.category_id}"
            )
        user = users_by_id.get(category.owner_id)
        if user is None:
            raise CatalogIntegrityError(
                f"Category {category.id} ({category.title!r}) references "
                f"unknown owner {category.owner_id}"
            )
        catalog.append(
            EnrichedProduct(
                id=product.id,
                name=product.name,
                category_id=product.category_id,
                category=category,
                user=user,
            )
        )
    return catalog
