"""Derive the visible products from the catalog and the current filter selection."""
from typing import Iterable

from src.models import EnrichedProduct, FilterSelection, User


def normalize_query(query: str) -> str:
    """Trim and lower-case a raw search query for matching."""
    return (query or "").strip().lower()


def matches_user(product: EnrichedProduct, user: User) -> bool:
    if user.is_all:
        return True
    return product.user.id == user.id


def matches_query(product: EnrichedProduct, normalized_query: str) -> bool:
    """Case-insensitive substring match on the product name.

    *normalized_query* must already be passed through normalize_query().
    """
    if not normalized_query:
        return True
    return normalized_query in product.name.lower()


def matches_categories(product: EnrichedProduct, category_ids: frozenset[int]) -> bool:
    # An empty set means "no category restriction", not "match nothing"
    if not category_ids:
        return True
    return product.category_id in category_ids


def filter_products(
    catalog: Iterable[EnrichedProduct], selection: FilterSelection
) -> list[EnrichedProduct]:
    """Apply the user, query and category filters (all must pass).

    Returns a new list in catalog order; the catalog itself is not modified.
    """
    products = list(catalog)

    if not selection.by_user.is_all:
        products = [p for p in products if matches_user(p, selection.by_user)]

    query = normalize_query(selection.by_query)
    if query:
        products = [p for p in products if matches_query(p, query)]

    if selection.by_category_ids:
        products = [
            p for p in products if matches_categories(p, selection.by_category_ids)
        ]

    return products
