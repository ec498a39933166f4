"""Catalog record types."""
from src.models.user import User, ALL_USERS
from src.models.category import Category
from src.models.product import Product, EnrichedProduct
from src.models.selection import FilterSelection

__all__ = [
    "User",
    "ALL_USERS",
    "Category",
    "Product",
    "EnrichedProduct",
    "FilterSelection",
]
