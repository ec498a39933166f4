"""Services package."""
from src.services.catalog_joiner import CatalogIntegrityError, join_catalog
from src.services.catalog_loader import CatalogLoadError, load_reference_data
from src.services.filter_engine import filter_products
from src.services.selection_state import CatalogView, SelectionController, selection_from_params

__all__ = [
    "load_reference_data",
    "CatalogLoadError",
    "join_catalog",
    "CatalogIntegrityError",
    "filter_products",
    "CatalogView",
    "SelectionController",
    "selection_from_params",
]
