"""Catalog page -- browse products filtered by user, name and category."""
import logging
from typing import Sequence

from nicegui import ui

from src.models import Category, EnrichedProduct, User
from src.services.selection_state import CatalogView, SelectionController, selection_from_params
from src.ui.components.filter_panel import filter_panel
from src.ui.components.helpers import page_header
from src.ui.components.product_table import product_table
from src.ui.layout import build_layout

logger = logging.getLogger(__name__)


def catalog_page(
    catalog: Sequence[EnrichedProduct],
    users: Sequence[User],
    categories: Sequence[Category],
    user: str | None = None,
    query: str | None = None,
    category_ids: str | None = None,
):
    """Render the catalog browser page.

    Args:
        catalog: Enriched products shared by all clients (read-only).
        users: Users shown as filter tabs.
        categories: Categories shown as filter buttons.
        user: Optional user id to pre-select (from URL query param).
        query: Optional search text to pre-fill (from URL query param).
        category_ids: Optional comma-separated category ids to pre-select.
    """
    # One controller per client page
    controller = SelectionController(
        catalog,
        selection_from_params(users, user_id=user, query=query, categories=category_ids),
    )

    content = build_layout()
    with content:
        page_header("Product Categories", icon="inventory_2")

        sync_filters = filter_panel(controller, users, categories)

        @ui.refreshable
        def _products(view: CatalogView):
            product_table(view)

        _products(controller.view)

    def _on_change(view: CatalogView):
        sync_filters(view)
        _products.refresh(view)

    controller.subscribe(_on_change)
