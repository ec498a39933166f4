"""Product table component."""
from nicegui import ui

from src.services.selection_state import CatalogView
from src.ui.components.helpers import CARD_CLASSES, TABLE_GRID_STYLE, user_text_class

# Header label -> decorative sort icon (sorting itself is not implemented)
_COLUMNS = [
    ("ID", "unfold_more"),
    ("Product", "arrow_drop_down"),
    ("Category", "arrow_drop_up"),
    ("User", "unfold_more"),
]


def product_table(view: CatalogView):
    """Render the visible products, or a message when there is nothing to show."""
    with ui.card().classes(CARD_CLASSES):
        if not view.is_loaded:
            ui.label("No products loaded").classes("text-body2 text-secondary")
            return
        if view.is_empty:
            ui.label("No products matching selected criteria").classes(
                "text-body2 text-secondary"
            )
            return

        with ui.element("div").classes("w-full grid gap-x-4 gap-y-1").style(TABLE_GRID_STYLE):
            for label, icon in _COLUMNS:
                with ui.row().classes("items-center gap-1 no-wrap"):
                    ui.label(label).classes("text-subtitle2 font-bold")
                    ui.icon(icon, size="xs").classes("text-grey-6")

            for product in view.products:
                _product_row(product)

        ui.label(f"{len(view.products)} of {view.total} products").classes(
            "text-caption text-secondary mt-2"
        )


def _product_row(product):
    ui.label(str(product.id)).classes("text-body2 font-bold")
    ui.label(product.name).classes("text-body2")
    ui.label(product.category.label).classes("text-body2")
    ui.label(product.user.name).classes(f"text-body2 {user_text_class(product.user)}")
