"""Reusable UI components."""
from src.ui.components.filter_panel import filter_panel
from src.ui.components.product_table import product_table
from src.ui.components.helpers import page_header, user_text_class

__all__ = ["filter_panel", "product_table", "page_header", "user_text_class"]
