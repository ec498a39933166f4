"""Shared UI helper functions and design tokens for catalog display."""

from nicegui import ui


# ─── Design Tokens ────────────────────────────────────────────────────────────

# Card & layout
CARD_CLASSES = "w-full p-5"
INPUT_PROPS = "outlined dense"

# Owner name colors, keyed by User.sex
USER_SEX_CLASSES = {
    "m": "text-blue-8",
    "f": "text-red-8",
}

# Table column layout: ID | Product | Category | User
TABLE_GRID_STYLE = "grid-template-columns: 60px 2fr 2fr 1fr"


def page_header(title: str, subtitle: str | None = None, icon: str | None = None):
    """Render a consistent page title with optional icon + subtitle."""
    with ui.row().classes("items-center gap-3"):
        if icon:
            ui.icon(icon, size="sm").classes("text-accent")
        ui.label(title).classes("text-h5 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-body2 text-secondary")


def section_header(title: str, icon: str | None = None, subtitle: str | None = None):
    """Render a consistent card section header with accent-colored icon."""
    with ui.row().classes("items-center gap-2 mb-2"):
        if icon:
            ui.icon(icon).classes("text-accent")
        ui.label(title).classes("text-subtitle1 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-caption text-secondary")


def user_text_class(user) -> str:
    """Return the text color class for a user's name ('' when sex is unknown)."""
    return USER_SEX_CLASSES.get(getattr(user, "sex", None), "")
