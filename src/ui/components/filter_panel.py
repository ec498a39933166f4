"""Filter panel: user tabs, search field, category buttons and reset."""
from typing import Sequence

from nicegui import ui

from src.models import ALL_USERS, Category, User
from src.services.selection_state import CatalogView, SelectionController
from src.ui.components.helpers import CARD_CLASSES, INPUT_PROPS, section_header


def filter_panel(
    controller: SelectionController,
    users: Sequence[User],
    categories: Sequence[Category],
):
    """Render the filter controls and wire them to *controller*.

    Returns a callback that syncs the controls with a new CatalogView; the
    caller subscribes it to the controller.
    """
    with ui.card().classes(CARD_CLASSES):
        section_header("Filters", icon="filter_list")

        @ui.refreshable
        def _user_tabs():
            selected_id = controller.selection.by_user.id
            with ui.row().classes("items-center gap-1"):
                for user in [ALL_USERS, *users]:
                    btn = ui.button(
                        user.name, on_click=lambda _, u=user: controller.set_user(u),
                    ).props("flat dense no-caps")
                    if user.id == selected_id:
                        btn.props("color=primary").classes("font-bold")
                    else:
                        btn.props("color=secondary")

        _user_tabs()

        # Search field; not refreshable so typing keeps focus
        with ui.row().classes("items-center w-full gap-2"):
            search_input = ui.input(
                placeholder="Search",
                value=controller.selection.by_query,
            ).props(INPUT_PROPS).classes("flex-1")
            search_input.props('prepend-inner-icon="search"')
            clear_btn = ui.button(
                icon="close", on_click=lambda: controller.clear_query(),
            ).props("flat round dense size=sm")
            clear_btn.set_visibility(bool(controller.selection.by_query))

        def _on_search(e):
            text = e.value or ""
            if text != controller.selection.by_query:
                controller.set_query(text)

        search_input.on_value_change(_on_search)

        @ui.refreshable
        def _category_buttons():
            selected = controller.selection.by_category_ids
            with ui.row().classes("items-center gap-2 flex-wrap"):
                all_btn = ui.button(
                    "All", on_click=lambda: controller.clear_categories(),
                ).props("color=positive no-caps")
                if selected:
                    all_btn.props("outline")

                for category in categories:
                    btn = ui.button(
                        category.title,
                        on_click=lambda _, cid=category.id: controller.toggle_category(cid),
                    ).props("dense no-caps")
                    if category.id in selected:
                        btn.props("color=info")
                    else:
                        btn.props("color=grey-3 text-color=black")

        _category_buttons()

        reset_btn = ui.button(
            "Reset all filters", icon="restart_alt", on_click=lambda: controller.reset_all(),
        ).props("outline color=primary").classes("w-full")
        reset_btn.set_enabled(not controller.selection.is_default)

    def sync(view: CatalogView):
        query = view.selection.by_query
        if search_input.value != query:
            search_input.value = query
        clear_btn.set_visibility(bool(query))
        reset_btn.set_enabled(not view.selection.is_default)
        _user_tabs.refresh()
        _category_buttons.refresh()

    return sync
