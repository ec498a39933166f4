"""Filter selection state: pure transitions plus the controller that owns them."""
import logging
from dataclasses import dataclass, replace
from typing import Callable, Iterable, Optional, Sequence

from src.models import ALL_USERS, EnrichedProduct, FilterSelection, User
from src.services.filter_engine import filter_products
from src.services.utils import index_by_id, parse_id_list, parse_int

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogView:
    """Settled snapshot handed to the page after every change."""

    products: tuple[EnrichedProduct, ...]
    selection: FilterSelection
    total: int

    @property
    def is_loaded(self) -> bool:
        return self.total > 0

    @property
    def is_empty(self) -> bool:
        """True when data is loaded but nothing matches the current filters."""
        return self.is_loaded and not self.products


# ---------------------------------------------------------------------------
# Pure transitions: each returns a new FilterSelection
# ---------------------------------------------------------------------------

def select_user(selection: FilterSelection, user: User) -> FilterSelection:
    return replace(selection, by_user=user)


def toggle_category(selection: FilterSelection, category_id: int) -> FilterSelection:
    """Remove *category_id* if selected, add it otherwise."""
    ids = selection.by_category_ids
    if category_id in ids:
        return replace(selection, by_category_ids=ids - {category_id})
    return replace(selection, by_category_ids=ids | {category_id})


def set_query(selection: FilterSelection, text: str) -> FilterSelection:
    # Stored untrimmed; trimming only happens when filtering
    return replace(selection, by_query=text or "")


def clear_query(selection: FilterSelection) -> FilterSelection:
    return set_query(selection, "")


def clear_categories(selection: FilterSelection) -> FilterSelection:
    return replace(selection, by_category_ids=frozenset())


def reset_all(selection: FilterSelection) -> FilterSelection:
    return FilterSelection()


def selection_from_params(
    users: Iterable[User],
    user_id=None,
    query: Optional[str] = None,
    categories=None,
) -> FilterSelection:
    """Build the initial selection from URL query parameters.

    Args:
        users: Known users to resolve *user_id* against.
        user_id: Optional user id; 0, unknown or unparsable ids select ALL_USERS.
        query: Optional raw search text.
        categories: Optional comma-separated category ids, e.g. "1,3".
    """
    selection = FilterSelection()

    if user_id is not None:
        parsed = parse_int(user_id)
        user = index_by_id(users).get(parsed) if parsed else None
        if user is not None:
            selection = select_user(selection, user)
        elif parsed != ALL_USERS.id:
            logger.warning("Ignoring unknown user id in URL: %r", user_id)

    if query:
        selection = set_query(selection, query)

    ids, rejected = parse_id_list(categories)
    if rejected:
        logger.warning("Ignoring invalid category ids in URL: %s", ", ".join(rejected))
    if ids:
        selection = replace(selection, by_category_ids=frozenset(ids))

    return selection


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------

class SelectionController:
    """Owns the current FilterSelection and publishes a CatalogView on every change.

    The catalog is treated as read-only; the selection is the only mutable
    state and is replaced, never modified, by each operation.
    """

    def __init__(
        self,
        catalog: Sequence[EnrichedProduct],
        selection: Optional[FilterSelection] = None,
    ):
        self._catalog = tuple(catalog)
        self._selection = selection or FilterSelection()
        self._view = self._derive(self._selection)
        self._subscribers: list[Callable[[CatalogView], None]] = []

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def selection(self) -> FilterSelection:
        return self._selection

    @property
    def view(self) -> CatalogView:
        return self._view

    @property
    def visible_products(self) -> tuple[EnrichedProduct, ...]:
        return self._view.products

    def subscribe(self, callback: Callable[[CatalogView], None]) -> Callable[[], None]:
        """Call *callback* with the new view after every change.

        Returns a function that removes the subscription.
        """
        self._subscribers.append(callback)

        def _unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def set_user(self, user: User) -> CatalogView:
        return self._apply(select_user(self._selection, user), "set_user")

    def toggle_category(self, category_id: int) -> CatalogView:
        return self._apply(toggle_category(self._selection, category_id), "toggle_category")

    def set_query(self, text: str) -> CatalogView:
        return self._apply(set_query(self._selection, text), "set_query")

    def clear_query(self) -> CatalogView:
        return self._apply(clear_query(self._selection), "clear_query")

    def clear_categories(self) -> CatalogView:
        return self._apply(clear_categories(self._selection), "clear_categories")

    def reset_all(self) -> CatalogView:
        return self._apply(reset_all(self._selection), "reset_all")

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _derive(self, selection: FilterSelection) -> CatalogView:
        return CatalogView(
            products=tuple(filter_products(self._catalog, selection)),
            selection=selection,
            total=len(self._catalog),
        )

    def _apply(self, selection: FilterSelection, action: str) -> CatalogView:
        """Install *selection*, re-derive the view, then notify subscribers."""
        view = self._derive(selection)
        self._selection = selection
        self._view = view
        logger.debug(
            "%s -> user=%s query=%r categories=%s (%d/%d visible)",
            action, selection.by_user.id, selection.by_query,
            sorted(selection.by_category_ids), len(view.products), view.total,
        )
        for callback in list(self._subscribers):
            callback(view)
        return view
