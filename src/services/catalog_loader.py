"""Load the users, categories and products reference data from JSON files."""
import json
import logging
from pathlib import Path
from typing import Callable, TypeVar

from src.models import Category, Product, User

logger = logging.getLogger(__name__)

T = TypeVar("T")

USERS_FILENAME = "users.json"
CATEGORIES_FILENAME = "categories.json"
PRODUCTS_FILENAME = "products.json"

_VALID_SEXES = ("m", "f")


class CatalogLoadError(Exception):
    """Raised when a reference data file is missing or malformed."""


def load_reference_data(
    data_dir: str | Path,
) -> tuple[list[User], list[Category], list[Product]]:
    """Load all three reference datasets from *data_dir*.

    Expected files (UTF-8 JSON arrays, file order is preserved):
    - users.json: [{"id": 1, "name": "Roma", "sex": "m"}, ...]
    - categories.json: [{"id": 1, "title": "Grocery", "icon": "🍞", "ownerId": 2}, ...]
    - products.json: [{"id": 1, "name": "Milk", "categoryId": 2}, ...]

    Raises:
        CatalogLoadError: if any file is missing, unreadable, or holds
            records that do not match the expected shape.
    """
    data_dir = Path(data_dir)
    users = load_users(data_dir / USERS_FILENAME)
    categories = load_categories(data_dir / CATEGORIES_FILENAME)
    products = load_products(data_dir / PRODUCTS_FILENAME)
    logger.info(
        "Loaded %d users, %d categories, %d products from %s",
        len(users), len(categories), len(products), data_dir,
    )
    return users, categories, products


def load_users(path: str | Path) -> list[User]:
    users = _load_records(Path(path), User.from_dict)
    _require_positive_ids(users, Path(path))
    for user in users:
        if user.sex not in _VALID_SEXES:
            raise CatalogLoadError(
                f"{Path(path).name}: user {user.id} has invalid sex {user.sex!r}"
            )
    return users


def load_categories(path: str | Path) -> list[Category]:
    categories = _load_records(Path(path), Category.from_dict)
    _require_positive_ids(categories, Path(path))
    return categories


def load_products(path: str | Path) -> list[Product]:
    return _load_records(Path(path), Product.from_dict)


def _require_positive_ids(records: list, path: Path) -> None:
    # id 0 is reserved for the ALL_USERS sentinel
    for record in records:
        if record.id <= 0:
            raise CatalogLoadError(f"{path.name}: id must be positive, got {record.id}")


def _load_records(path: Path, build: Callable[[dict], T]) -> list[T]:
    """Read a JSON array from *path* and build one record per element."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise CatalogLoadError(f"{path.name}: file not found ({path})") from e
    except (json.JSONDecodeError, OSError) as e:
        raise CatalogLoadError(f"{path.name}: cannot read JSON: {e}") from e

    if not isinstance(raw, list):
        raise CatalogLoadError(f"{path.name}: expected a JSON array, got {type(raw).__name__}")

    records: list[T] = []
    seen_ids: set[int] = set()
    for position, item in enumerate(raw):
        if not isinstance(item, dict):
            raise CatalogLoadError(f"{path.name}[{position}]: expected an object")
        try:
            record = build(item)
        except KeyError as e:
            raise CatalogLoadError(f"{path.name}[{position}]: missing key {e}") from e
        except (ValueError, TypeError) as e:
            raise CatalogLoadError(f"{path.name}[{position}]: invalid value: {e}") from e
        if record.id in seen_ids:
            raise CatalogLoadError(f"{path.name}: duplicate id {record.id}")
        seen_ids.add(record.id)
        records.append(record)
    return records
