"""Shared utility functions for services."""
from typing import Iterable, Optional, TypeVar

T = TypeVar("T")


def index_by_id(records: Iterable[T]) -> dict[int, T]:
    """Build an id -> record map. When ids repeat, the first record wins."""
    index: dict[int, T] = {}
    for record in records:
        index.setdefault(record.id, record)
    return index


def parse_id_list(value) -> tuple[list[int], list[str]]:
    """Parse '1,2, 5' style id lists into ints.

    Returns (ids, rejected) where rejected holds tokens that are not integers.
    Empty tokens are ignored.
    """
    if value is None:
        return [], []
    if isinstance(value, int):
        return [value], []
    ids: list[int] = []
    rejected: list[str] = []
    for token in str(value).split(","):
        token = token.strip()
        if not token:
            continue
        parsed = parse_int(token)
        if parsed is None:
            rejected.append(token)
        else:
            ids.append(parsed)
    return ids, rejected


def parse_int(value) -> Optional[int]:
    """Parse an int from an int or numeric string, else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except (ValueError, TypeError):
        return None
