"""Filter selection snapshot."""
from dataclasses import dataclass, field

from src.models.user import User, ALL_USERS


@dataclass(frozen=True)
class FilterSelection:
    """The three filter selections a viewer can make.

    Instances are never mutated; every change produces a new snapshot.
    """

    by_user: User = ALL_USERS
    by_query: str = ""
    by_category_ids: frozenset[int] = field(default_factory=frozenset)

    @property
    def is_default(self) -> bool:
        return self == FilterSelection()
