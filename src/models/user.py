"""User model."""
from dataclasses import dataclass

from src.models.fields import require_int, require_str


@dataclass(frozen=True)
class User:
    id: int
    name: str
    sex: str | None = None  # "m" | "f"; None only for the ALL sentinel

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(id=require_int(data, "id"), name=require_str(data, "name"), sex=data["sex"])

    @property
    def is_all(self) -> bool:
        return self.id == ALL_USERS.id

    def __repr__(self) -> str:
        return f"<User id={self.id} name={self.name!r}>"


# Sentinel meaning "no user filter"
ALL_USERS = User(id=0, name="All")
