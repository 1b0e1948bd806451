"""Domain records exchanged with the document store."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from forked.errors import InvalidArgument
from forked.normalize.ingredients import Ingredient


def new_id() -> str:
    """Generate a new opaque document identifier."""
    return uuid.uuid4().hex


def parse_document_id(raw: Any) -> str:
    """
    Convert an identifier-like value into a canonical document id.

    Accepts UUID instances and UUID strings in any of their standard
    spellings; everything else is rejected.
    """
    if isinstance(raw, uuid.UUID):
        return raw.hex
    if not isinstance(raw, str):
        raise InvalidArgument(f"Invalid id: {raw!r}")
    try:
        return uuid.UUID(raw.strip()).hex
    except ValueError:
        raise InvalidArgument(f"Invalid id: {raw}") from None


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class UserContext:
    """Public identity of an authenticated user."""

    id: str
    name: str
    email: str


@dataclass(frozen=True)
class Creator:
    """Snapshot of a recipe's author taken at creation time."""

    id: str
    name: str
    email: str

    @classmethod
    def from_user(cls, user: UserContext) -> "Creator":
        return cls(id=user.id, name=user.name, email=user.email)

    def to_document(self) -> dict[str, str]:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass
class Recipe:
    """A recipe whose ingredients are already normalized."""

    name: str
    ingredients: list[Ingredient]
    instructions: list[str]
    creator: Creator
    image_url: str | None = None
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    id: str | None = None


@dataclass
class UserAccount:
    """Stored user account including the password hash."""

    email: str
    name: str
    hashed_password: str
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
    id: str | None = None

    def to_context(self) -> UserContext:
        if self.id is None:
            raise ValueError("User account has not been stored yet")
        return UserContext(id=self.id, name=self.name, email=self.email)


@dataclass
class Comment:
    """A comment left on a recipe, addressed by recipe name."""

    recipe_name: str
    user_id: str
    user_name: str
    text: str
    created_at: datetime = field(default_factory=utcnow)
    id: str | None = None
