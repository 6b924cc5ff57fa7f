"""
Item models for the library catalog.

``LibraryItem`` is the shared interface for anything that can be displayed and
borrowed. ``Book`` is its only concrete case today.

Items are value-like records: the borrow transitions return a modified copy
instead of mutating in place, and the catalog stores the copy under the
item's identifier.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Category(str, Enum):
    """Fixed set of catalog categories."""

    NOVEL = "novel"
    POETRY = "poetry"
    THEATER = "theater"
    COMICS = "comics"


class LibraryItem(BaseModel, ABC):
    """
    Common shape of every borrowable catalog entry.

    The availability flag and the borrow timestamp always move together:
    an item is unavailable exactly when it has a ``borrowed_at`` stamp.
    """

    item_id: str = Field(
        ...,
        description="Unique identifier of the item within the catalog",
        min_length=1,
        examples=["B001", "B002"],
    )

    title: str = Field(
        ...,
        description="Title of the item",
        min_length=1,
        examples=["1984", "The Raven"],
    )

    is_available: bool = Field(
        default=True,
        description="Whether the item can currently be checked out",
    )

    borrowed_at: datetime | None = Field(
        default=None,
        description="When the item was checked out, None while available",
    )

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        extra="forbid",
    )

    @model_validator(mode="after")
    def validate_borrow_state(self) -> "LibraryItem":
        """Ensure availability and the borrow stamp agree."""
        if self.is_available and self.borrowed_at is not None:
            raise ValueError("Available items cannot have a borrow timestamp")
        if not self.is_available and self.borrowed_at is None:
            raise ValueError("Borrowed items must have a borrow timestamp")
        return self

    @abstractmethod
    def display_info(self) -> str:
        """One-line human readable description."""

    def checked_out(self, at: datetime) -> "LibraryItem":
        """Return a copy of this item marked as borrowed at ``at``."""
        return self.model_copy(update={"is_available": False, "borrowed_at": at})

    def checked_in(self) -> "LibraryItem":
        """Return a copy of this item marked as available again."""
        return self.model_copy(update={"is_available": True, "borrowed_at": None})

    def is_overdue(self, cutoff: datetime) -> bool:
        """Check whether the item was borrowed strictly before ``cutoff``."""
        return not self.is_available and self.borrowed_at is not None and self.borrowed_at < cutoff


class Book(LibraryItem):
    """A book in the catalog."""

    author: str = Field(
        ...,
        description="Author of the book",
        min_length=1,
        examples=["George Orwell", "Edgar Allan Poe"],
    )

    category: Category = Field(
        ...,
        description="Catalog category of the book",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "item_id": "B001",
                "title": "1984",
                "author": "George Orwell",
                "category": "novel",
                "is_available": True,
                "borrowed_at": None,
            }
        },
    )

    def display_info(self) -> str:
        return f"{self.title} by {self.author} - {self.category.value}"
