"""
Member model for the library catalog.

A member holds copies of the items they currently have checked out. Like
items, members are value-like: checkout and checkin produce a new record
that the catalog stores in place of the old one.
"""

from pydantic import BaseModel, ConfigDict, Field, SerializeAsAny

from .item import LibraryItem


class Member(BaseModel):
    """Represents a library member who can borrow items."""

    member_id: int = Field(
        ...,
        description="Unique identifier for the member",
        examples=[1, 42],
    )

    name: str = Field(
        ...,
        description="Display name of the member",
        min_length=1,
        examples=["John Doe", "Jane Roe"],
    )

    borrowed_items: list[SerializeAsAny[LibraryItem]] = Field(
        default_factory=list,
        description="Copies of the items currently held, in checkout order",
    )

    model_config = ConfigDict(
        frozen=True,
        str_strip_whitespace=True,
        extra="forbid",
        json_schema_extra={
            "example": {
                "member_id": 1,
                "name": "John Doe",
                "borrowed_items": [],
            }
        },
    )

    @property
    def held_item_ids(self) -> list[str]:
        """Identifiers of held items, in checkout order."""
        return [item.item_id for item in self.borrowed_items]

    def holds(self, item_id: str) -> bool:
        """Check whether the member currently holds ``item_id``."""
        return any(item.item_id == item_id for item in self.borrowed_items)

    def with_item(self, item: LibraryItem) -> "Member":
        """Return a copy of this member holding ``item`` as well."""
        return self.model_copy(update={"borrowed_items": [*self.borrowed_items, item]})

    def without_item(self, item_id: str) -> "Member":
        """Return a copy of this member with every copy of ``item_id`` removed."""
        remaining = [item for item in self.borrowed_items if item.item_id != item_id]
        return self.model_copy(update={"borrowed_items": remaining})

    def display_info(self) -> str:
        return f"Member #{self.member_id} - {self.name}"
