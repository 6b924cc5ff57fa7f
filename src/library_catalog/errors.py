"""
Error hierarchy for the library catalog.

Catalog operations raise these exceptions synchronously and never recover
internally. Every error carries an ``ErrorKind`` so that callers which prefer
explicit result values (see ``library_catalog.circulation``) can translate
an exception into a plain status without matching on exception types.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Machine-readable category of a failed catalog operation."""

    ITEM_UNAVAILABLE = "item_unavailable"
    ITEM_NOT_BORROWED = "item_not_borrowed"
    MEMBER_NOT_FOUND = "member_not_found"
    ITEM_NOT_FOUND = "item_not_found"
    DUPLICATE_ITEM = "duplicate_item"
    DUPLICATE_MEMBER = "duplicate_member"
    INVALID_INPUT = "invalid_input"


class CatalogError(Exception):
    """Base exception for catalog operations."""

    kind: ErrorKind


class NotFoundError(CatalogError):
    """Raised when a member or item is not in the catalog."""


class MemberNotFoundError(NotFoundError):
    kind = ErrorKind.MEMBER_NOT_FOUND

    def __init__(self, member_id: int):
        self.member_id = member_id
        super().__init__(f"Member {member_id} not found")


class ItemNotFoundError(NotFoundError):
    kind = ErrorKind.ITEM_NOT_FOUND

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Item {item_id} not found")


class ItemUnavailableError(CatalogError):
    """Raised when checking out an item that is already borrowed."""

    kind = ErrorKind.ITEM_UNAVAILABLE

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Item {item_id} is not available")


class ItemNotBorrowedError(CatalogError):
    """Raised when checking in an item that is not borrowed."""

    kind = ErrorKind.ITEM_NOT_BORROWED

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Item {item_id} is not borrowed")


class DuplicateError(CatalogError):
    """Raised when adding a record whose identifier is already taken."""


class DuplicateItemError(DuplicateError):
    kind = ErrorKind.DUPLICATE_ITEM

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"Item {item_id} already exists")


class DuplicateMemberError(DuplicateError):
    kind = ErrorKind.DUPLICATE_MEMBER

    def __init__(self, member_id: int):
        self.member_id = member_id
        super().__init__(f"Member {member_id} already exists")
