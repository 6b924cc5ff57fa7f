"""
In-memory catalog of library items and members.

The ``Catalog`` owns every item and member record. Records are stored in
insertion-ordered dicts keyed by identifier; checkout and checkin replace the
stored records with modified copies, so callers holding an earlier record
never observe later changes.

Every mutating operation validates first and mutates last, so a failed
operation leaves the catalog exactly as it was.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta

from .config import CatalogConfig, get_config
from .errors import (
    DuplicateItemError,
    DuplicateMemberError,
    ItemNotBorrowedError,
    ItemNotFoundError,
    ItemUnavailableError,
    MemberNotFoundError,
)
from .models import Category, LibraryItem, Member

logger = logging.getLogger(__name__)


class Catalog:
    """Manages the collections of items and members."""

    def __init__(
        self,
        config: CatalogConfig | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.config = config or get_config()
        self._clock = clock
        self._items: dict[str, LibraryItem] = {}
        self._members: dict[int, Member] = {}

    # ------------------------- Records ------------------------- #

    @property
    def items(self) -> list[LibraryItem]:
        return list(self._items.values())

    @property
    def members(self) -> list[Member]:
        return list(self._members.values())

    def get_item(self, item_id: str) -> LibraryItem | None:
        return self._items.get(item_id)

    def get_member(self, member_id: int) -> Member | None:
        return self._members.get(member_id)

    def add_item(self, item: LibraryItem) -> None:
        """
        Add an item to the catalog.

        Raises:
            DuplicateItemError: If the identifier is taken and duplicates are rejected
        """
        if item.item_id in self._items:
            if self.config.reject_duplicate_ids:
                raise DuplicateItemError(item.item_id)
            logger.warning("Ignoring duplicate item %s", item.item_id)
            return
        self._items[item.item_id] = item
        logger.debug("Added item %s", item.item_id)

    def add_member(self, member: Member) -> None:
        """
        Add a member to the catalog.

        Items already held by the new member must be borrowed records of this
        catalog that no other member holds.

        Raises:
            DuplicateMemberError: If the identifier is taken and duplicates are rejected
            ItemNotFoundError: If a held item is not in the catalog
            ItemNotBorrowedError: If a held item is available or held by another member
        """
        if member.member_id in self._members:
            if self.config.reject_duplicate_ids:
                raise DuplicateMemberError(member.member_id)
            logger.warning("Ignoring duplicate member %s", member.member_id)
            return

        for held in member.borrowed_items:
            item = self._items.get(held.item_id)
            if item is None:
                raise ItemNotFoundError(held.item_id)
            if item.is_available or any(
                other.holds(held.item_id) for other in self._members.values()
            ):
                raise ItemNotBorrowedError(held.item_id)
        self._members[member.member_id] = member
        logger.debug("Added member %s", member.member_id)

    # ------------------------- Circulation ------------------------- #

    def _require(self, member_id: int, item_id: str) -> tuple[Member, LibraryItem]:
        member = self._members.get(member_id)
        if member is None:
            raise MemberNotFoundError(member_id)
        item = self._items.get(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        return member, item

    def checkout(self, member_id: int, item_id: str) -> None:
        """
        Lend an item to a member.

        The item is marked unavailable with the current time as its borrow
        stamp, and a copy of it is appended to the member's held items.

        Raises:
            MemberNotFoundError: If no member has ``member_id``
            ItemNotFoundError: If no item has ``item_id``
            ItemUnavailableError: If the item is already borrowed
        """
        member, item = self._require(member_id, item_id)
        if not item.is_available:
            raise ItemUnavailableError(item_id)

        borrowed = item.checked_out(self._clock())
        self._items[item_id] = borrowed
        self._members[member_id] = member.with_item(borrowed)
        logger.info("Member %s checked out item %s", member_id, item_id)

    def checkin(self, member_id: int, item_id: str) -> None:
        """
        Take a borrowed item back from a member.

        Raises:
            MemberNotFoundError: If no member has ``member_id``
            ItemNotFoundError: If no item has ``item_id``
            ItemNotBorrowedError: If the item is not currently borrowed by this member
        """
        member, item = self._require(member_id, item_id)
        # a borrowed item can only come back from the member holding it
        if item.is_available or not member.holds(item_id):
            raise ItemNotBorrowedError(item_id)

        self._items[item_id] = item.checked_in()
        self._members[member_id] = member.without_item(item_id)
        logger.info("Member %s checked in item %s", member_id, item_id)

    # ------------------------- Queries ------------------------- #

    def find_by_category(self, category: Category | str) -> list[LibraryItem]:
        """Items in ``category``, in catalog order."""
        category = Category(category)
        found = [
            item for item in self._items.values() if getattr(item, "category", None) == category
        ]
        logger.debug("Found %d item(s) in category %s", len(found), category.value)
        return found

    def find_overdue(self, threshold_days: int | None = None) -> list[LibraryItem]:
        """
        Items borrowed strictly longer ago than ``threshold_days``.

        Args:
            threshold_days: Allowed loan length; defaults to the configured threshold

        Returns:
            Overdue items, in catalog order
        """
        if threshold_days is None:
            threshold_days = self.config.overdue_threshold_days
        if threshold_days < 0:
            raise ValueError("Threshold must be non-negative")

        cutoff = self._clock() - timedelta(days=threshold_days)
        found = [item for item in self._items.values() if item.is_overdue(cutoff)]
        logger.debug("Found %d overdue item(s) older than %s", len(found), cutoff)
        return found

    # ------------------------- Display ------------------------- #

    def display_items(self) -> str:
        return _join_lines(self._items.values())

    def display_members(self) -> str:
        return _join_lines(self._members.values())

    def display_by_category(self, category: Category | str) -> str:
        return _join_lines(self.find_by_category(category))

    def display_overdue(self, threshold_days: int | None = None) -> str:
        return _join_lines(self.find_overdue(threshold_days))


def _join_lines(records) -> str:
    return "\n".join(record.display_info() for record in records)
