"""
Library catalog models.

Pydantic models for the records the catalog owns:
- LibraryItem: interface shared by every borrowable entry
- Book: the concrete catalog item
- Category: fixed set of item categories
- Member: a library member and the items they hold
"""

from .item import Book, Category, LibraryItem
from .member import Member

__all__ = [
    "Book",
    "Category",
    "LibraryItem",
    "Member",
]
