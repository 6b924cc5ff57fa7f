"""
Library Catalog Package.

An in-memory catalog of borrowable items and the members who borrow them,
plus a small word frequency utility.

Key Components:
- models: Pydantic models for items and members
- catalog: the Catalog that owns records and runs checkout/checkin
- circulation: result-returning wrappers around checkout/checkin
- errors: exception hierarchy and error kinds
- text: word frequency counting
- config: configuration management with pydantic-settings
"""

__version__ = "0.1.0"

from .catalog import Catalog
from .circulation import CirculationResult, checkin_item, checkout_item
from .errors import (
    CatalogError,
    ErrorKind,
    ItemNotBorrowedError,
    ItemNotFoundError,
    ItemUnavailableError,
    MemberNotFoundError,
)
from .models import Book, Category, LibraryItem, Member

__all__ = [
    "Book",
    "Catalog",
    "CatalogError",
    "Category",
    "CirculationResult",
    "ErrorKind",
    "ItemNotBorrowedError",
    "ItemNotFoundError",
    "ItemUnavailableError",
    "LibraryItem",
    "Member",
    "MemberNotFoundError",
    "__version__",
    "checkin_item",
    "checkout_item",
]
