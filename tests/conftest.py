"""Test configuration and fixtures for the library catalog.

Fixtures provide:
1. Configuration isolation - each test starts from a fresh config
2. A controllable clock - borrow stamps and "now" are deterministic
3. A sample catalog - two books and one member
"""

import os
from collections.abc import Generator
from datetime import datetime, timedelta

import pytest

from library_catalog.catalog import Catalog
from library_catalog.config import CatalogConfig, reset_config
from library_catalog.models import Book, Category, Member


class FakeClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


# === Environment Fixtures ===


@pytest.fixture(autouse=True)
def clean_env() -> Generator[None, None, None]:
    """Remove LIBRARY_CATALOG_* variables and reset the config singleton."""
    original_env = os.environ.copy()
    for key in list(os.environ.keys()):
        if key.startswith("LIBRARY_CATALOG_"):
            del os.environ[key]
    reset_config()

    yield

    os.environ.clear()
    os.environ.update(original_env)
    reset_config()


# === Catalog Fixtures ===


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2024, 3, 1, 12, 0, 0))


@pytest.fixture
def config() -> CatalogConfig:
    return CatalogConfig(overdue_threshold_days=14, reject_duplicate_ids=True)


@pytest.fixture
def novel() -> Book:
    return Book(item_id="B001", title="1984", author="George Orwell", category=Category.NOVEL)


@pytest.fixture
def poem() -> Book:
    return Book(item_id="B002", title="The Raven", author="Edgar Allan Poe", category=Category.POETRY)


@pytest.fixture
def member() -> Member:
    return Member(member_id=1, name="John Doe")


@pytest.fixture
def catalog(config: CatalogConfig, clock: FakeClock, novel: Book, poem: Book, member: Member) -> Catalog:
    """Catalog with two books and one member, driven by the fake clock."""
    catalog = Catalog(config=config, clock=clock)
    catalog.add_item(novel)
    catalog.add_item(poem)
    catalog.add_member(member)
    return catalog
