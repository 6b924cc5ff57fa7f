"""
Console walkthrough of the library catalog.

Usage:
    python -m library_catalog [--overdue-days N] [--no-words]

Builds a small sample catalog, runs a few circulation operations and prints
the resulting listings to stdout. Failed operations are printed and the
walkthrough carries on. Log output goes to stderr.
"""

import argparse
import logging
import sys

from .catalog import Catalog
from .config import get_config
from .errors import CatalogError
from .models import Book, Category, Member
from .text import count_word_frequency, format_frequencies, repeated_words

logger = logging.getLogger(__name__)

SAMPLE_WORDS = [
    "Swift", "is", "a", "powerful", "language", "Swift", "is", "also", "easy", "to", "learn",
    "Python", "is", "also", "powerful",
]


def build_sample_catalog(catalog: Catalog) -> Catalog:
    """Populate ``catalog`` with the walkthrough's books and member."""
    catalog.add_item(
        Book(item_id="B001", title="1984", author="George Orwell", category=Category.NOVEL)
    )
    catalog.add_item(
        Book(item_id="B002", title="The Raven", author="Edgar Allan Poe", category=Category.POETRY)
    )
    catalog.add_member(Member(member_id=1, name="John Doe"))
    return catalog


def section(title: str, body: str) -> str:
    return f"{title}:\n\n{body}\n"


def run(overdue_days: int | None = None, show_words: bool = True) -> int:
    catalog = build_sample_catalog(Catalog())

    for member_id, item_id in [(1, "B001"), (1, "B001")]:
        try:
            catalog.checkout(member_id, item_id)
            print("Book borrowed successfully\n")
        except CatalogError as e:
            print(f"Error: {e}\n")

    print(section("All Books", catalog.display_items()))
    print(section("Members", catalog.display_members()))
    print(section("Overdue Books", catalog.display_overdue(overdue_days)))
    print(section("Poetry Books", catalog.display_by_category(Category.POETRY)))

    if show_words:
        frequencies = count_word_frequency(SAMPLE_WORDS)
        pairs = repeated_words(frequencies, get_config().repeated_word_min_count)
        print(section("Repeated Words", format_frequencies(pairs)))

    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the catalog walkthrough."""
    parser = argparse.ArgumentParser(description="Walk through a sample library catalog")
    parser.add_argument(
        "--overdue-days",
        type=int,
        default=None,
        help="Override the configured overdue threshold in days",
    )
    parser.add_argument(
        "--no-words",
        action="store_true",
        help="Skip the word frequency listing",
    )
    args = parser.parse_args(argv)

    config = get_config()
    logging.basicConfig(
        level=config.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],  # stdout carries the listings
    )
    logger.debug("Starting walkthrough with config: %s", config.model_dump())

    return run(overdue_days=args.overdue_days, show_words=not args.no_words)


if __name__ == "__main__":
    sys.exit(main())
