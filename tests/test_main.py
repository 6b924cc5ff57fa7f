"""Tests for the console walkthrough."""

from library_catalog.__main__ import build_sample_catalog, main, run
from library_catalog.catalog import Catalog


def test_build_sample_catalog(config, clock):
    catalog = build_sample_catalog(Catalog(config=config, clock=clock))

    assert [item.item_id for item in catalog.items] == ["B001", "B002"]
    assert catalog.display_members() == "Member #1 - John Doe"


def test_run_prints_listings_and_continues_after_errors(capsys):
    assert run() == 0

    out = capsys.readouterr().out
    assert "Book borrowed successfully" in out
    assert "Error: Item B001 is not available" in out
    assert "All Books:\n\n1984 by George Orwell - novel\nThe Raven by Edgar Allan Poe - poetry" in out
    assert "Members:\n\nMember #1 - John Doe" in out
    assert "Poetry Books:\n\nThe Raven by Edgar Allan Poe - poetry" in out
    assert "Repeated Words:\n\nis: 3\nswift: 2" in out


def test_fresh_loans_are_not_overdue(capsys):
    run(show_words=False)

    out = capsys.readouterr().out
    assert "Overdue Books:\n\n\n" in out
    assert "Repeated Words" not in out


def test_main_accepts_arguments(capsys):
    assert main(["--no-words", "--overdue-days", "14"]) == 0
    assert "Repeated Words" not in capsys.readouterr().out
