"""Tests for link statistics."""

from __future__ import annotations

from mdlinks.models import Link, Options, Stats, ValidatedLink
from mdlinks.stats import aggregate


class TestAggregate:
    def test_counts_unique_hrefs(self) -> None:
        links = [
            Link(file="a.md", text="1", href="http://a"),
            Link(file="a.md", text="2", href="http://a"),
            Link(file="b.md", text="3", href="http://b"),
        ]
        assert aggregate(links) == Stats(total=3, unique=2)

    def test_unvalidated_has_no_broken(self) -> None:
        links = [
            Link(file="file1.md", text="Link 1", href="http://example.com"),
            Link(file="file2.md", text="Link 2", href="http://invalid.example.com"),
        ]
        stats = aggregate(links, Options(stats=True))
        assert stats.to_dict() == {"total": 2, "unique": 2}

    def test_validated_counts_broken(self) -> None:
        links = [
            ValidatedLink(file="f1.md", text="Link 1", href="http://example.com", status=200, ok="ok"),
            ValidatedLink(
                file="f2.md",
                text="Link 2",
                href="http://invalid.example.com",
                status=404,
                ok="Not Found",
            ),
        ]
        stats = aggregate(links, Options(validate=True))
        assert stats.to_dict() == {"total": 2, "unique": 2, "broken": 1}

    def test_href_comparison_is_case_sensitive(self) -> None:
        links = [
            Link(file="a.md", text="x", href="http://Example.com"),
            Link(file="a.md", text="x", href="http://example.com"),
        ]
        assert aggregate(links).unique == 2

    def test_empty(self) -> None:
        assert aggregate([], Options(validate=True)) == Stats(total=0, unique=0, broken=0)
