"""Unit tests for core/posts.py"""

from datetime import datetime, timezone

import pytest

from mdblog.core.models import BlogPost, Heading, PostMetadata
from mdblog.core.posts import build_metadata, build_post, parse_date, sort_by_date


def test_build_post_combines_metadata_and_blocks(sample_md):
    """build_post carries every front matter field and the parsed blocks."""
    post = build_post(sample_md, "tour.md")
    assert isinstance(post, BlogPost)
    assert (post.id, post.title, post.category, post.date) == ("tour", "A Tour", "Guides", "2024-02-01")
    assert post.tags == ("markdown", "parsing")
    assert post.content[0] == Heading(content="A Tour", level=1)


def test_build_metadata_matches_post(sample_md):
    """The metadata projection equals the full post minus content."""
    assert build_metadata(sample_md, "tour") == build_post(sample_md, "tour").metadata()


def test_id_falls_back_to_name():
    """Without a declared id the slugified document name is used."""
    meta = build_metadata("---\ntitle: T\n---\nBody\n", "My First Post")
    assert meta.id == "my-first-post"


def test_missing_fields_default():
    """Absent title and category become empty strings; date and tags stay unset."""
    meta = build_metadata("No header at all.\n", "plain")
    assert meta == PostMetadata(id="plain", title="", category="")
    assert meta.date is None
    assert meta.tags is None


@pytest.mark.parametrize("value,expected", [
    ("2024-03-05", datetime(2024, 3, 5, tzinfo=timezone.utc)),
    ("2024-03-05T10:30:00", datetime(2024, 3, 5, 10, 30, tzinfo=timezone.utc)),
    ("2024-03-05T10:30:00+02:00", datetime(2024, 3, 5, 8, 30, tzinfo=timezone.utc)),
    ("2024-03-05 and more", datetime(2024, 3, 5, tzinfo=timezone.utc)),
    ("March 5th", None),
    ("", None),
    (None, None),
])
def test_parse_date(value, expected):
    """ISO dates and datetimes parse to UTC; anything else is None."""
    assert parse_date(value) == expected


def test_sort_by_date_newest_first_undated_last():
    """Dated posts sort newest first, then undated posts by id."""
    posts = [
        PostMetadata(id="b-undated"),
        PostMetadata(id="old", date="2023-01-01"),
        PostMetadata(id="a-undated", date="someday"),
        PostMetadata(id="new", date="2024-06-01"),
    ]
    assert [p.id for p in sort_by_date(posts)] == ["new", "old", "a-undated", "b-undated"]


def test_sort_by_date_ties_ordered_by_id():
    """Posts sharing a date are ordered by id."""
    posts = [PostMetadata(id="z", date="2024-01-01"), PostMetadata(id="a", date="2024-01-01")]
    assert [p.id for p in sort_by_date(posts)] == ["a", "z"]
