"""Unit tests for core/utils/slug.py"""

import pytest

from mdblog.core.utils.slug import slugify


@pytest.mark.parametrize("text,expected", [
    ("Hello World", "hello-world"),
    ("my_file_name", "my-file-name"),
    ("  leading and trailing  ", "leading-and-trailing"),
    ("multiple---hyphens", "multiple-hyphens"),
    ("Special! Ch@rs#", "special-ch-rs"),
    ("Café au lait", "cafe-au-lait"),
    ("", ""),
])
def test_slugify(text, expected):
    """slugify folds to lowercase ASCII and joins words with single hyphens."""
    assert slugify(text) == expected
