"""Unit tests for core/models.py"""

import pytest
from pydantic import TypeAdapter, ValidationError

from mdblog.core.models import BlogPost, Callout, Code, ContentBlock, Heading, PostMetadata, Table


def test_serialized_names_are_camel_case():
    """Multi-word fields serialize under camelCase names."""
    table = Table(table_headers=("A",), table_rows=(("1",),))
    assert table.model_dump(by_alias=True) == {"type": "table", "tableHeaders": ("A",), "tableRows": (("1",),)}


def test_unset_fields_are_absent():
    """Unset optional fields are omitted rather than emitted as null."""
    dumped = Code(content="x").model_dump(by_alias=True, exclude_none=True)
    assert dumped == {"type": "code", "content": "x"}


def test_empty_values_are_kept():
    """An empty title is distinct from a missing one."""
    callout = Callout(content="", callout_title="")
    assert callout.model_dump(by_alias=True, exclude_none=True)["calloutTitle"] == ""


def test_blocks_are_frozen():
    """Blocks cannot be mutated after construction."""
    block = Heading(content="H", level=1)
    with pytest.raises(ValidationError):
        block.content = "changed"


def test_heading_level_restricted():
    """Heading levels outside 1-3 are rejected by the model."""
    with pytest.raises(ValidationError):
        Heading(content="H", level=4)


def test_content_block_discriminated_by_type():
    """ContentBlock validation dispatches on the type tag."""
    adapter = TypeAdapter(ContentBlock)
    block = adapter.validate_python({"type": "callout", "content": "c", "calloutVariant": "tip"})
    assert block == Callout(content="c", callout_variant="tip")


def test_unknown_callout_variant_rejected():
    """Only the four callout variants are valid."""
    with pytest.raises(ValidationError):
        Callout(content="c", callout_variant="danger")


def test_blog_post_metadata_projection():
    """metadata() drops content and keeps identity fields."""
    post = BlogPost(id="p", title="T", category="C", tags=("a",), content=(Heading(content="H", level=1),))
    assert post.metadata() == PostMetadata(id="p", title="T", category="C", tags=("a",))
