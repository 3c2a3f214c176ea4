"""Content block, post metadata, and post models for the parse pipeline"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


CalloutVariant = Literal["note", "tip", "warning", "question"]
CALLOUT_VARIANTS: tuple[str, ...] = ("note", "tip", "warning", "question")


class _Model(BaseModel):
    """Frozen base; fields serialize under their camelCase names."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class Paragraph(_Model):
    type: Literal["paragraph"] = "paragraph"
    content: str


class Heading(_Model):
    type: Literal["heading"] = "heading"
    content: str
    level: Literal[1, 2, 3]


class Code(_Model):
    type: Literal["code"] = "code"
    content: str
    language: Optional[str] = None
    filename: Optional[str] = None


class BulletList(_Model):
    type: Literal["list"] = "list"
    items: tuple[str, ...]


class OrderedList(_Model):
    type: Literal["ordered-list"] = "ordered-list"
    items: tuple[str, ...]


class Blockquote(_Model):
    type: Literal["blockquote"] = "blockquote"
    content: str


class Divider(_Model):
    type: Literal["divider"] = "divider"


class InlineCode(_Model):
    type: Literal["inline-code"] = "inline-code"
    content: str


class Image(_Model):
    """Standalone image; content carries the image URL."""
    type: Literal["image"] = "image"
    content: str
    alt: str = ""
    caption: Optional[str] = None


class Table(_Model):
    """Rows are not padded to the header width."""
    type: Literal["table"] = "table"
    table_headers: tuple[str, ...]
    table_rows: tuple[tuple[str, ...], ...] = ()


class Callout(_Model):
    type: Literal["callout"] = "callout"
    content: str
    callout_variant: CalloutVariant = "note"
    callout_title: Optional[str] = None


ContentBlock = Annotated[
    Union[
        Paragraph, Heading, Code, BulletList, OrderedList, Blockquote,
        Divider, InlineCode, Image, Table, Callout,
    ],
    Field(discriminator="type"),
]


class FrontMatter(_Model):
    """Recognised front matter keys; anything not declared stays None."""
    id:       Optional[str] = None
    title:    Optional[str] = None
    category: Optional[str] = None
    date:     Optional[str] = None
    tags:     Optional[tuple[str, ...]] = None


class PostMetadata(_Model):
    """Post identity used by navigation and listings; no content."""
    id:       str
    title:    str = ""
    category: str = ""
    date:     Optional[str] = None
    tags:     Optional[tuple[str, ...]] = None


class BlogPost(PostMetadata):
    """A fully parsed post. Blocks are in document order."""
    content: tuple[ContentBlock, ...] = ()

    def metadata(self) -> PostMetadata:
        """Project this post down to its listing metadata."""
        return PostMetadata.model_validate(self.model_dump(exclude={"content"}))
