"""Post assembly: combine front matter and parsed blocks into post records"""

import logging
from datetime import date, datetime, timezone
from typing import Iterable, Optional, TypeVar

from mdblog.core.frontmatter import extract_frontmatter
from mdblog.core.models import BlogPost, FrontMatter, PostMetadata
from mdblog.core.parse import ParsedDoc, parse_text
from mdblog.core.utils.slug import slugify


logger = logging.getLogger(__name__)

M = TypeVar('M', bound=PostMetadata)


def post_id(frontmatter: FrontMatter, name: str) -> str:
    """Declared `id` if present, else the slugified document name."""
    return frontmatter.id or slugify(name)


def _metadata_fields(frontmatter: FrontMatter, name: str) -> dict:
    return {
        "id": post_id(frontmatter, name),
        "title": frontmatter.title or "",
        "category": frontmatter.category or "",
        "date": frontmatter.date,
        "tags": frontmatter.tags,
    }


def build_metadata(text: str, name: str) -> PostMetadata:
    """Metadata-only projection; the body is never segmented."""
    frontmatter, _ = extract_frontmatter(text)
    return PostMetadata(**_metadata_fields(frontmatter, name))


def assemble_post(parsed: ParsedDoc) -> BlogPost:
    return BlogPost(**_metadata_fields(parsed.frontmatter, parsed.name), content=parsed.blocks)


def build_post(text: str, name: str) -> BlogPost:
    """Parse a raw document into a complete BlogPost."""
    return assemble_post(parse_text(text, name))


def parse_date(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO date or datetime string as UTC; None when absent or unparseable."""
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        try:
            parsed = datetime.combine(date.fromisoformat(value[:10]), datetime.min.time())
        except ValueError:
            logger.warning("Unparseable post date: %r", value)
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def sort_by_date(posts: Iterable[M]) -> list[M]:
    """Newest first; posts without a usable date go last. Ties ordered by id."""
    posts = list(posts)
    dated = [(parse_date(p.date), p) for p in posts]
    with_date = sorted(((d, p) for d, p in dated if d), key=lambda dp: dp[1].id)
    with_date.sort(key=lambda dp: dp[0], reverse=True)
    without = sorted((p for d, p in dated if d is None), key=lambda p: p.id)
    return [p for _, p in with_date] + without
