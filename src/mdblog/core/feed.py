"""RSS 2.0 feed generation from parsed posts"""

import html
from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from mdblog.core.inline import plain_text
from mdblog.core.models import BlogPost, Paragraph
from mdblog.core.posts import parse_date, sort_by_date


class FeedConfig(BaseModel):
    """Site identity for the feed channel; passed in explicitly by the caller."""
    site_url:         str
    site_title:       str
    site_description: str = ""
    language:         str = "en-us"
    excerpt_length:   int = Field(default=200, ge=1)


def excerpt(post: BlogPost, length: int = 200) -> str:
    """Plain text of the first paragraph block, cut to length with '...' when cut."""
    para = next((b for b in post.content if isinstance(b, Paragraph)), None)
    if para is None:
        return ""
    text = plain_text(para.content)
    return text if len(text) <= length else text[:length].rstrip() + "..."


def _escape(text: str) -> str:
    return html.escape(text, quote=True)


def post_url(config: FeedConfig, post_id: str) -> str:
    return f"{config.site_url.rstrip('/')}/blog/{post_id}"


def _item(post: BlogPost, config: FeedConfig) -> str:
    link = _escape(post_url(config, post.id))
    lines = [
        "    <item>",
        f"      <title>{_escape(post.title)}</title>",
        f"      <link>{link}</link>",
        f"      <guid>{link}</guid>",
        f"      <description>{_escape(excerpt(post, config.excerpt_length))}</description>",
        f"      <category>{_escape(post.category)}</category>",
    ]
    if published := parse_date(post.date):
        lines.append(f"      <pubDate>{format_datetime(published)}</pubDate>")
    lines.append("    </item>")
    return "\n".join(lines)


def generate_rss(
    posts: Iterable[BlogPost],
    config: FeedConfig,
    build_date: Optional[datetime] = None,
    ) -> str:
    """Render an RSS 2.0 document; items are ordered newest first."""
    build_date = build_date or datetime.now(timezone.utc)
    site_url = config.site_url.rstrip('/')
    return "\n".join([
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">',
        "  <channel>",
        f"    <title>{_escape(config.site_title)}</title>",
        f"    <link>{_escape(site_url)}</link>",
        f"    <description>{_escape(config.site_description)}</description>",
        f"    <language>{_escape(config.language)}</language>",
        f"    <lastBuildDate>{format_datetime(build_date)}</lastBuildDate>",
        f'    <atom:link href="{_escape(site_url)}/rss.xml" rel="self" type="application/rss+xml"/>',
        *(_item(p, config) for p in sort_by_date(posts)),
        "  </channel>",
        "</rss>",
    ])
