"""Static export: post JSON files, the listing index, and the RSS feed"""

import json
import logging
import re
from pathlib import Path
from typing import Optional

from mdblog.core.feed import FeedConfig, generate_rss
from mdblog.core.models import BlogPost, PostMetadata
from mdblog.core.posts import sort_by_date
from mdblog.crud.repo import PostRepo


logger = logging.getLogger(__name__)

INDEX_FILE = "posts.json"
POSTS_DIR = "posts"
FEED_FILE = "rss.xml"
UNSAFE_ID_RE = re.compile(r"[/\\\x00]")


def dump_model(model: PostMetadata) -> dict:
    """camelCase dict with unset optional fields omitted."""
    return model.model_dump(mode='json', by_alias=True, exclude_none=True)


def build_index(metadata: list[PostMetadata]) -> list[dict]:
    """Listing index sorted newest first."""
    return [dump_model(m) for m in sort_by_date(metadata)]


def is_safe_id(post_id: str) -> bool:
    """True if the id can be used as a single file name."""
    return bool(post_id) and post_id not in (".", "..") and not UNSAFE_ID_RE.search(post_id)


def write_post(post: BlogPost, output_dir: Path) -> Path:
    """Write one post as posts/<id>.json under output_dir."""
    if not is_safe_id(post.id):
        raise ValueError(f"Post id is not a valid file name: {post.id!r}")
    dest_dir = output_dir / POSTS_DIR
    dest_dir.mkdir(parents=True, exist_ok=True)
    path = dest_dir / f"{post.id}.json"
    path.write_text(json.dumps(dump_model(post), indent=2, ensure_ascii=False), encoding='utf-8')
    return path


def write_feed(posts: list[BlogPost], output_dir: Path, config: FeedConfig) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / FEED_FILE
    path.write_text(generate_rss(posts, config), encoding='utf-8')
    logger.info("RSS feed written to %s", path)
    return path


def export_site(
    repo: PostRepo,
    output_dir: Path,
    config: Optional[FeedConfig] = None,
    ) -> dict[str, list[Path]]:
    """Write index, per-post JSON, and (with a feed config) rss.xml.

    Returns the written paths grouped as {"index": [...], "posts": [...], "feed": [...]}.
    A duplicated id is exported once, as the post that lookup returns. Posts whose
    id is not a valid file name are skipped with a warning.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    metadata = []
    for m in repo.load_posts_metadata():
        if is_safe_id(m.id):
            metadata.append(m)
        else:
            logger.warning("Skipping post with unusable id: %r", m.id)

    index_path = output_dir / INDEX_FILE
    index_path.write_text(json.dumps(build_index(metadata), indent=2, ensure_ascii=False), encoding='utf-8')

    posts = [repo.load_post_by_id(post_id) for post_id in dict.fromkeys(m.id for m in metadata)]
    written = {"index": [index_path], "posts": [write_post(p, output_dir) for p in posts], "feed": []}
    if config is not None:
        written["feed"].append(write_feed(posts, output_dir, config))
    logger.info("Exported %d post(s) to %s", len(posts), output_dir)
    return written
