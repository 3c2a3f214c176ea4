"""Pipeline step functions: repository construction, build, and feed orchestration"""

from pathlib import Path

from mdblog.config import Settings
from mdblog.core.export import export_site, write_feed
from mdblog.core.feed import FeedConfig
from mdblog.core.models import PostMetadata
from mdblog.core.posts import sort_by_date
from mdblog.crud.file_repo import FileRepo


def feed_config(settings: Settings) -> FeedConfig:
    """Feed channel configuration taken from application settings."""
    return FeedConfig(
        site_url=settings.site_url,
        site_title=settings.site_title,
        site_description=settings.site_description,
        language=settings.feed_language,
        excerpt_length=settings.excerpt_length,
    )


def open_repo(settings: Settings) -> FileRepo:
    return FileRepo(Path(settings.posts_dir))


def run_build(settings: Settings) -> dict[str, list[Path]]:
    """Export the index, every post, and the feed to settings.output_dir."""
    return export_site(open_repo(settings), Path(settings.output_dir), feed_config(settings))


def run_feed(settings: Settings) -> Path:
    """Write only rss.xml to settings.output_dir."""
    posts = open_repo(settings).load_markdown_posts()
    return write_feed(posts, Path(settings.output_dir), feed_config(settings))


def run_list(settings: Settings) -> list[PostMetadata]:
    """Post metadata sorted newest first."""
    return sort_by_date(open_repo(settings).load_posts_metadata())
