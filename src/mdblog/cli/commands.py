"""CLI command implementations"""

import json
from typing import Annotated, Optional

import typer

from mdblog.config import Settings, load_config
from mdblog.core.export import dump_model
from mdblog.core.pipeline import open_repo, run_build, run_feed, run_list
from mdblog.crud.repo import PostLoadError
from mdblog.log import configure_logging


PostsDir = Annotated[Optional[str], typer.Option("--posts-dir", help="Directory of markdown posts")]
OutDir   = Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")]
SiteUrl  = Annotated[Optional[str], typer.Option("--site-url", help="Absolute site URL for feed links")]
Verbose  = Annotated[Optional[bool], typer.Option("--verbose", "-v", help="Enable debug logging")]
LogJson  = Annotated[Optional[bool], typer.Option("--log-json", help="Emit logs as JSON lines")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config and configure logging with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(verbose=settings.verbose, log_json=settings.log_json)
    return settings


def build_cmd(
    posts: PostsDir = None,
    out: OutDir = None,
    site_url: SiteUrl = None,
    verbose: Verbose = None,
    log_json: LogJson = None,
    ):
    """Export posts.json, posts/<id>.json for every post, and rss.xml."""
    settings = _settings(overrides={
        "posts_dir": posts, "output_dir": out, "site_url": site_url,
        "verbose": verbose, "log_json": log_json,
    })
    try:
        written = run_build(settings)
    except PostLoadError as e:
        _fail("Build failed", e)
    for path in written["posts"]:
        typer.echo(f"  {path}")
    typer.echo(f"Exported {len(written['posts'])} post(s) to {settings.output_dir}/")


def list_cmd(
    posts: PostsDir = None,
    verbose: Verbose = None,
    log_json: LogJson = None,
    ):
    """List posts newest first: id, date, category, title."""
    settings = _settings(overrides={"posts_dir": posts, "verbose": verbose, "log_json": log_json})
    try:
        metadata = run_list(settings)
    except PostLoadError as e:
        _fail("Could not load posts", e)
    if not metadata:
        typer.echo("No posts found.")
        raise typer.Exit(1)
    for m in metadata:
        typer.echo(f"{m.id}\t{m.date or '-'}\t{m.category or '-'}\t{m.title}")


def show_cmd(
    post_id: Annotated[str, typer.Argument(help="Post id")],
    posts: PostsDir = None,
    verbose: Verbose = None,
    log_json: LogJson = None,
    ):
    """Print one parsed post as JSON."""
    settings = _settings(overrides={"posts_dir": posts, "verbose": verbose, "log_json": log_json})
    try:
        post = open_repo(settings).load_post_by_id(post_id)
    except PostLoadError as e:
        _fail("Could not load posts", e)
    if post is None:
        _fail(f"Post not found: {post_id}")
    typer.echo(json.dumps(dump_model(post), indent=2, ensure_ascii=False))


def rss_cmd(
    posts: PostsDir = None,
    out: OutDir = None,
    site_url: SiteUrl = None,
    verbose: Verbose = None,
    log_json: LogJson = None,
    ):
    """Write only the RSS feed."""
    settings = _settings(overrides={
        "posts_dir": posts, "output_dir": out, "site_url": site_url,
        "verbose": verbose, "log_json": log_json,
    })
    try:
        path = run_feed(settings)
    except PostLoadError as e:
        _fail("Feed generation failed", e)
    typer.echo(f"RSS feed generated: {path}")
