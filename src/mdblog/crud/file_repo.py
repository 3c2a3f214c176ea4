"""Directory-backed post repository"""

import logging
from pathlib import Path

from mdblog.core.parse import discover_files
from mdblog.crud.repo import PostLoadError, PostRepo


logger = logging.getLogger(__name__)


class FileRepo(PostRepo):
    """Reads every .md/.mdx file under posts_dir once, in sorted path order."""

    def __init__(self, posts_dir: Path):
        super().__init__()
        self.posts_dir = Path(posts_dir)

    def read_documents(self) -> list[tuple[str, str]]:
        if not self.posts_dir.exists():
            raise PostLoadError(f"Posts directory not found: {self.posts_dir}")
        docs = []
        for p in discover_files(self.posts_dir):
            try:
                docs.append((p.stem, p.read_text(encoding='utf-8-sig')))
            except (OSError, UnicodeDecodeError) as e:
                raise PostLoadError(f"Failed to read {p}: {e}") from e
            logger.debug("Read %s", p)
        return docs
