"""Post repository: listing, lookup by id, and full loads over a fixed corpus"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Optional

from mdblog.core.models import BlogPost, PostMetadata
from mdblog.core.posts import build_metadata, build_post


logger = logging.getLogger(__name__)


class PostLoadError(RuntimeError):
    """The source corpus could not be read."""


class PostRepo(ABC):
    """Read-only access to a static set of raw markdown documents.

    Front matter is read once per repository and each post body is parsed at
    most once; the corpus is immutable, so cached results never go stale.
    Safe to call from multiple threads.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._docs: Optional[list[tuple[str, str]]] = None
        self._metadata: Optional[list[PostMetadata]] = None
        self._index: dict[str, int] = {}
        self._posts: dict[int, BlogPost] = {}

    @abstractmethod
    def read_documents(self) -> list[tuple[str, str]]:
        """Return (name, raw_text) pairs in load order."""
        raise NotImplementedError

    def _load(self) -> list[PostMetadata]:
        with self._lock:
            if self._metadata is None:
                docs = self.read_documents()
                metadata = [build_metadata(text, name) for name, text in docs]
                index: dict[str, int] = {}
                for i, meta in enumerate(metadata):
                    if meta.id in index:
                        logger.warning("Duplicate post id %r: %s replaces %s",
                                       meta.id, docs[i][0], docs[index[meta.id]][0])
                    index[meta.id] = i            # last loaded wins
                self._docs, self._index, self._metadata = docs, index, metadata
                logger.debug("Loaded %d post(s)", len(metadata))
            return self._metadata

    def _post_at(self, i: int) -> BlogPost:
        with self._lock:
            if i not in self._posts:
                name, text = self._docs[i]
                self._posts[i] = build_post(text, name)
            return self._posts[i]

    def load_posts_metadata(self) -> list[PostMetadata]:
        """Metadata for every document, in load order (duplicates included)."""
        return list(self._load())

    def load_post_by_id(self, post_id: str) -> Optional[BlogPost]:
        """The fully parsed post with this id, or None if there is none."""
        self._load()
        i = self._index.get(post_id)
        return None if i is None else self._post_at(i)

    def load_markdown_posts(self) -> list[BlogPost]:
        """Every document fully parsed, in load order."""
        return [self._post_at(i) for i in range(len(self._load()))]
