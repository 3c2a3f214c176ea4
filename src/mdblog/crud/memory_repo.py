"""In-memory post repository over raw document strings"""

from typing import Mapping

from mdblog.crud.repo import PostRepo


class MemoryRepo(PostRepo):
    """Documents given as {name: raw_text}; load order is mapping order."""

    def __init__(self, documents: Mapping[str, str]):
        super().__init__()
        self._documents = dict(documents)

    def read_documents(self) -> list[tuple[str, str]]:
        return list(self._documents.items())
