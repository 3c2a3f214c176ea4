"""Shared fixtures for repository unit tests"""

import pytest

from mdblog.crud.memory_repo import MemoryRepo


DOCS = {
    "alpha": "---\nid: alpha\ntitle: Alpha\ncategory: A\ndate: 2024-01-01\n---\n# Alpha\n\nFirst.\n",
    "beta": "---\nid: beta\ntitle: Beta\ncategory: B\n---\nSecond.\n",
    "beta-again": "---\nid: beta\ntitle: Beta Reloaded\ncategory: B\n---\nThird.\n",
    "No Id Here": "---\ntitle: Anonymous\n---\nFourth.\n",
}


@pytest.fixture(name="repo")
def repo_fixture() -> MemoryRepo:
    return MemoryRepo(DOCS)
