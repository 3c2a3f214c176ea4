"""Root test configuration: on-disk post fixtures shared by crud, pipeline, and CLI tests"""

from pathlib import Path

import pytest


FIRST_POST = """\
---
id: first-post
title: First Post
category: Notes
date: 2024-01-10
tags: intro, meta
---

# Hello

The **first** paragraph of the first post.
"""

SECOND_POST = """\
---
id: second-post
title: Second Post
category: Systems
date: 2024-03-05
---

## Setup

```ts
# filename: server.ts
const port = 8080;
```
"""

UNDATED_POST = """\
---
title: Draft
category: Notes
---

Just a draft.
"""


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(tmp_path) -> Path:
    """A posts directory with two dated posts and one undated post without an id."""
    d = tmp_path / "posts"
    d.mkdir()
    (d / "first.md").write_text(FIRST_POST, encoding="utf-8")
    (d / "second.md").write_text(SECOND_POST, encoding="utf-8")
    (d / "Undated Draft.md").write_text(UNDATED_POST, encoding="utf-8")
    (d / "notes.txt").write_text("ignored", encoding="utf-8")
    return d
