"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
---
id: tour
title: A Tour
category: Guides
date: 2024-02-01
tags: markdown, parsing
---

# A Tour

Opening paragraph with `code` and a [link](https://example.com).
It spans two lines.

## Code

```python
# filename: hello.py
print("hello")
```

:::tip Pro tip
Keep functions small.
:::

| Name | Value |
| ---- | ----- |
| a    | 1     |
| b    | 2     |

> Quoted line one
> quoted line two

- apples
- pears

1. first
2. second

![A diagram](/img/diagram.png "The diagram")

---

`npm install`
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture() -> str:
    return SAMPLE_MD


@pytest.fixture(name="sample_body")
def sample_body_fixture() -> str:
    return SAMPLE_MD.split("---\n", 2)[2]
