"""Shared fixtures for core unit tests"""

import pytest

from markshare.core.models import ConversationEntry, Role


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- [x] item two

```python
print("hello")
```

| Name | Score |
|:-----|------:|
| Ada  | 10    |

> quoted *text*

---

Footer paragraph.
"""

SAMPLE_FM_MD = """\
---
title: Test Doc
slug: test-doc
tags: [a, b]
---

# Title

Body content.
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="entries")
def entries_fixture():
    return [
        ConversationEntry(role=Role.user, content="Explain **this**"),
        ConversationEntry(role=Role.assistant, content="<think>plan it</think>\n\nSure:\n\n1. first\n2. second"),
        ConversationEntry(role=Role.system, content="> note"),
        ConversationEntry(role=Role.user, content="`thanks`"),
    ]


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture():
    return SAMPLE_FM_MD
