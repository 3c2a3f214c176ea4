"""Inline text normalization and plain-text rendering of inline markup"""

import re

from markdown_it import MarkdownIt


ESCAPED_MARKER_RE = re.compile(r'^(\s*)\\([#>\-*|:!`]|\d+\.)', re.MULTILINE)
BLANK_RUN_RE = re.compile(r'\n{3,}')
SPACE_RUN_RE = re.compile(r'\s+')

_inline_parser = MarkdownIt("commonmark", options_update={"html": False})


def unescape_markers(text: str) -> str:
    """Decode backslash-escaped block markers at the start of each line."""
    return ESCAPED_MARKER_RE.sub(r'\1\2', text)


def normalize_text(text: str) -> str:
    """Trim, drop trailing whitespace per line, and collapse blank-line runs to one."""
    lines = [line.rstrip() for line in text.strip().splitlines()]
    return unescape_markers(BLANK_RUN_RE.sub("\n\n", "\n".join(lines)))


def normalize_heading(text: str) -> str:
    """Heading text on a single line with internal whitespace collapsed."""
    return unescape_markers(SPACE_RUN_RE.sub(" ", text).strip())


def _collect_text(tokens) -> list[str]:
    parts = []
    for tok in tokens:
        if tok.type in ('text', 'code_inline'):
            parts.append(tok.content)
        elif tok.type in ('softbreak', 'hardbreak'):
            parts.append(" ")
    return parts


def plain_text(text: str) -> str:
    """Strip inline markup (emphasis, code spans, links, images) leaving readable text."""
    parts = []
    for tok in _inline_parser.parseInline(text):
        parts.extend(_collect_text(tok.children or []))
    return SPACE_RUN_RE.sub(" ", "".join(parts)).strip()
