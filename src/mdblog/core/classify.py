"""Raw block candidate to typed ContentBlock conversion"""

import re
from typing import Callable, Optional

from mdblog.core.inline import normalize_heading, normalize_text
from mdblog.core.models import (
    CALLOUT_VARIANTS,
    Blockquote,
    BulletList,
    Callout,
    Code,
    ContentBlock,
    Divider,
    Heading,
    Image,
    InlineCode,
    OrderedList,
    Paragraph,
    Table,
)
from mdblog.core.segment import (
    ALERT_OPEN_RE,
    BULLET_RE,
    CALLOUT_CLOSE,
    CALLOUT_OPEN_RE,
    CAPTION_RE,
    FENCE,
    HEADING_RE,
    IMAGE_RE,
    ORDERED_RE,
    PIPE_RE,
    BlockKind,
    RawBlock,
    is_blank,
)


MAX_HEADING_LEVEL = 3
CLOSING_HASHES_RE = re.compile(r'(?:^|\s+)#+\s*$')
FILENAME_RE = re.compile(
    r'^(?:#|//|--|/\*|<!--)\s*filename:\s*(?P<name>\S+?)\s*(?:\*/|-->)?$',
    re.IGNORECASE,
)
INLINE_CODE_RE = re.compile(r'^`(?P<code>[^`]+)`$')


def _trim_blank_edges(lines: list[str]) -> list[str]:
    start, end = 0, len(lines)
    while start < end and is_blank(lines[start]):
        start += 1
    while end > start and is_blank(lines[end - 1]):
        end -= 1
    return lines[start:end]


def _strip_quote(line: str) -> str:
    """Drop the leading `>` and at most one following space."""
    line = line[1:] if line.startswith('>') else line
    return line[1:] if line.startswith(' ') else line


def split_row(line: str) -> list[str]:
    """Split a table row on unescaped pipes, dropping empty boundary cells."""
    cells = [c.strip().replace('\\|', '|') for c in PIPE_RE.split(line.strip())]
    if cells and not cells[0]:
        cells = cells[1:]
    if cells and not cells[-1]:
        cells = cells[:-1]
    return cells


def classify_paragraph(raw: RawBlock) -> ContentBlock:
    text = normalize_text("\n".join(line.strip() for line in raw.lines))
    if m := INLINE_CODE_RE.match(text):
        return InlineCode(content=m.group('code'))
    return Paragraph(content=text)


def classify_heading(raw: RawBlock) -> Heading:
    """Heading level is the `#` count clamped to 3; a closing `#` run is dropped."""
    m = HEADING_RE.match(raw.lines[0])
    level = min(len(m.group(1)), MAX_HEADING_LEVEL)
    text = CLOSING_HASHES_RE.sub('', m.group(2))
    return Heading(content=normalize_heading(text), level=level)


def classify_code(raw: RawBlock) -> Code:
    """Language comes from the info string; a leading filename comment is lifted out."""
    info = raw.lines[0].lstrip()[len(FENCE):].strip()
    language = info.split(' ', 1)[0] or None

    body = list(raw.lines[1:])
    if body and body[-1].strip() == FENCE:
        body = body[:-1]

    filename = None
    if body and (m := FILENAME_RE.match(body[0].strip())):
        filename = m.group('name')
        body = body[1:]

    return Code(content="\n".join(body), language=language, filename=filename)


def classify_callout(raw: RawBlock) -> Callout:
    first = raw.lines[0]
    if m := CALLOUT_OPEN_RE.match(first):
        body = list(raw.lines[1:])
        if body and body[-1].strip() == CALLOUT_CLOSE:
            body = body[:-1]
    else:
        m = ALERT_OPEN_RE.match(first)
        body = [_strip_quote(line) for line in raw.lines[1:]]

    keyword, title = m.group(1).lower(), m.group(2).strip()
    return Callout(
        content="\n".join(_trim_blank_edges(body)),
        callout_variant=keyword if keyword in CALLOUT_VARIANTS else "note",
        callout_title=title or None,
    )


def classify_table(raw: RawBlock) -> Table:
    return Table(
        table_headers=split_row(raw.lines[0]),
        table_rows=[split_row(line) for line in raw.lines[2:]],
    )


def classify_blockquote(raw: RawBlock) -> Blockquote:
    return Blockquote(content=normalize_text("\n".join(_strip_quote(line) for line in raw.lines)))


def _item_match(line: str, marker: re.Pattern) -> Optional[re.Match]:
    """Top-level lines use the list's own marker; indented lines take either kind."""
    if line[:1] in (' ', '\t'):
        return BULLET_RE.match(line) or ORDERED_RE.match(line)
    return marker.match(line)


def _list_items(raw: RawBlock) -> list[str]:
    """Items in order; nested items are flattened into the enclosing list."""
    marker = BULLET_RE if raw.kind is BlockKind.list else ORDERED_RE
    items: list[str] = []
    for line in raw.lines:
        if m := _item_match(line, marker):
            items.append(m.group(1).strip())
        elif items:
            items[-1] = f"{items[-1]} {line.strip()}".strip()
    return items


def classify_list(raw: RawBlock) -> BulletList:
    return BulletList(items=_list_items(raw))


def classify_ordered_list(raw: RawBlock) -> OrderedList:
    return OrderedList(items=_list_items(raw))


def classify_image(raw: RawBlock) -> Image:
    """Caption comes from the link title, else from an italic line right below."""
    m = IMAGE_RE.match(raw.lines[0])
    caption = m.group('title')
    if caption is None and len(raw.lines) > 1:
        caption = CAPTION_RE.match(raw.lines[1]).group('caption').strip()
    return Image(content=m.group('src'), alt=m.group('alt').strip(), caption=caption)


def classify_divider(raw: RawBlock) -> Divider:
    return Divider()


CLASSIFIERS: dict[BlockKind, Callable[[RawBlock], ContentBlock]] = {
    BlockKind.paragraph:    classify_paragraph,
    BlockKind.heading:      classify_heading,
    BlockKind.code:         classify_code,
    BlockKind.callout:      classify_callout,
    BlockKind.table:        classify_table,
    BlockKind.blockquote:   classify_blockquote,
    BlockKind.list:         classify_list,
    BlockKind.ordered_list: classify_ordered_list,
    BlockKind.image:        classify_image,
    BlockKind.divider:      classify_divider,
}


def classify(raw: RawBlock) -> ContentBlock:
    """Convert one raw candidate to its typed block."""
    return CLASSIFIERS[raw.kind](raw)


def classify_all(raws: list[RawBlock]) -> list[ContentBlock]:
    return [classify(raw) for raw in raws]
