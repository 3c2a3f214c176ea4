"""Block segmentation: split a markdown body into ordered raw block candidates.

The segmenter is a line-cursor state machine. In the ``scanning`` state each
line is tested against the block rules in priority order; multi-line regions
switch into a dedicated state that owns the termination rule for that region.
Regions left open at the end of the document are closed implicitly.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


DIVIDER_RE      = re.compile(r'^-{3,}\s*$')
HEADING_RE      = re.compile(r'^(#+)[ \t]+(.*)$')
FENCE           = "```"
CALLOUT_OPEN_RE = re.compile(r'^:::[ \t]*([A-Za-z]+)[ \t]*(.*)$')
CALLOUT_CLOSE   = ":::"
ALERT_OPEN_RE   = re.compile(r'^>[ \t]?\[!(\w+)\][ \t]*(.*)$')
TABLE_SEP_RE    = re.compile(r'^[\s|:-]+$')
PIPE_RE         = re.compile(r'(?<!\\)\|')
BULLET_RE       = re.compile(r'^\s*[-*][ \t]+(.*)$')
ORDERED_RE      = re.compile(r'^\s*\d+\.[ \t]+(.*)$')
IMAGE_RE        = re.compile(r'^!\[(?P<alt>[^\]]*)\]\((?P<src>\S+?)(?:\s+"(?P<title>[^"]*)")?\)\s*$')
CAPTION_RE      = re.compile(r'^\s*([*_])(?!\1)(?P<caption>.+?)\1\s*$')


class BlockKind(str, Enum):
    """Provisional kind assigned to a raw candidate by the segmenter."""
    paragraph    = "paragraph"
    heading      = "heading"
    code         = "code"
    callout      = "callout"
    table        = "table"
    blockquote   = "blockquote"
    list         = "list"
    ordered_list = "ordered-list"
    image        = "image"
    divider      = "divider"


class ScanState(str, Enum):
    scanning      = "scanning"
    in_paragraph  = "in-paragraph"
    in_fence      = "in-fence"
    in_table      = "in-table"
    in_callout    = "in-callout"
    in_alert      = "in-alert"
    in_list       = "in-list"
    in_blockquote = "in-blockquote"


@dataclass(frozen=True)
class RawBlock:
    """A block candidate: provisional kind plus its raw source lines [start, end)."""
    kind:  BlockKind
    start: int
    end:   int
    lines: tuple[str, ...]


def is_blank(line: str) -> bool:
    return not line.strip()


def has_pipe(line: str) -> bool:
    """True if the line contains an unescaped `|`."""
    return PIPE_RE.search(line) is not None


def is_table_separator(line: str) -> bool:
    return bool(TABLE_SEP_RE.match(line)) and '|' in line and '-' in line


def is_fence(line: str) -> bool:
    return line.lstrip().startswith(FENCE)


def list_kind(line: str) -> Optional[BlockKind]:
    """Return list or ordered_list if the line opens a list item, else None."""
    if BULLET_RE.match(line):
        return BlockKind.list
    if ORDERED_RE.match(line):
        return BlockKind.ordered_list
    return None


class Segmenter:
    """Single-pass segmenter over a list of body lines."""

    def __init__(self, lines: list[str]):
        self.lines = lines
        self.pos = 0
        self.state = ScanState.scanning
        self.blocks: list[RawBlock] = []
        self._kind: Optional[BlockKind] = None
        self._start = 0
        self._inner_fence = False
        self._handlers = {
            ScanState.scanning:      self._scan,
            ScanState.in_paragraph:  self._paragraph,
            ScanState.in_fence:      self._fence,
            ScanState.in_table:      self._table,
            ScanState.in_callout:    self._callout,
            ScanState.in_alert:      self._quoted,
            ScanState.in_list:       self._list,
            ScanState.in_blockquote: self._quoted,
        }

    def run(self) -> list[RawBlock]:
        while self.pos < len(self.lines):
            self._handlers[self.state](self.lines[self.pos])
        if self.state is not ScanState.scanning:
            self._close()
        return self.blocks

    # --- region bookkeeping ---

    def _open(self, kind: BlockKind, state: ScanState, width: int = 1) -> None:
        self._kind, self._start, self.state = kind, self.pos, state
        self.pos += width

    def _close(self) -> None:
        self._emit(self._kind, self._start, self.pos)
        self.state = ScanState.scanning
        self._kind = None

    def _emit(self, kind: BlockKind, start: int, end: int) -> None:
        self.blocks.append(RawBlock(kind, start, end, tuple(self.lines[start:end])))

    def _single(self, kind: BlockKind, width: int = 1) -> None:
        self._emit(kind, self.pos, self.pos + width)
        self.pos += width

    # --- rule detection ---

    def _peek(self, offset: int = 1) -> Optional[str]:
        i = self.pos + offset
        return self.lines[i] if i < len(self.lines) else None

    def _starts_table(self, line: str) -> bool:
        nxt = self._peek()
        return has_pipe(line) and nxt is not None and is_table_separator(nxt)

    def _detect(self, line: str) -> Optional[BlockKind]:
        """Kind of the construct opening at the cursor, or None for paragraph text."""
        if DIVIDER_RE.match(line):
            return BlockKind.divider
        if HEADING_RE.match(line):
            return BlockKind.heading
        if is_fence(line):
            return BlockKind.code
        if CALLOUT_OPEN_RE.match(line) or ALERT_OPEN_RE.match(line):
            return BlockKind.callout
        if self._starts_table(line):
            return BlockKind.table
        if line.startswith('>'):
            return BlockKind.blockquote
        if kind := list_kind(line):
            return kind
        if IMAGE_RE.match(line):
            return BlockKind.image
        return None

    # --- state handlers ---

    def _scan(self, line: str) -> None:
        if is_blank(line):
            self.pos += 1
            return

        kind = self._detect(line)
        if kind in (BlockKind.divider, BlockKind.heading):
            self._single(kind)
        elif kind is BlockKind.code:
            self._open(kind, ScanState.in_fence)
        elif kind is BlockKind.callout:
            if line.startswith('>'):
                self._open(kind, ScanState.in_alert)
            else:
                self._inner_fence = False
                self._open(kind, ScanState.in_callout)
        elif kind is BlockKind.table:
            self._open(kind, ScanState.in_table, width=2)
        elif kind is BlockKind.blockquote:
            self._open(kind, ScanState.in_blockquote)
        elif kind in (BlockKind.list, BlockKind.ordered_list):
            self._open(kind, ScanState.in_list)
        elif kind is BlockKind.image:
            m = IMAGE_RE.match(line)
            nxt = self._peek()
            captioned = m.group('title') is None and nxt is not None and CAPTION_RE.match(nxt)
            self._single(kind, width=2 if captioned else 1)
        else:
            self._open(BlockKind.paragraph, ScanState.in_paragraph)

    def _paragraph(self, line: str) -> None:
        if is_blank(line) or self._detect(line) is not None:
            self._close()
        else:
            self.pos += 1

    def _fence(self, line: str) -> None:
        self.pos += 1
        if line.strip() == FENCE:
            self._close()

    def _callout(self, line: str) -> None:
        self.pos += 1
        if is_fence(line):
            self._inner_fence = not self._inner_fence
        elif not self._inner_fence and line.strip() == CALLOUT_CLOSE:
            self._close()

    def _table(self, line: str) -> None:
        if is_blank(line) or not has_pipe(line):
            self._close()
        else:
            self.pos += 1

    def _quoted(self, line: str) -> None:
        if line.startswith('>'):
            self.pos += 1
        else:
            self._close()

    def _list(self, line: str) -> None:
        if list_kind(line) is self._kind:
            self.pos += 1
        elif not is_blank(line) and line[0] in ' \t':
            self.pos += 1                           # nested item or continuation
        else:
            self._close()


def segment_lines(lines: list[str]) -> list[RawBlock]:
    """Segment pre-split body lines into raw block candidates."""
    return Segmenter(lines).run()


def segment(body: str) -> list[RawBlock]:
    """Segment a markdown body (front matter already removed)."""
    return segment_lines(body.splitlines())
