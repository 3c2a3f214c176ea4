"""File discovery, front matter extraction, and block parsing entry points"""

from dataclasses import dataclass
from pathlib import Path

from mdblog.core.classify import classify_all
from mdblog.core.frontmatter import extract_frontmatter
from mdblog.core.models import ContentBlock, FrontMatter
from mdblog.core.segment import segment


MD_EXTENSIONS = {'.md', '.mdx'}


@dataclass(frozen=True)
class ParsedDoc:
    """Internal parse result for one source document; not serialized."""
    name:         str                  # logical document name (filename stem)
    raw_markdown: str                  # full text, front matter included
    markdown:     str                  # body only
    frontmatter:  FrontMatter
    blocks:       tuple[ContentBlock, ...]


def parse_body(body: str) -> list[ContentBlock]:
    """Parse a markdown body into ordered content blocks."""
    return classify_all(segment(body))


def parse_text(text: str, name: str = "") -> ParsedDoc:
    """Parse a raw document (front matter + body). Never raises on malformed input."""
    frontmatter, body = extract_frontmatter(text)
    return ParsedDoc(
        name=name,
        raw_markdown=text,
        markdown=body,
        frontmatter=frontmatter,
        blocks=tuple(parse_body(body)),
    )


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.mdx files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.suffix in MD_EXTENSIONS)


def parse_file(path: Path) -> ParsedDoc:
    """Read and parse a single markdown file."""
    return parse_text(path.read_text(encoding='utf-8-sig'), name=path.stem)
