"""Front matter extraction: split a raw document into header fields and body"""

from mdblog.core.models import FrontMatter


BOM = "\ufeff"
DELIMITER = "---"
KNOWN_KEYS = {"id", "title", "category", "date", "tags"}


def _is_delimiter(line: str) -> bool:
    return line.rstrip() == DELIMITER


def _split_tags(value: str) -> tuple[str, ...] | None:
    tags = tuple(t.strip() for t in value.split(",") if t.strip())
    return tags or None


def parse_header(lines: list[str]) -> FrontMatter:
    """Parse `key: value` header lines; unknown keys and lines without a colon are skipped."""
    fields: dict = {}
    for line in lines:
        key, sep, value = line.partition(":")
        key = key.strip()
        if not sep or key not in KNOWN_KEYS:
            continue
        value = value.strip()
        if key == "tags":
            fields[key] = _split_tags(value)
        elif value:
            fields[key] = value
    return FrontMatter(**fields)


def extract_frontmatter(text: str) -> tuple[FrontMatter, str]:
    """Return (frontmatter, body).

    The header must open on the very first line. A header with no closing
    delimiter is treated as absent and the whole input becomes the body.
    A leading byte order mark is dropped.
    """
    text = text.removeprefix(BOM)
    lines = text.splitlines(keepends=True)
    if not lines or not _is_delimiter(lines[0]):
        return FrontMatter(), text

    for end in range(1, len(lines)):
        if _is_delimiter(lines[end]):
            header = [line.rstrip("\r\n") for line in lines[1:end]]
            return parse_header(header), "".join(lines[end + 1:])
    return FrontMatter(), text
