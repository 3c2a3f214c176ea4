"""Post identifiers derived from document names"""

import re
import unicodedata


_NON_SLUG_RE = re.compile(r'[^a-z0-9]+')


def slugify(text: str) -> str:
    """Lowercase ASCII slug with runs of other characters collapsed to one hyphen.

    Accented letters are folded to their base letter ("Café" -> "cafe").
    """
    folded = unicodedata.normalize('NFKD', text).encode('ascii', 'ignore').decode('ascii')
    return _NON_SLUG_RE.sub('-', folded.lower()).strip('-')
