"""Inline markup patterns found in Bear notes.

Three constructs are recognised:

- tags: ``#foo``, ``#foo/bar``
- file attachments: ``<a href='my%20file.pdf'>my file.pdf</a>``
- embedded images: ``![](note/my-image.png)``
"""

import re
from collections.abc import Iterator
from enum import Enum

# Characters allowed in a tag name after its first letter.
TAG_SYMBOLS = r"\-/$_§%=+°({\[\\@"

# A tag is "#" followed by a letter then letters, digits or TAG_SYMBOLS.
#
# The pattern also consumes the character right before the "#" and the one
# right after the name, when there is one. Those two groups stand in for
# look-behind/look-ahead: the builder checks that both are whitespace or
# empty, and re-emits them untouched when the tag is written back.
TAG_PATTERN = re.compile(
    rf"(.?)#([^\W\d_][\w{TAG_SYMBOLS}]*)(.?)"
)

FILE_PATTERN = re.compile(r"""<a +href=['"]([^'"]+)['"]>([^<]+)</a>""")

IMAGE_PATTERN = re.compile(r"!\[([^\]]*)]\(([^(]+)\)")


class MarkupKind(str, Enum):
    """Kind of inline construct."""

    TAG = "tag"
    FILE = "file"
    IMAGE = "image"


PATTERNS = {
    MarkupKind.TAG: TAG_PATTERN,
    MarkupKind.FILE: FILE_PATTERN,
    MarkupKind.IMAGE: IMAGE_PATTERN,
}


def iter_matches(text: str, kind: MarkupKind) -> Iterator[re.Match[str]]:
    """Iterate over the non-overlapping matches of one construct.

    Matches are yielded left to right, in a single pass over the text.

    Args:
        text: Full note content
        kind: Which construct to look for

    Returns:
        Iterator of regex matches
    """
    return PATTERNS[kind].finditer(text)
