"""Write a parsed note back to Markdown."""

from typing import NamedTuple

from .document import Document
from .items import Span


class _Replacement(NamedTuple):
    span: Span
    priority: int
    text: str


def _replacements(document: Document) -> list[_Replacement]:
    replacements = [
        _Replacement(item.span, priority, item.render())
        for priority, items in enumerate((document.tags, document.files, document.images))
        for item in items
    ]
    # Tags, then files, then images when two spans compare equal.
    replacements.sort(key=lambda r: (r.span.start, r.span.end, r.priority))
    return replacements


def render(document: Document) -> str:
    """Render a document, replacing every item with its updated text.

    Text between items is copied from the original content unchanged.

    Args:
        document: Parsed, possibly edited, document

    Returns:
        The new note content
    """
    content = document.content
    parts: list[str] = []
    cursor = 0
    for replacement in _replacements(document):
        parts.append(content[cursor : replacement.span.start])
        parts.append(replacement.text)
        cursor = replacement.span.end
    parts.append(content[cursor:])
    return "".join(parts)
