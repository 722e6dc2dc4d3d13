"""Parsed representation of a Bear note."""

from dataclasses import dataclass, field

from .items import FileRef, ImageRef, Tag, build_file, build_image, build_tag
from .patterns import MarkupKind, iter_matches


@dataclass
class Document:
    """A Bear note with its tags, file attachments and embedded images.

    Items can be edited in place (tag names, locations, display names and
    descriptions); ``render`` then writes the note back with only those
    items replaced. Spans are trusted as produced by ``parse``: items with
    overlapping spans give garbled output.
    """

    content: str
    tags: list[Tag] = field(default_factory=list)
    files: list[FileRef] = field(default_factory=list)
    images: list[ImageRef] = field(default_factory=list)

    def render(self) -> str:
        """Convert the note back to Markdown."""
        from .render import render

        return render(self)


def parse(content: str) -> Document:
    """Parse a Bear note in Markdown format.

    Args:
        content: Full note content

    Returns:
        Document holding every valid tag, file attachment and image, each
        list in order of appearance
    """
    document = Document(content=content)
    for match in iter_matches(content, MarkupKind.TAG):
        tag = build_tag(match)
        if tag is not None:
            document.tags.append(tag)
    document.files.extend(build_file(m) for m in iter_matches(content, MarkupKind.FILE))
    document.images.extend(build_image(m) for m in iter_matches(content, MarkupKind.IMAGE))
    return document
