"""Tag, attachment and image rewriting for Bear notes."""

from .document import Document, parse
from .items import FileRef, ImageRef, Span, Tag, escape_path, unescape_path
from .patterns import MarkupKind, iter_matches
from .render import render

__all__ = [
    "Document",
    "FileRef",
    "ImageRef",
    "MarkupKind",
    "Span",
    "Tag",
    "escape_path",
    "iter_matches",
    "parse",
    "render",
    "unescape_path",
]
