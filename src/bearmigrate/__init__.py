"""Migrate Bear notes, with their tags, images and file attachments, to Zettlr."""

from bearmigrate.markup import Document, FileRef, ImageRef, Span, Tag, parse, render

__version__ = "0.1.0"

__all__ = ["Document", "FileRef", "ImageRef", "Span", "Tag", "parse", "render"]
