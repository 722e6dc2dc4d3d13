"""Exceptions for bearmigrate."""


class BearMigrateError(Exception):
    """Base exception for bearmigrate errors."""

    pass


class TagFileError(BearMigrateError):
    """Exception raised when the tag file cannot be read, parsed or written."""

    pass


class NotesDirectoryError(BearMigrateError):
    """Exception raised when the notes directory is missing or not a directory."""

    pass


class UnknownTagError(BearMigrateError):
    """Exception raised when a note carries a tag missing from the tag file."""

    def __init__(self, tag_name: str, note: str) -> None:
        super().__init__(f"Unknown tag name '{tag_name}' in {note}! Re-run the discover command!")
        self.tag_name = tag_name
        self.note = note


class AttachmentCopyError(BearMigrateError):
    """Exception raised when an image or file attachment cannot be copied."""

    pass
