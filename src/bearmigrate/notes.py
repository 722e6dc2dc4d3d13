"""Finding Bear notes on disk."""

import logging
from collections.abc import Iterator
from pathlib import Path

from bearmigrate.exceptions import NotesDirectoryError

logger = logging.getLogger(__name__)

NOTE_SUFFIX = ".md"


def iter_note_files(notes_dir: Path) -> Iterator[Path]:
    """Walk a directory recursively and yield its Markdown notes, sorted.

    Raises:
        NotesDirectoryError: If notes_dir is missing or not a directory
    """
    if not notes_dir.exists():
        raise NotesDirectoryError(f"Notes directory does not exist: {notes_dir}")
    if not notes_dir.is_dir():
        raise NotesDirectoryError(f"Notes path is not a directory: {notes_dir}")

    for path in sorted(notes_dir.rglob(f"*{NOTE_SUFFIX}")):
        if path.is_file():
            yield path
        else:
            logger.debug("Skipping %s: not a regular file", path)


def read_note(path: Path) -> str | None:
    """Read a note, logging and returning None when it cannot be read."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("open: %s: %s", path, e)
        return None
