"""Discovery of the tags used across Bear notes.

Discovery reads every note once and writes a tag file with default options
for each tag found. The tag file is then edited by hand before migration.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from bearmigrate.config import TagConfig, save_tag_file
from bearmigrate.markup import parse
from bearmigrate.notes import iter_note_files, read_note

logger = logging.getLogger(__name__)


class DiscoveryReport(BaseModel):
    """Summary of a discovery run."""

    note_count: int = 0
    image_count: int = 0
    file_count: int = 0
    tags: dict[str, int] = Field(default_factory=dict, description="Occurrences per tag")
    tag_file: Path | None = None

    @property
    def tag_count(self) -> int:
        return len(self.tags)


def collect_tags(notes_dir: str | Path) -> tuple[TagConfig, DiscoveryReport]:
    """Parse every note in a directory and gather their tags.

    Args:
        notes_dir: Directory holding the Bear notes

    Returns:
        Tuple of (tag configuration with default options, report)

    Raises:
        NotesDirectoryError: If notes_dir is not a directory
    """
    notes_dir = Path(notes_dir)
    logger.info("Looking for Bear notes into %s", notes_dir)

    config = TagConfig()
    report = DiscoveryReport()
    for note_file in iter_note_files(notes_dir):
        content = read_note(note_file)
        if content is None:
            continue

        logger.debug("Processing %s", note_file)
        document = parse(content)
        report.note_count += 1
        report.image_count += len(document.images)
        report.file_count += len(document.files)
        for tag in document.tags:
            config.record(tag.name)

    report.tags = {name: config.root[name].count for name in config.sorted_names()}
    return config, report


def discover_notes(notes_dir: str | Path, tag_file: str | Path) -> DiscoveryReport:
    """Discover the tags of all notes and write them to a tag file.

    Args:
        notes_dir: Directory holding the Bear notes
        tag_file: Path of the tag file to generate

    Returns:
        Discovery report

    Raises:
        NotesDirectoryError: If notes_dir is not a directory
        TagFileError: If the tag file cannot be written
    """
    config, report = collect_tags(notes_dir)
    logger.info(
        "Found %d notes, %d embedded images, %d attachments and %d unique tags",
        report.note_count,
        report.image_count,
        report.file_count,
        report.tag_count,
    )

    tag_file = Path(tag_file)
    logger.info("Writing all tags into %s", tag_file)
    save_tag_file(config, tag_file)
    report.tag_file = tag_file
    return report
