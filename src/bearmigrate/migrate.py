"""Migration of Bear notes to a Zettlr notes directory.

Each note is parsed, its tags are renamed according to the tag file, and
the note is written into a directory chosen from its tags, together with
its embedded images and file attachments.
"""

import logging
import shutil
import unicodedata
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, Field

from bearmigrate.config import HandlingStrategy, TagConfig, load_tag_file, normalize_tag_name
from bearmigrate.exceptions import AttachmentCopyError, BearMigrateError, UnknownTagError
from bearmigrate.markup import Document, parse
from bearmigrate.notes import iter_note_files, read_note

logger = logging.getLogger(__name__)


class MigrationReport(BaseModel):
    """Summary of a migration run."""

    total: int = 0
    succeeded: int = 0
    failed_notes: list[Path] = Field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failed_notes)


def join_below(root: Path, *parts: str) -> Path:
    """Join path parts below root, even when a part is absolute.

    Leading slashes are dropped, so that locations found in notes and
    directories from the tag file always stay inside root.
    """
    path = root
    for part in parts:
        path = path / part.lstrip("/")
    return path


class Placement(BaseModel):
    """Where the tags of a note ask for it to be stored."""

    target_directory: str = ""
    handling_strategy: HandlingStrategy = HandlingStrategy.NONE

    def destination(self, target_root: Path, note_name: str) -> Path:
        """Directory receiving the note, its images and its files."""
        if self.handling_strategy == HandlingStrategy.ONE_NOTE_PER_FOLDER:
            return join_below(target_root, self.target_directory, note_name)
        if self.handling_strategy == HandlingStrategy.SAME_FOLDER:
            return join_below(target_root, self.target_directory)
        # No tag set a strategy, or the note has no tag
        return target_root


def apply_tag_options(document: Document, config: TagConfig, note_name: str) -> Placement:
    """Rename the tags of a note and work out where the note goes.

    Since a note can have several tags, the first tag giving a target
    directory (or handling strategy) sets it. A different value from
    another tag is reported and ignored.

    Args:
        document: Parsed note, its tags are renamed in place
        config: Tag configuration
        note_name: Note name, for log messages

    Returns:
        Placement of the note

    Raises:
        UnknownTagError: If a tag is missing from the tag configuration
    """
    placement = Placement()
    for tag in document.tags:
        tag_name = normalize_tag_name(tag.name)
        options = config.resolve(tag_name)
        if options is None:
            raise UnknownTagError(tag_name, note_name)
        if options.ignore:
            continue

        tag.name = options.target_tag_name

        if options.target_directory:
            if not placement.target_directory:
                placement.target_directory = options.target_directory
            elif placement.target_directory != options.target_directory:
                logger.warning(
                    "Target directory '%s' for tag '%s' conflicts with directives (%s) "
                    "from another tag. Continuing with existing value.",
                    options.target_directory,
                    tag_name,
                    placement.target_directory,
                )

        if options.handling_strategy != HandlingStrategy.NONE:
            if placement.handling_strategy == HandlingStrategy.NONE:
                placement.handling_strategy = options.handling_strategy
            elif placement.handling_strategy != options.handling_strategy:
                logger.warning(
                    "Handling strategy '%s' for tag '%s' conflicts with directives (%s) "
                    "from another tag. Continuing with existing value.",
                    options.handling_strategy.value,
                    tag_name,
                    placement.handling_strategy.value,
                )
    return placement


def copy_attachment(source: Path, destination: Path, note_name: str) -> None:
    """Copy an image or file attachment, never overwriting an existing file.

    A missing source is only reported, the note is migrated anyway.

    Raises:
        AttachmentCopyError: If the copy fails for another reason
    """
    if destination.exists():
        logger.warning(
            "Attachment '%s' of note %s already exists in the target directory %s!",
            destination.name,
            note_name,
            destination.parent,
        )
        return

    try:
        shutil.copy2(source, destination)
    except FileNotFoundError:
        logger.warning("Source '%s' in note %s cannot be found!", source.name, note_name)
    except OSError as e:
        raise AttachmentCopyError(f"copy: {source} -> {destination}: {e}") from e
    else:
        logger.debug("Copied %s to %s", source, destination)


def migrate_note(note_file: Path, source_dir: Path, target_dir: Path, config: TagConfig) -> Path:
    """Migrate a single note.

    Args:
        note_file: Path of the Bear note
        source_dir: Root of the Bear export, images are relative to it
        target_dir: Root of the Zettlr notes directory
        config: Tag configuration

    Returns:
        Path of the migrated note

    Raises:
        BearMigrateError: If the note cannot be migrated
        OSError: If the note cannot be written
    """
    content = read_note(note_file)
    if content is None:
        raise BearMigrateError(f"Cannot read note {note_file}")

    note_name = note_file.stem
    document = parse(content)
    placement = apply_tag_options(document, config, note_name)

    destination = placement.destination(target_dir, note_name)
    destination.mkdir(parents=True, exist_ok=True)

    for image in document.images:
        location = unicodedata.normalize("NFC", image.location)
        file_name = PurePosixPath(location).name
        copy_attachment(join_below(source_dir, location), destination / file_name, note_name)
        image.location = file_name

    # File attachments live in a folder named after the note
    for file in document.files:
        location = unicodedata.normalize("NFC", file.location)
        file_name = PurePosixPath(location).name
        source = join_below(source_dir, note_name, location)
        copy_attachment(source, destination / file_name, note_name)
        file.location = file_name

    note_path = destination / note_file.name
    note_path.write_text(document.render(), encoding="utf-8")
    return note_path


def migrate_notes(
    source_dir: str | Path, target_dir: str | Path, tag_file: str | Path
) -> MigrationReport:
    """Migrate every Bear note of a directory.

    A note that fails is logged and counted; the others are still migrated.

    Args:
        source_dir: Directory holding the Bear notes
        target_dir: Directory receiving the Zettlr notes
        tag_file: Tag file produced by discovery, then edited

    Returns:
        Migration report

    Raises:
        TagFileError: If the tag file is invalid
        NotesDirectoryError: If source_dir is not a directory
    """
    source_dir = Path(source_dir)
    target_dir = Path(target_dir)
    config = load_tag_file(tag_file)

    logger.info("Migrating Bear notes from %s to %s", source_dir, target_dir)
    report = MigrationReport()
    for note_file in iter_note_files(source_dir):
        logger.info("Processing %s", note_file.name)
        report.total += 1
        try:
            note_path = migrate_note(note_file, source_dir, target_dir, config)
        except (BearMigrateError, OSError) as e:
            logger.error("%s: %s", note_file.name, e)
            report.failed_notes.append(note_file)
            continue
        logger.debug("Wrote %s", note_path)
        report.succeeded += 1

    logger.info(
        "Processed %d notes with %d successes and %d failures",
        report.total,
        report.succeeded,
        report.failed,
    )
    return report
