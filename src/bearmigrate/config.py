"""Tag configuration.

The tag file is a YAML mapping from lowercase tag name to the options
controlling how notes carrying that tag are migrated::

    foo/bar:
      ignore: false
      handling_strategy: same-folder
      target_directory: foo/bar
      target_tag_name: bar
"""

import logging
import unicodedata
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, RootModel, ValidationError

from bearmigrate.exceptions import TagFileError

logger = logging.getLogger(__name__)


class HandlingStrategy(str, Enum):
    """How notes having a tag are laid out in the target directory."""

    NONE = ""
    # All notes go to the tag's target directory, along with their images
    # and file attachments.
    SAME_FOLDER = "same-folder"
    # Each note gets its own sub-folder of the tag's target directory.
    ONE_NOTE_PER_FOLDER = "one-note-per-folder"


def normalize_tag_name(name: str) -> str:
    """Return the tag file key for a tag name.

    Names are NFC normalized, since filesystems and Markdown files do not
    always agree on Unicode composition, and lowercased like Bear does.
    """
    return unicodedata.normalize("NFC", name).lower()


class TagOptions(BaseModel):
    """Migration options for one tag."""

    # Occurrences of the tag, only used during discovery.
    count: int = Field(default=0, exclude=True)
    ignore: bool = Field(
        default=False, description="Leave the tag untouched, e.g. when wrongly identified"
    )
    handling_strategy: HandlingStrategy = Field(
        default=HandlingStrategy.NONE, description="How notes are stored on the filesystem"
    )
    target_directory: str = Field(
        default="", description="Where notes, images and files are stored"
    )
    target_tag_name: str = Field(
        default="", description="New tag name; empty removes the tag from notes"
    )

    @classmethod
    def from_tag_name(cls, name: str) -> "TagOptions":
        """Default options for a newly discovered tag.

        Zettlr has no nested tags, so the target tag is the last component
        of the Bear tag (``#foo/bar`` becomes ``#bar``).
        """
        return cls(
            count=1,
            handling_strategy=HandlingStrategy.SAME_FOLDER,
            target_directory=name,
            target_tag_name=name.split("/")[-1],
        )


class TagConfig(RootModel[dict[str, TagOptions]]):
    """All tag options, keyed by normalized tag name."""

    root: dict[str, TagOptions] = Field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.root)

    def __contains__(self, name: str) -> bool:
        return normalize_tag_name(name) in self.root

    def resolve(self, name: str) -> TagOptions | None:
        """Look up the options of a tag, whatever its case or normalization."""
        return self.root.get(normalize_tag_name(name))

    def record(self, name: str) -> TagOptions:
        """Count one more occurrence of a tag, creating default options if new."""
        key = normalize_tag_name(name)
        options = self.root.get(key)
        if options is None:
            options = TagOptions.from_tag_name(unicodedata.normalize("NFC", name))
            self.root[key] = options
        else:
            options.count += 1
        return options

    def sorted_names(self) -> list[str]:
        return sorted(self.root)


def load_tag_file(path: str | Path) -> TagConfig:
    """Load and validate a tag file.

    Args:
        path: Path to the YAML tag file

    Returns:
        Validated tag configuration

    Raises:
        TagFileError: If the file cannot be read or is invalid
    """
    path = Path(path)
    logger.info("Reading the tag file from %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            data: Any = yaml.safe_load(f) or {}
    except OSError as e:
        raise TagFileError(f"Cannot read tag file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise TagFileError(f"Invalid YAML in tag file {path}: {e}") from e

    if not isinstance(data, dict):
        raise TagFileError(f"Tag file {path} must contain a mapping of tag names")

    try:
        config = TagConfig.model_validate(
            {normalize_tag_name(str(name)): options or {} for name, options in data.items()}
        )
    except ValidationError as e:
        raise TagFileError(f"Invalid tag file {path}: {e}") from e

    logger.debug("Loaded %d tags from %s", len(config), path)
    return config


def save_tag_file(config: TagConfig, path: str | Path) -> None:
    """Write a tag configuration to a YAML file, tags sorted by name.

    Raises:
        TagFileError: If the file cannot be written
    """
    path = Path(path)
    data = {name: config.root[name].model_dump(mode="json") for name in config.sorted_names()}
    try:
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, allow_unicode=True, sort_keys=False)
    except OSError as e:
        raise TagFileError(f"Cannot write tag file {path}: {e}") from e
    logger.debug("Wrote %d tags to %s", len(config), path)
