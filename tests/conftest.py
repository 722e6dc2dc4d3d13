"""Test fixtures for bearmigrate."""

from pathlib import Path

import pytest


@pytest.fixture
def bear_export(tmp_path: Path) -> Path:
    """Create a small Bear export.

    Layout::

        notes/
          Note A.md            #work/projects, image, file attachment, #private
          Note A/shot.png
          Note A/report v1.pdf
          Note B.md            #Home
          sub/Note C.md        #home, #journal

    Args:
        tmp_path: Pytest temporary path fixture

    Returns:
        Path to the export directory
    """
    notes_dir = tmp_path / "notes"
    attachments = notes_dir / "Note A"
    attachments.mkdir(parents=True)
    (attachments / "shot.png").write_bytes(b"png data")
    (attachments / "report v1.pdf").write_bytes(b"pdf data")

    (notes_dir / "Note A.md").write_text(
        "# Note A\n"
        "See #Work/Projects here\n"
        "![shot](Note%20A/shot.png)\n"
        "<a href='report%20v1.pdf'>report v1.pdf</a>\n"
        "#private\n",
        encoding="utf-8",
    )
    (notes_dir / "Note B.md").write_text("Chores #Home\n", encoding="utf-8")
    (notes_dir / "sub").mkdir()
    (notes_dir / "sub" / "Note C.md").write_text(
        "#home #journal\nDear diary\n", encoding="utf-8"
    )
    return notes_dir
