"""Command line interface for bearmigrate."""

import logging
from pathlib import Path

import click

from bearmigrate.discover import discover_notes
from bearmigrate.exceptions import BearMigrateError
from bearmigrate.logging import configure_logging
from bearmigrate.migrate import migrate_notes

NOTES_DIR = click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Show debug messages.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="BEARMIGRATE_LOG_FILE",
    help="Also write every log message to this file.",
)
def cli(verbose: bool, log_file: Path | None) -> None:
    """Migrate Bear notes to Zettlr."""
    configure_logging(logging.DEBUG if verbose else logging.INFO, log_file)


@cli.command()
@click.option(
    "--from",
    "from_dir",
    type=NOTES_DIR,
    required=True,
    envvar="BEARMIGRATE_FROM",
    help="Directory holding your Bear notes.",
)
@click.option(
    "--tag-file",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    envvar="BEARMIGRATE_TAG_FILE",
    help="Filename for the generated tag file.",
)
def discover(from_dir: Path, tag_file: Path) -> None:
    """Parse your notes to extract tags."""
    try:
        report = discover_notes(from_dir, tag_file)
    except BearMigrateError as e:
        raise click.ClickException(str(e)) from e

    click.echo(
        f"Found {report.note_count} notes, {report.image_count} embedded images, "
        f"{report.file_count} attachments and {report.tag_count} unique tags."
    )
    click.echo()
    click.echo("Tag list:")
    for name in report.tags:
        click.echo(f"#{name}")
    click.echo()
    click.echo(f"Tags written into {tag_file}")


@cli.command()
@click.option(
    "--from",
    "from_dir",
    type=NOTES_DIR,
    required=True,
    envvar="BEARMIGRATE_FROM",
    help="Directory holding your Bear notes.",
)
@click.option(
    "--to",
    "to_dir",
    type=click.Path(file_okay=False, dir_okay=True, path_type=Path),
    required=True,
    envvar="BEARMIGRATE_TO",
    help="Directory receiving your Zettlr notes.",
)
@click.option(
    "--tag-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    required=True,
    envvar="BEARMIGRATE_TAG_FILE",
    help="Tag file generated by the discover command.",
)
def migrate(from_dir: Path, to_dir: Path, tag_file: Path) -> None:
    """Migrate your notes, images and file attachments."""
    try:
        report = migrate_notes(from_dir, to_dir, tag_file)
    except BearMigrateError as e:
        raise click.ClickException(str(e)) from e

    click.echo()
    click.echo(
        f"Processed {report.total} notes with {report.succeeded} successes "
        f"and {report.failed} failures"
    )


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
