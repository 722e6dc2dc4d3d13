"""Main entry point for the bearmigrate CLI."""

from bearmigrate.cli import main

main()
