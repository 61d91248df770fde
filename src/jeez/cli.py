"""Click entry point for the jeez scaffolder."""

import sys

import click

from jeez.errors import ProjectCreationError
from jeez.pipeline import Pipeline


@click.command()
def main():
    """Jeez - scaffold a full-stack project by answering a few questions."""
    try:
        Pipeline().run()
    except ProjectCreationError as exc:
        click.echo(f"Error while creating project: {exc}", err=True)
        sys.exit(1)
