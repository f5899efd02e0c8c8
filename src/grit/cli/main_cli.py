"""
Top-level CLI that aggregates sub-apps.
"""

import logging
import typer

from grit import __version__
from grit.cli.strings_cli import strings_app
from grit.core.config import settings
from grit.core.settings import GRIT_MORE_INFO_STRING, GRIT_USAGE_STRING


logging.basicConfig(
    level=settings.log_level,
    format="%(levelname)s %(name)s - %(message)s"
)

main_app = typer.Typer(help=f"{GRIT_USAGE_STRING}\n\n{GRIT_MORE_INFO_STRING}")

# Add subcommands as Typer sub-apps:
main_app.add_typer(strings_app, name="strings")


@main_app.command("version")
def version_cmd():
    """
    Print the grit version.
    """
    typer.echo(f"grit version {__version__}")


def main():
    main_app()

if __name__ == "__main__":
    main()
