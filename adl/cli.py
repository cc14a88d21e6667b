"""
Adl CLI - Keep a numbered log of Architecture Decision Records.

Commands:
    create  - Create a new ADR and regenerate the index
    regen   - Regenerate the index from the ADRs on disk

Run without a command to print the help text.
"""

from __future__ import annotations

import bisect
import logging
import sys

import click

from . import __version__
from .config import AdlConfig, ensure_dirs_exist
from .generator import create_adr
from .index import rebuild_index, regenerate_index
from .render import help_text
from .scanner import list_adr_files

logger = logging.getLogger(__name__)

EMPTY_TITLE_MESSAGE = "No name supplied for the ADR. Command should be: adl create Name of ADR here"
INVALID_TITLE_MESSAGE = "The ADR name is not valid UTF-8 text"


class AdlGroup(click.Group):
    """Command group that answers unknown commands with the help text."""

    def resolve_command(self, ctx, args):
        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is None and not ctx.resilient_parsing:
            click.echo(f"Unknown command: {cmd_name}", err=True)
            click.echo(f"\n{help_text()}")
            ctx.exit(1)
        return super().resolve_command(ctx, args)

    def get_help(self, ctx):
        return help_text()


def _io_failure(exc: OSError) -> click.ClickException:
    logger.debug("Aborting after I/O failure", exc_info=exc)
    return click.ClickException(str(exc))


@click.group(cls=AdlGroup, invoke_without_command=True)
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def main(ctx: click.Context, verbose: bool):
    """Adl - Keep a numbered log of Architecture Decision Records."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = AdlConfig.from_cwd()

    if ctx.invoked_subcommand is None:
        click.echo(help_text())


@main.command(add_help_option=False, context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
def create(config: AdlConfig, words: tuple[str, ...]):
    """Create a new ADR and regenerate the index.

    All words are joined with single spaces to form the title.

    Examples:

        adl create Use PostgreSQL for persistence
    """
    title = " ".join(words).strip()
    if not title:
        click.echo(EMPTY_TITLE_MESSAGE, err=True)
        sys.exit(1)

    try:
        title.encode("utf-8")
    except UnicodeEncodeError:
        click.echo(INVALID_TITLE_MESSAGE, err=True)
        sys.exit(1)

    try:
        ensure_dirs_exist(config)

        # Numbered by the listing taken before the new file exists
        file_list = list_adr_files(config.adr_dir)
        adr_path = create_adr(len(file_list), title, config)
        click.echo(f"Created: {adr_path}")

        if adr_path.name not in file_list:
            bisect.insort(file_list, adr_path.name)
        index_path = rebuild_index(file_list, config)
    except OSError as e:
        raise _io_failure(e) from e

    click.echo(f"Updated: {index_path}")


@main.command()
@click.pass_obj
def regen(config: AdlConfig):
    """Regenerate the index from the ADRs on disk."""
    try:
        ensure_dirs_exist(config)
        index_path = regenerate_index(config)
    except OSError as e:
        raise _io_failure(e) from e

    click.echo(f"Updated: {index_path}")


if __name__ == "__main__":
    main()
