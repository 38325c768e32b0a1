"""CLI app definition: list, download by name, or pick interactively."""

import contextlib
from collections.abc import Generator
from typing import Annotated

import typer
from typer.core import TyperGroup

from gitignore_cli.catalog import fetch_catalog
from gitignore_cli.config import DESTINATION
from gitignore_cli.errors import GitignoreError
from gitignore_cli.fetcher import fetch_template
from gitignore_cli.selector import select_interactively
from gitignore_cli.utils import console, debug, error, log, set_debug
from gitignore_cli.version import get_version
from gitignore_cli.writer import WriteOutcome, write_destination

_DOWNLOAD_COMMAND = "get"


class TemplateNameGroup(TyperGroup):
    """Command group where any word that is not a subcommand is a template name.

    'gitignore ls' lists templates; 'gitignore Python' is routed to the
    hidden download command as 'gitignore get Python'.
    """

    def resolve_command(self, ctx, args):
        if args and args[0] not in self.commands and not args[0].startswith("-"):
            args = [_DOWNLOAD_COMMAND, *args]
        return super().resolve_command(ctx, args)


@contextlib.contextmanager
def _report_errors() -> Generator[None, None, None]:
    """Print any GitignoreError and exit 1."""
    try:
        yield
    except GitignoreError as exc:
        error(str(exc))
        raise typer.Exit(1) from exc


def download_template(name: str) -> WriteOutcome:
    """Fetch template *name* and write it to the destination file."""
    content = fetch_template(name)
    outcome = write_destination(content)
    if outcome is WriteOutcome.ABORTED:
        log("Aborted.")
    else:
        log(f"Downloaded {name} template to {DESTINATION}", style="green")
    return outcome


def _version_callback(value: bool):
    if value:
        console.print(get_version(), highlight=False)
        raise typer.Exit()


app = typer.Typer(
    cls=TemplateNameGroup,
    help="Download .gitignore files from the github/gitignore repository.",
    invoke_without_command=True,
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-V", help="Print request and process details to stderr."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit.", callback=_version_callback, is_eager=True),
    ] = False,
) -> None:
    """Download .gitignore files from the github/gitignore repository.

    Run 'gitignore <template>' to download a template, 'gitignore ls' to
    list them, or 'gitignore' alone to pick one with fzf.
    """
    set_debug(verbose)
    if ctx.invoked_subcommand is not None:
        return

    with _report_errors():
        selected = select_interactively()
        if selected is None:
            debug("nothing selected")
            return
        download_template(selected)


# ============================================
# Commands
# ============================================


@app.command("ls")
def list_templates() -> None:
    """List all available gitignore templates."""
    with _report_errors():
        templates = fetch_catalog()
    for template in templates:
        log(template)


@app.command(_DOWNLOAD_COMMAND, hidden=True)
def get(
    template: Annotated[str, typer.Argument(help="Name of the gitignore template to download.")],
) -> None:
    """Download a template into .gitignore."""
    with _report_errors():
        download_template(template)
