"""Interactive selection: pipe the catalog through fzf and read back the choice."""

import subprocess

import httpx

from gitignore_cli.catalog import fetch_catalog
from gitignore_cli.config import FZF_ARGS, FZF_COMMAND
from gitignore_cli.errors import ProcessError
from gitignore_cli.utils import command_succeeds, debug, log

FZF_MISSING_MESSAGE = "fzf not found. Install fzf for interactive template selection."
USAGE_HINT = "Usage: gitignore <template_name> or gitignore ls"


def is_fzf_installed() -> bool:
    """Check that 'fzf --version' runs and exits 0."""
    return command_succeeds([FZF_COMMAND, "--version"])


def build_fzf_command() -> list[str]:
    return [FZF_COMMAND, *FZF_ARGS]


def parse_selection(returncode: int, stdout: str) -> str | None:
    """Interpret fzf's exit status and output.

    Pure function: a zero exit with non-blank output is the chosen template,
    anything else (Esc, Ctrl-C, no match) is no selection.
    """
    if returncode != 0:
        return None
    selected = stdout.strip()
    return selected or None


def run_fzf(lines: list[str]) -> str | None:
    """Feed *lines* to fzf and return the selected line, or None.

    stderr and the terminal are left alone so fzf can draw its interface.
    Raises ProcessError if fzf cannot be started or its pipes fail.
    """
    cmd = build_fzf_command()
    debug(f"spawning {' '.join(cmd)}")
    try:
        proc = subprocess.Popen(
            cmd,
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            text=True,
        )
        stdout, _ = proc.communicate("\n".join(lines))
    except OSError as exc:
        raise ProcessError(f"Could not run {FZF_COMMAND}: {exc}") from exc
    except UnicodeError as exc:
        raise ProcessError(f"Could not decode {FZF_COMMAND} output: {exc}") from exc

    debug(f"{FZF_COMMAND} exited with {proc.returncode}")
    return parse_selection(proc.returncode, stdout or "")


def select_interactively(client: httpx.Client | None = None) -> str | None:
    """Let the user pick a template with fzf.

    Prints usage guidance and returns None when fzf is unavailable, without
    fetching the catalog. Catalog errors propagate unchanged.
    """
    if not is_fzf_installed():
        log(FZF_MISSING_MESSAGE)
        log(USAGE_HINT)
        return None

    templates = fetch_catalog(client)
    return run_fzf(templates)
