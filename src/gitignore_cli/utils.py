"""Core utility functions: console output, debug logging, HTTP and command helpers."""

import contextlib
import subprocess
from collections.abc import Generator

import httpx
from rich.console import Console

from gitignore_cli.config import REQUEST_HEADERS

console = Console()
err_console = Console(stderr=True)

_debug_enabled = False


def set_debug(enabled: bool) -> None:
    """Turn debug messages on or off for the rest of the process."""
    global _debug_enabled
    _debug_enabled = enabled


def log(message: str, style: str = "") -> None:
    """Print a user-facing message with an optional rich style."""
    if style:
        console.print(message, style=style, markup=False, highlight=False, soft_wrap=True)
    else:
        console.print(message, markup=False, highlight=False, soft_wrap=True)


def debug(message: str) -> None:
    """Print a dim diagnostic line to stderr when --verbose is on."""
    if _debug_enabled:
        err_console.print(f"[debug] {message}", style="dim", markup=False, highlight=False, soft_wrap=True)


def error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"Error: {message}", style="bold red", markup=False, highlight=False, soft_wrap=True)


@contextlib.contextmanager
def http_client(client: httpx.Client | None = None) -> Generator[httpx.Client, None, None]:
    """Yield *client* unchanged, or a fresh one that is closed on exit.

    Fresh clients send the identifying User-Agent, follow redirects and
    never time out.
    """
    if client is not None:
        yield client
        return
    with httpx.Client(headers=REQUEST_HEADERS, follow_redirects=True, timeout=None) as fresh:
        yield fresh


def command_succeeds(args: list[str]) -> bool:
    """Run a command with output discarded; True only if it exits 0.

    A missing executable counts as failure rather than raising.
    """
    try:
        result = subprocess.run(
            args,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError:
        return False
    return result.returncode == 0
