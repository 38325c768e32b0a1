"""Exception types raised by the catalog, fetcher, writer and selector.

Nothing below the CLI layer recovers from these; cli.py prints the message
and exits non-zero.
"""


class GitignoreError(Exception):
    """Base class for every failure the CLI reports to the user."""


class RemoteError(GitignoreError):
    """The template listing could not be retrieved."""

    def __init__(self, status_code: int | None, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        if status_code is not None:
            message = f"Failed to fetch templates: HTTP {status_code}"
        else:
            message = "Failed to reach GitHub"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class ParseError(GitignoreError):
    """The template listing was not the expected JSON shape."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Unexpected template listing: {detail}")


class NotFoundError(GitignoreError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Template '{name}' not found")


class IoError(GitignoreError):
    """Reading the overwrite answer or writing the destination failed."""


class ProcessError(GitignoreError):
    """Spawning or talking to the fzf subprocess failed."""
