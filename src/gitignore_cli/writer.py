"""Local writer: put template content into ./.gitignore, asking before overwrite."""

import contextlib
import enum
import os
import stat
import tempfile
from collections.abc import Callable

from gitignore_cli.config import DESTINATION, OVERWRITE_PROMPT
from gitignore_cli.errors import IoError
from gitignore_cli.utils import console, debug

_NEW_FILE_MODE = 0o644


class WriteOutcome(enum.Enum):
    WRITTEN = "written"
    ABORTED = "aborted"


def is_affirmative(answer: str) -> bool:
    """Return True if a typed answer means yes.

    Pure function: trims, lowercases and checks for a leading 'y', so 'y',
    'Y', 'yes' and ' Yep ' all count. Anything else, including an empty
    line, is no.
    """
    return answer.strip().lower().startswith("y")


def _confirm_overwrite(ask: Callable[[str], str]) -> bool:
    """Ask whether to replace the existing destination. End of input means no."""
    try:
        answer = ask(OVERWRITE_PROMPT)
    except EOFError:
        return False
    except OSError as exc:
        raise IoError(f"Could not read answer: {exc}") from exc
    return is_affirmative(answer)


def _replace_file(path: str, content: str) -> None:
    """Write *content* to a sibling temp file, then move it over *path*.

    Readers see either the old file or the complete new one. A symlinked
    *path* is written through to its target. The new file keeps the old
    file's permission bits, or gets 0644 when there was none.
    """
    path = os.path.realpath(path)
    directory = os.path.dirname(path)
    try:
        mode = stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        mode = _NEW_FILE_MODE

    fd, temp_path = tempfile.mkstemp(prefix=".gitignore-", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.chmod(temp_path, mode)
        os.replace(temp_path, path)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(temp_path)
        raise


def write_destination(
    content: str,
    path: str = DESTINATION,
    ask: Callable[[str], str] | None = None,
) -> WriteOutcome:
    """Write *content* to *path*, prompting first if the file already exists.

    *ask* receives the prompt text and returns one typed line; it defaults to
    reading from the terminal. Returns ABORTED without touching the file when
    the user declines. Filesystem failures raise IoError.
    """
    if ask is None:
        ask = console.input

    if os.path.exists(path):
        debug(f"{path} exists, asking before overwrite")
        if not _confirm_overwrite(ask):
            return WriteOutcome.ABORTED

    try:
        _replace_file(path, content)
    except OSError as exc:
        raise IoError(f"Could not write {path}: {exc}") from exc

    debug(f"wrote {len(content)} characters to {path}")
    return WriteOutcome.WRITTEN
