"""Template fetcher: download the raw body of a single template."""

import httpx

from gitignore_cli.config import GITHUB_RAW_URL, REQUEST_HEADERS, TEMPLATE_SUFFIX
from gitignore_cli.errors import NotFoundError, RemoteError
from gitignore_cli.utils import debug, http_client


def template_url(name: str) -> str:
    """Return the raw-content URL for template *name*."""
    return f"{GITHUB_RAW_URL}/{name}{TEMPLATE_SUFFIX}"


def fetch_template(name: str, client: httpx.Client | None = None) -> str:
    """Download template *name* and return its text verbatim.

    Any non-success status is reported as NotFoundError; 404 is not
    distinguished from other failures.
    """
    url = template_url(name)
    debug(f"GET {url}")
    with http_client(client) as http:
        try:
            response = http.get(url, headers=REQUEST_HEADERS)
        except httpx.HTTPError as exc:
            raise RemoteError(None, str(exc)) from exc

        debug(f"template returned HTTP {response.status_code}")
        if not response.is_success:
            raise NotFoundError(name)
        return response.text
