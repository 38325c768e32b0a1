"""Template catalog: list the templates available in github/gitignore."""

import httpx

from gitignore_cli.config import GITHUB_API_URL, REQUEST_HEADERS, TEMPLATE_SUFFIX
from gitignore_cli.errors import ParseError, RemoteError
from gitignore_cli.utils import debug, http_client


def parse_catalog(entries: object) -> list[str]:
    """Turn a GitHub contents listing into sorted template identifiers.

    Pure function: *entries* is the decoded JSON body. Every entry must be an
    object with string 'name' and 'type' fields, otherwise ParseError is
    raised. Directories and files without the template suffix are dropped,
    and the suffix is stripped from the rest.
    """
    if not isinstance(entries, list):
        raise ParseError(f"expected a JSON array, got {type(entries).__name__}")

    templates = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ParseError(f"entry {index} is not an object")
        name = entry.get("name")
        file_type = entry.get("type")
        if not isinstance(name, str) or not isinstance(file_type, str):
            raise ParseError(f"entry {index} is missing a string 'name' or 'type'")
        if file_type == "file" and name.endswith(TEMPLATE_SUFFIX):
            templates.append(name[: -len(TEMPLATE_SUFFIX)])

    templates.sort()
    return templates


def fetch_catalog(client: httpx.Client | None = None) -> list[str]:
    """Fetch the directory listing and return the sorted template names.

    One request, no retry. Raises RemoteError on a non-success status or a
    transport failure and ParseError when the body is not the expected JSON.
    """
    debug(f"GET {GITHUB_API_URL}")
    with http_client(client) as http:
        try:
            response = http.get(GITHUB_API_URL, headers=REQUEST_HEADERS)
        except httpx.HTTPError as exc:
            raise RemoteError(None, str(exc)) from exc

        debug(f"listing returned HTTP {response.status_code}")
        if not response.is_success:
            raise RemoteError(response.status_code)

        try:
            entries = response.json()
        except ValueError as exc:
            raise ParseError(f"invalid JSON ({exc})") from exc

    templates = parse_catalog(entries)
    debug(f"{len(templates)} templates in catalog")
    return templates
