"""Tests for template URL building and template download."""

import httpx
import pytest

from gitignore_cli.errors import NotFoundError, RemoteError
from gitignore_cli.fetcher import fetch_template, template_url

from conftest import make_client


def test_template_url_appends_name_and_suffix():
    assert template_url("Python") == (
        "https://raw.githubusercontent.com/github/gitignore/main/Python.gitignore"
    )


def test_fetch_returns_body_verbatim():
    body = "# Byte-compiled\n__pycache__/\n*.py[cod]\n\n"
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, text=body)

    with make_client(handler) as client:
        assert fetch_template("Python", client) == body

    assert str(seen[0].url) == template_url("Python")
    assert seen[0].headers["User-Agent"] == "gitignore-cli"


def test_404_is_not_found_naming_the_template():
    with make_client(lambda request: httpx.Response(404, text="404: Not Found")) as client:
        with pytest.raises(NotFoundError) as excinfo:
            fetch_template("Bogus", client)
    assert excinfo.value.name == "Bogus"
    assert str(excinfo.value) == "Template 'Bogus' not found"


def test_server_error_is_also_not_found():
    with make_client(lambda request: httpx.Response(502)) as client:
        with pytest.raises(NotFoundError):
            fetch_template("Go", client)


def test_transport_failure_is_remote_error():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    with make_client(handler) as client:
        with pytest.raises(RemoteError):
            fetch_template("Go", client)
