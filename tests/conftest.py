"""Shared fixtures: fake HTTP transports and sample listings."""

import httpx
import pytest

from gitignore_cli import utils

SAMPLE_LISTING = [
    {"name": "Go.gitignore", "type": "file"},
    {"name": "Node.gitignore", "type": "file"},
    {"name": "README.md", "type": "file"},
    {"name": "vendor", "type": "dir"},
]


def make_client(handler) -> httpx.Client:
    """Build an httpx client whose requests are answered by *handler*."""
    return httpx.Client(transport=httpx.MockTransport(handler))


@pytest.fixture(autouse=True)
def _debug_off():
    utils.set_debug(False)
    yield
    utils.set_debug(False)
