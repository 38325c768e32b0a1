"""Version information for --version.

Reports the installed distribution version, falling back to the source
constant when running from a checkout that was never installed.
"""

from importlib.metadata import PackageNotFoundError, version

PACKAGE_VERSION = "1.0.0"
DISTRIBUTION_NAME = "gitignore-cli"


def get_version() -> str:
    """Return a version string like 'gitignore-cli 1.0.0'."""
    try:
        installed = version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        installed = PACKAGE_VERSION
    return f"{DISTRIBUTION_NAME} {installed}"
