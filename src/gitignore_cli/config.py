"""Configuration constants for the gitignore template downloader.

Endpoints are fixed: templates always come from the github/gitignore
repository on its main branch.
"""

# ---------------------------------------------------------------------------
# Remote endpoints
# ---------------------------------------------------------------------------

GITHUB_API_URL = "https://api.github.com/repos/github/gitignore/contents"
GITHUB_RAW_URL = "https://raw.githubusercontent.com/github/gitignore/main"

USER_AGENT = "gitignore-cli"
REQUEST_HEADERS = {"User-Agent": USER_AGENT}

# Only directory entries ending in this suffix are templates.
TEMPLATE_SUFFIX = ".gitignore"


# ---------------------------------------------------------------------------
# Local destination
# ---------------------------------------------------------------------------

DESTINATION = ".gitignore"
OVERWRITE_PROMPT = f"{DESTINATION} already exists. Overwrite? (y/N): "


# ---------------------------------------------------------------------------
# Interactive selection (fzf)
# ---------------------------------------------------------------------------

FZF_COMMAND = "fzf"
FZF_ARGS = [
    "--prompt=Select gitignore template: ",
    "--height=40%",
]
