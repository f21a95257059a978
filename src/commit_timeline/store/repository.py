"""Repository identity helpers."""

from __future__ import annotations

import re

__all__ = [
    "extract_repo_name_from_url",
    "is_github_repository_url",
    "resolve_repo_name",
]

_GITHUB_REPO_RE = re.compile(r"github\.com/([^/]+/[^/]+)")
_GITHUB_URL_RE = re.compile(r"^https?://(www\.)?github\.com/[\w-]+/[\w.-]+/?.*$")


def is_github_repository_url(url: str) -> bool:
    """Check that a URL looks like an http(s) GitHub repository URL."""
    return bool(_GITHUB_URL_RE.match(url.strip()))


def extract_repo_name_from_url(url: str) -> str:
    """Extract "owner/name" from a GitHub repository URL.

    Query strings, fragments and a trailing ".git" are ignored.

    Args:
        url: Repository URL, e.g. "https://github.com/octo/widgets.git".

    Returns:
        The "owner/name" pair, or an empty string when the URL does not
        point at a GitHub repository.

    """
    without_params = re.split(r"[?#]", url, maxsplit=1)[0]
    clean = re.sub(r"\.git$", "", without_params)
    match = _GITHUB_REPO_RE.search(clean)
    return match.group(1) if match else ""


def resolve_repo_name(value: str) -> str:
    """Accept either a GitHub URL or a bare "owner/name" pair.

    Args:
        value: URL or repository name.

    Returns:
        The repository name, or an empty string if value is neither.

    """
    value = value.strip()
    if "github.com" in value:
        return extract_repo_name_from_url(value)
    if re.fullmatch(r"[^/\s]+/[^/\s]+", value):
        return value
    return ""
