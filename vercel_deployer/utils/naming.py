"""Project name sanitizing."""

import re

_INVALID_CHARS = re.compile(r"[^a-z0-9]")
_HYPHEN_RUNS = re.compile(r"-{2,}")


def sanitize_project_name(name: str) -> str:
    """Map a display name to a Vercel-legal project name.

    >>> sanitize_project_name("My Site!!")
    'my-site'
    """
    slug = _INVALID_CHARS.sub("-", name.lower())
    slug = _HYPHEN_RUNS.sub("-", slug)
    return slug.strip("-")
