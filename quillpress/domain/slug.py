"""URL slugs for articles."""

import re

_DISALLOWED = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_DASHES = re.compile(r"-+")

FALLBACK_BASE = "article"


def slugify(title: str) -> str:
    """Reduce a title to lowercase ASCII words joined by single dashes."""
    slug = _DISALLOWED.sub("", title.lower())
    slug = _WHITESPACE.sub("-", slug.strip())
    slug = _DASHES.sub("-", slug).strip("-")
    return slug or FALLBACK_BASE


def build_slug(title: str, timestamp_ms: int) -> str:
    """Slug for a new article: the slugified title plus a millisecond timestamp."""
    return f"{slugify(title)}-{timestamp_ms}"
