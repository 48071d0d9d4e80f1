"""Text helpers for slugs and search terms."""

import re
import unicodedata

MAX_SEARCH_LENGTH = 100

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def generate_slug(title: str) -> str:
    """Create a URL-safe slug from a title.

    Accents are stripped, runs of anything other than ``a-z0-9`` become a
    single dash and leading/trailing dashes are removed.
    """
    normalized = unicodedata.normalize("NFD", title.lower())
    ascii_only = "".join(ch for ch in normalized if not unicodedata.combining(ch))
    return _NON_ALNUM.sub("-", ascii_only).strip("-")


def sanitize_search_term(term: str | None) -> str:
    """Escape a user search term for use inside a ``$regex`` query."""
    if not term:
        return ""
    return re.escape(term.strip()[:MAX_SEARCH_LENGTH])


def regex_search(term: str | None, fields: list[str]) -> dict | None:
    """Build a case-insensitive ``$or`` regex query over ``fields``."""
    pattern = sanitize_search_term(term)
    if not pattern:
        return None
    return {"$or": [{field: {"$regex": pattern, "$options": "i"}} for field in fields]}
