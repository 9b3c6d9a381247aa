"""Query normalization for disease search."""

import re

_WHITESPACE_RE = re.compile(r"\s+")

MAX_QUERY_LENGTH = 80


def normalize_text(value: str) -> str:
    """Lower-case and delete every whitespace character (matching form only)."""
    return _WHITESPACE_RE.sub("", value.lower()).strip()


def prepare_query(raw: str | None, max_length: int = MAX_QUERY_LENGTH) -> str | None:
    """Trim and bound a user query.

    Returns None for an absent or blank query, otherwise the trimmed query cut
    to ``max_length`` characters.
    """
    query = (raw or "").strip()
    if not query:
        return None
    return query[:max_length]
