"""Whitespace normalization for scraped text."""

import re
from typing import Optional

_WHITESPACE = re.compile(r"\s+")


def normalize(text: Optional[str]) -> str:
    """Collapse whitespace runs to a single space and trim. None -> ""."""
    if not text:
        return ""
    return _WHITESPACE.sub(" ", text).strip()
