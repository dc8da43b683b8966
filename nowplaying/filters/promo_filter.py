"""Recognize station boilerplate shown in place of a song."""

import logging
import re
from typing import List, Optional

from ..config import PROMO_PATTERNS

logger = logging.getLogger(__name__)


class PromoFilter:
    """Match now-playing text against a denylist of marketing phrases."""

    def __init__(self, patterns: Optional[List[str]] = None):
        self.patterns = [
            re.compile(p, re.IGNORECASE)
            for p in (PROMO_PATTERNS if patterns is None else patterns)
        ]

    def is_promotional(self, text: Optional[str]) -> bool:
        if not text:
            return False
        for pattern in self.patterns:
            if pattern.search(text):
                logger.debug(f"Promotional text '{text}' matched '{pattern.pattern}'")
                return True
        return False
