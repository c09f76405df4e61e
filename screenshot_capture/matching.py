"""
Identity matching.

A plugin scores one point for every one of its patterns that is found
somewhere in the instrument ID. Patterns are tried independently; a
pattern that is not a valid regular expression simply never matches.
"""

import functools
import logging
import re

from .plugins.base import split_patterns

logger = logging.getLogger(__name__)

__all__ = ["score", "split_patterns"]


@functools.lru_cache(maxsize=None)
def _compile(pattern: str):
    try:
        return re.compile(pattern)
    except (re.error, OverflowError, RecursionError) as exc:
        logger.debug("Ignoring invalid pattern %r: %s", pattern, exc)
        return None


def regex_match(string: str, pattern: str) -> bool:
    regex = _compile(pattern)
    return regex is not None and regex.search(string) is not None


def score(identity: str, plugin) -> int:
    """Number of *plugin* patterns that match *identity* (0 if it has none)."""
    if plugin.patterns is None:
        return 0
    return sum(1 for pattern in plugin.patterns if regex_match(identity, pattern))
