"""Construction-time errors.

Matching never raises; everything here surfaces while a matcher is built.
"""

from __future__ import annotations


class MatcherError(Exception):
    """Errors from matcher construction."""


class UnevenPairsError(MatcherError):
    """A flat key/value list had an odd number of elements."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"expected an even number of key/value strings, got {count}")


class InvalidPatternError(MatcherError):
    """A regular expression failed to compile."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(f'invalid regex pattern "{pattern}": {reason}')
