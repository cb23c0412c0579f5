"""Test utilities for routematch.

Provides a stub Matcher with a fixed answer and rank, for exercising
code that orders or combines matchers without building real ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from routematch._types import Rank, Request


@dataclass(frozen=True, slots=True)
class StubMatcher:
    """A matcher that ignores the request.

    >>> from routematch import Rank
    >>> from routematch.http import HttpRequest
    >>> StubMatcher(Rank.PATH, result=True).match(HttpRequest())
    True
    """

    fixed_rank: Rank
    result: bool = False
    label: str = ""

    def match(self, request: Request, /) -> bool:
        return self.result

    def rank(self) -> Rank:
        return self.fixed_rank
