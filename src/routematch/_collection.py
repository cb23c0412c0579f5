"""Matchers: an ordered collection sortable by rank.

The sort contract is len / swap / less, where less(i, j) is
``rank(i) < rank(j)``. Rank is the only key; ties have no guaranteed
order (CPython's sort happens to be stable, callers must not rely on it).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from routematch._types import Matcher, Rank


def rank_key(matcher: Matcher) -> Rank:
    """Sort key for matchers: their rank."""
    return matcher.rank()


class Matchers(list["Matcher"]):
    """A list of matchers, sortable ascending by rank."""

    def swap(self, i: int, j: int) -> None:
        self[i], self[j] = self[j], self[i]

    def less(self, i: int, j: int) -> bool:
        return self[i].rank() < self[j].rank()

    def sort_by_rank(self) -> Matchers:
        """Sort in place, lowest rank first. Returns self for chaining."""
        self.sort(key=rank_key)
        return self
