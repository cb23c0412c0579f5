"""Flat key/value list helpers.

Route builders take headers as ``"Name", "value", "Other", "value"``; these
helpers validate such a list and fold it into a name -> comparison mapping.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from routematch._comparison import ExactComparison, RegexComparison
from routematch._errors import UnevenPairsError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from routematch._comparison import Comparison


def is_even_pairs(pairs: Sequence[str]) -> None:
    """Raise UnevenPairsError unless ``pairs`` has an even length."""
    if len(pairs) % 2 != 0:
        raise UnevenPairsError(len(pairs))


def exact_comparisons(*pairs: str) -> MappingProxyType[str, Comparison]:
    """Build a read-only name -> ExactComparison mapping."""
    return _convert(ExactComparison, pairs)


def regex_comparisons(*pairs: str) -> MappingProxyType[str, Comparison]:
    """Build a read-only name -> RegexComparison mapping.

    Raises:
        UnevenPairsError: odd number of strings
        InvalidPatternError: a value is not valid RE2 syntax
    """
    return _convert(RegexComparison, pairs)


def _convert(
    factory: Callable[[str], Comparison], pairs: Sequence[str]
) -> MappingProxyType[str, Comparison]:
    is_even_pairs(pairs)
    # Later duplicates win.
    built = {pairs[i]: factory(pairs[i + 1]) for i in range(0, len(pairs), 2)}
    return MappingProxyType(built)
