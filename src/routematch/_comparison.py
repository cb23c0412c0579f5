"""Comparisons: an exact string or a compiled pattern, tested against a candidate.

Each comparison is a frozen dataclass, immutable after construction.

Patterns compile via ``google-re2``, which guarantees linear-time matching.
RE2 has no backreferences or lookaround; patterns using them are rejected
at construction with InvalidPatternError.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import re2

from routematch._errors import InvalidPatternError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from routematch._types import HeaderLookup


def compile_pattern(pattern: str) -> re2.Pattern[str]:
    """Compile a pattern with RE2.

    Raises:
        InvalidPatternError: If the pattern is not valid RE2 syntax.
    """
    try:
        return re2.compile(pattern)
    except re2.error as e:
        raise InvalidPatternError(pattern, str(e)) from e


def compile_anchored(pattern: str) -> re2.Pattern[str]:
    """Compile a pattern that must match the whole subject string.

    The pattern is grouped before anchoring so a top-level alternation
    cannot escape the anchors.
    """
    return compile_pattern(f"^(?:{pattern})$")


@dataclass(frozen=True, slots=True)
class ExactComparison:
    """Exact, case-sensitive string equality."""

    value: str

    def compare(self, candidate: str, /) -> bool:
        return candidate == self.value


@dataclass(frozen=True, slots=True)
class RegexComparison:
    """Regular expression search.

    Unanchored, like RE2's partial match: ``^`` and ``$`` in the pattern
    are what pin it to the whole value.

    Raises:
        InvalidPatternError: If the pattern is not valid RE2 syntax.
    """

    pattern: str
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", compile_pattern(self.pattern))

    def compare(self, candidate: str, /) -> bool:
        return self._compiled.search(candidate) is not None


type Comparison = ExactComparison | RegexComparison


def match_map(
    comparisons: Mapping[str, Comparison],
    headers: HeaderLookup,
    require_all: bool,
) -> bool:
    """Evaluate a name -> comparison mapping against a header collection.

    A name is satisfied when at least one of its actual values passes its
    comparison; a missing name is never satisfied.

    - require_all=True: every name must be satisfied (empty mapping -> True)
    - require_all=False: any name must be satisfied (empty mapping -> False)
    """
    results = (
        any(comparison.compare(value) for value in headers.get_list(name))
        for name, comparison in comparisons.items()
    )
    if require_all:
        return all(results)
    return any(results)
