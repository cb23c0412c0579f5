"""Concrete matchers implementing the Matcher protocol.

Each matcher is a frozen dataclass: patterns are compiled and sets/maps
built in __post_init__ or a named constructor, then only read. Invalid
input fails at construction, never inside match().

| Variant             | Rank   |
|---------------------|--------|
| HeaderMatcher       | ANY    |
| HeaderRegexMatcher  | ANY    |
| FuncMatcher         | ANY    |
| PathMatcher         | PATH   |
| PathRegexMatcher    | PATH   |
| PathTemplateMatcher | PATH   |
| SchemeMatcher       | SCHEME |
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, ClassVar

from routematch._comparison import compile_anchored, match_map
from routematch._pairs import exact_comparisons, regex_comparisons
from routematch._template import PLACEHOLDER_TRIGGER, compile_path_template
from routematch._types import Rank

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    import re2

    from routematch._comparison import Comparison
    from routematch._types import Request

# Marks a path as regex source rather than a literal; never part of the pattern.
REGEX_MARKER = "#"


@dataclass(frozen=True, slots=True)
class HeaderMatcher:
    """Every configured header must carry a value equal to the configured one."""

    RANK: ClassVar[Rank] = Rank.ANY

    comparisons: Mapping[str, Comparison]

    def __post_init__(self) -> None:
        object.__setattr__(self, "comparisons", MappingProxyType(dict(self.comparisons)))

    @classmethod
    def from_pairs(cls, *pairs: str) -> HeaderMatcher:
        """Build from alternating names and values.

        Raises:
            UnevenPairsError: odd number of strings
        """
        return cls(exact_comparisons(*pairs))

    def match(self, request: Request, /) -> bool:
        return match_map(self.comparisons, request.headers, require_all=True)

    def rank(self) -> Rank:
        return self.RANK


@dataclass(frozen=True, slots=True)
class HeaderRegexMatcher:
    """Every configured header must carry a value the configured pattern finds."""

    RANK: ClassVar[Rank] = Rank.ANY

    comparisons: Mapping[str, Comparison]

    def __post_init__(self) -> None:
        object.__setattr__(self, "comparisons", MappingProxyType(dict(self.comparisons)))

    @classmethod
    def from_pairs(cls, *pairs: str) -> HeaderRegexMatcher:
        """Build from alternating names and patterns.

        Raises:
            UnevenPairsError: odd number of strings
            InvalidPatternError: a pattern is not valid RE2 syntax
        """
        return cls(regex_comparisons(*pairs))

    def match(self, request: Request, /) -> bool:
        return match_map(self.comparisons, request.headers, require_all=True)

    def rank(self) -> Rank:
        return self.RANK


@dataclass(frozen=True, slots=True)
class SchemeMatcher:
    """Accepts requests whose scheme is in the configured set.

    Schemes are lower-cased at construction; the request scheme is compared
    as-is, so it must already be lower-case.
    """

    RANK: ClassVar[Rank] = Rank.SCHEME

    schemes: frozenset[str]

    def __post_init__(self) -> None:
        if isinstance(self.schemes, str):
            msg = f"schemes must be a collection of strings, got str {self.schemes!r}"
            raise TypeError(msg)
        object.__setattr__(self, "schemes", frozenset(s.lower() for s in self.schemes))

    @classmethod
    def of(cls, *schemes: str) -> SchemeMatcher:
        return cls(frozenset(schemes))

    def match(self, request: Request, /) -> bool:
        return request.scheme in self.schemes

    def rank(self) -> Rank:
        return self.RANK


@dataclass(frozen=True, slots=True)
class PathMatcher:
    """Literal path equality."""

    RANK: ClassVar[Rank] = Rank.PATH

    path: str

    def match(self, request: Request, /) -> bool:
        return request.path == self.path

    def rank(self) -> Rank:
        return self.RANK


@dataclass(frozen=True, slots=True)
class PathRegexMatcher:
    """Whole-path match against a regular expression.

    Every ``#`` is stripped from the pattern before it is anchored and
    compiled.

    Raises:
        InvalidPatternError: If the pattern is not valid RE2 syntax.
    """

    RANK: ClassVar[Rank] = Rank.PATH

    pattern: str
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        source = self.pattern.replace(REGEX_MARKER, "")
        object.__setattr__(self, "_compiled", compile_anchored(source))

    def match(self, request: Request, /) -> bool:
        return self._compiled.search(request.path) is not None

    def rank(self) -> Rank:
        return self.RANK


@dataclass(frozen=True, slots=True)
class PathTemplateMatcher:
    """Whole-path match against a template with ``:number``/``:string`` segments.

    >>> m = PathTemplateMatcher("/users/:number")
    >>> m.source
    '/users/([0-9]+)'

    Raises:
        InvalidPatternError: If the expanded template is not valid RE2 syntax.
    """

    RANK: ClassVar[Rank] = Rank.PATH

    template: str
    source: str = field(init=False, compare=False)
    _compiled: re2.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        source = compile_path_template(self.template)
        object.__setattr__(self, "source", source)
        object.__setattr__(self, "_compiled", compile_anchored(source))

    def match(self, request: Request, /) -> bool:
        return self._compiled.search(request.path) is not None

    def rank(self) -> Rank:
        return self.RANK


@dataclass(frozen=True, slots=True)
class FuncMatcher:
    """Adapts any ``request -> bool`` callable to the Matcher protocol.

    Carries no structural priority, so it always ranks ANY.
    """

    RANK: ClassVar[Rank] = Rank.ANY

    func: Callable[[Request], bool]

    def match(self, request: Request, /) -> bool:
        return bool(self.func(request))

    def rank(self) -> Rank:
        return self.RANK


type PathVariant = PathMatcher | PathRegexMatcher | PathTemplateMatcher


def path_matcher(path: str) -> PathVariant:
    """Pick the path variant a route path asks for.

    - contains ``#``  -> PathRegexMatcher
    - contains ``:``  -> PathTemplateMatcher
    - otherwise       -> PathMatcher
    """
    if REGEX_MARKER in path:
        return PathRegexMatcher(path)
    if PLACEHOLDER_TRIGGER in path:
        return PathTemplateMatcher(path)
    return PathMatcher(path)
