"""Config types for building a route's matchers from plain data.

Config-driven construction path:
  dict → parse_route_config() → RouteConfig → load_matchers() → Matchers

The dict shape (JSON or YAML)::

    matchers:
      - {type: scheme, schemes: [https]}
      - {type: header, pairs: [Accept, application/json]}
      - {type: header_regex, pairs: [X-Trace, "^[0-9]+$"]}
      - {type: path, value: "/users/:number"}
      - {type: custom, name: is_admin}

Relationship to runtime types:

| Config type                       | Runtime type                         |
|-----------------------------------|--------------------------------------|
| HeaderMatchConfig(regex=False)    | HeaderMatcher                        |
| HeaderMatchConfig(regex=True)     | HeaderRegexMatcher                   |
| SchemeMatchConfig                 | SchemeMatcher                        |
| PathMatchConfig                   | PathMatcher / PathRegexMatcher /     |
|                                   | PathTemplateMatcher                  |
| CustomMatchConfig                 | FuncMatcher (resolved by name)       |
| RouteConfig                       | Matchers (sorted by rank)            |
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal

from routematch._collection import Matchers
from routematch._errors import MatcherError
from routematch._matchers import (
    FuncMatcher,
    HeaderMatcher,
    HeaderRegexMatcher,
    PathMatcher,
    PathRegexMatcher,
    PathTemplateMatcher,
    SchemeMatcher,
    path_matcher,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from routematch._types import Matcher, Request

logger = logging.getLogger("routematch.config")

# ═══════════════════════════════════════════════════════════════════════════════
# Config types
# ═══════════════════════════════════════════════════════════════════════════════

type PathKind = Literal["auto", "exact", "regex", "template"]


@dataclass(frozen=True, slots=True)
class HeaderMatchConfig:
    """Alternating header names and values (or patterns, when regex)."""

    pairs: tuple[str, ...]
    regex: bool = False


@dataclass(frozen=True, slots=True)
class SchemeMatchConfig:
    """Accepted URL schemes, any case."""

    schemes: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class PathMatchConfig:
    """A path, with the variant chosen explicitly or from the path ("auto")."""

    kind: PathKind
    value: str


@dataclass(frozen=True, slots=True)
class CustomMatchConfig:
    """A named predicate supplied to load_matchers()."""

    name: str


type MatcherConfig = HeaderMatchConfig | SchemeMatchConfig | PathMatchConfig | CustomMatchConfig


@dataclass(frozen=True, slots=True)
class RouteConfig:
    """All matchers attached to one route."""

    matchers: tuple[MatcherConfig, ...]


# ═══════════════════════════════════════════════════════════════════════════════
# Errors
# ═══════════════════════════════════════════════════════════════════════════════


class ConfigParseError(Exception):
    """Error parsing a config dict into config types."""


class UnknownPredicateError(MatcherError):
    """A custom matcher named a predicate that was not supplied."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = sorted(available)
        if self.available:
            msg = f"unknown predicate: {name!r} (registered: {', '.join(self.available)})"
        else:
            msg = f"unknown predicate: {name!r} (no predicates are registered)"
        super().__init__(msg)


# ═══════════════════════════════════════════════════════════════════════════════
# Parsing (dict → config types)
# ═══════════════════════════════════════════════════════════════════════════════

_PATH_KINDS: dict[str, PathKind] = {
    "path": "auto",
    "path_exact": "exact",
    "path_regex": "regex",
    "path_template": "template",
}


def parse_route_config(data: dict[str, Any]) -> RouteConfig:
    """Parse a dict into a RouteConfig.

    Raises:
        ConfigParseError: If the dict is malformed.
    """
    if not isinstance(data, dict):
        msg = f"expected dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    raw_matchers = data.get("matchers")
    if raw_matchers is None:
        msg = "missing required field 'matchers'"
        raise ConfigParseError(msg)
    if not isinstance(raw_matchers, list):
        msg = f"'matchers' must be a list, got {type(raw_matchers).__name__}"
        raise ConfigParseError(msg)

    return RouteConfig(matchers=tuple(_parse_matcher(m) for m in raw_matchers))


def _parse_matcher(data: dict[str, Any]) -> MatcherConfig:
    """Parse one matcher entry, dispatching on its 'type' discriminant."""
    if not isinstance(data, dict):
        msg = f"matcher must be a dict, got {type(data).__name__}"
        raise ConfigParseError(msg)

    matcher_type = data.get("type")
    if matcher_type is None:
        msg = "matcher missing required field 'type'"
        raise ConfigParseError(msg)

    if matcher_type in ("header", "header_regex"):
        pairs = _string_list(data, "pairs")
        return HeaderMatchConfig(pairs=pairs, regex=matcher_type == "header_regex")
    if matcher_type == "scheme":
        return SchemeMatchConfig(schemes=_string_list(data, "schemes"))
    if matcher_type in _PATH_KINDS:
        return PathMatchConfig(kind=_PATH_KINDS[matcher_type], value=_string(data, "value"))
    if matcher_type == "custom":
        return CustomMatchConfig(name=_string(data, "name"))

    msg = f"unknown matcher type: {matcher_type!r}"
    raise ConfigParseError(msg)


def _string(data: dict[str, Any], key: str) -> str:
    if key not in data:
        msg = f"{data['type']} matcher missing required field {key!r}"
        raise ConfigParseError(msg)
    value = data[key]
    if not isinstance(value, str):
        msg = f"{data['type']} {key!r} must be a string, got {type(value).__name__}"
        raise ConfigParseError(msg)
    return value


def _string_list(data: dict[str, Any], key: str) -> tuple[str, ...]:
    if key not in data:
        msg = f"{data['type']} matcher missing required field {key!r}"
        raise ConfigParseError(msg)
    values = data[key]
    if not isinstance(values, list):
        msg = f"{data['type']} {key!r} must be a list, got {type(values).__name__}"
        raise ConfigParseError(msg)
    for v in values:
        if not isinstance(v, str):
            msg = f"{data['type']} {key!r} entries must be strings, got {type(v).__name__}"
            raise ConfigParseError(msg)
    return tuple(values)


# ═══════════════════════════════════════════════════════════════════════════════
# Loading (config types → runtime matchers)
# ═══════════════════════════════════════════════════════════════════════════════


def load_matchers(
    config: RouteConfig,
    predicates: Mapping[str, Callable[[Request], bool]] | None = None,
) -> Matchers:
    """Build every matcher in ``config`` and return them sorted by rank.

    ``predicates`` resolves ``custom`` entries by name.

    Raises:
        UnknownPredicateError: a custom entry names an unknown predicate
        UnevenPairsError: a header entry has an odd number of strings
        InvalidPatternError: a regex or expanded template does not compile
    """
    predicates = predicates or {}
    matchers = Matchers(_load_matcher(m, predicates) for m in config.matchers)
    matchers.sort_by_rank()
    logger.debug(
        "loaded %d matcher(s): %s",
        len(matchers),
        ", ".join(type(m).__name__ for m in matchers),
    )
    return matchers


def _load_matcher(
    config: MatcherConfig,
    predicates: Mapping[str, Callable[[Request], bool]],
) -> Matcher:
    match config:
        case HeaderMatchConfig(pairs=pairs, regex=True):
            return HeaderRegexMatcher.from_pairs(*pairs)
        case HeaderMatchConfig(pairs=pairs):
            return HeaderMatcher.from_pairs(*pairs)
        case SchemeMatchConfig(schemes=schemes):
            return SchemeMatcher.of(*schemes)
        case PathMatchConfig(kind=kind, value=value):
            return _load_path(kind, value)
        case CustomMatchConfig(name=name):
            func = predicates.get(name)
            if func is None:
                raise UnknownPredicateError(name, list(predicates.keys()))
            return FuncMatcher(func)
        case _:  # pragma: no cover
            msg = f"unknown matcher config type: {type(config).__name__}"
            raise ConfigParseError(msg)


def _load_path(kind: PathKind, value: str) -> Matcher:
    match kind:
        case "auto":
            return path_matcher(value)
        case "exact":
            return PathMatcher(value)
        case "regex":
            return PathRegexMatcher(value)
        case "template":
            return PathTemplateMatcher(value)
        case _:  # pragma: no cover
            msg = f"unknown path kind: {kind!r}"
            raise ConfigParseError(msg)
