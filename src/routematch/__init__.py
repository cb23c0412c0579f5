"""routematch: request matchers for an HTTP router.

All public types are exported from this module for flat imports:

    from routematch import PathTemplateMatcher, SchemeMatcher, Matchers, Rank
"""

__version__ = "0.1.0"

# Collection
from routematch._collection import Matchers, rank_key

# Comparisons and the pair helpers
from routematch._comparison import (
    Comparison,
    ExactComparison,
    RegexComparison,
    compile_anchored,
    compile_pattern,
    match_map,
)

# Config types, see routematch._config for details
from routematch._config import (
    ConfigParseError,
    CustomMatchConfig,
    HeaderMatchConfig,
    MatcherConfig,
    PathMatchConfig,
    RouteConfig,
    SchemeMatchConfig,
    UnknownPredicateError,
    load_matchers,
    parse_route_config,
)
from routematch._errors import InvalidPatternError, MatcherError, UnevenPairsError

# Concrete matchers
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
from routematch._pairs import exact_comparisons, is_even_pairs, regex_comparisons
from routematch._template import (
    NUMBER_PLACEHOLDER,
    STRING_PLACEHOLDER,
    compile_path_template,
)

# Protocols
from routematch._types import HeaderLookup, Matcher, Rank, Request

__all__ = [
    # Protocols
    "Matcher",
    "Request",
    "HeaderLookup",
    "Rank",
    # Collection
    "Matchers",
    "rank_key",
    # Concrete matchers
    "HeaderMatcher",
    "HeaderRegexMatcher",
    "SchemeMatcher",
    "PathMatcher",
    "PathRegexMatcher",
    "PathTemplateMatcher",
    "FuncMatcher",
    "path_matcher",
    # Path templates
    "compile_path_template",
    "NUMBER_PLACEHOLDER",
    "STRING_PLACEHOLDER",
    # Comparisons
    "Comparison",
    "ExactComparison",
    "RegexComparison",
    "compile_pattern",
    "compile_anchored",
    "match_map",
    "is_even_pairs",
    "exact_comparisons",
    "regex_comparisons",
    # Errors
    "MatcherError",
    "UnevenPairsError",
    "InvalidPatternError",
    # Config types
    "HeaderMatchConfig",
    "SchemeMatchConfig",
    "PathMatchConfig",
    "CustomMatchConfig",
    "MatcherConfig",
    "RouteConfig",
    "ConfigParseError",
    "UnknownPredicateError",
    "parse_route_config",
    "load_matchers",
]
