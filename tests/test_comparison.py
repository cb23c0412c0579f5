"""Tests for comparisons, the pair helpers and match_map."""

import pytest

from routematch import (
    ExactComparison,
    InvalidPatternError,
    RegexComparison,
    UnevenPairsError,
    compile_anchored,
    exact_comparisons,
    is_even_pairs,
    match_map,
    regex_comparisons,
)
from routematch.http import Headers


class TestExactComparison:
    def test_equal(self) -> None:
        assert ExactComparison("json").compare("json") is True

    def test_case_sensitive(self) -> None:
        assert ExactComparison("json").compare("JSON") is False

    def test_partial_no_match(self) -> None:
        assert ExactComparison("json").compare("application/json") is False

    def test_empty_string(self) -> None:
        c = ExactComparison("")
        assert c.compare("") is True
        assert c.compare("a") is False


class TestRegexComparison:
    def test_anchored_pattern(self) -> None:
        c = RegexComparison(r"^\d+$")
        assert c.compare("12345") is True
        assert c.compare("12a45") is False

    def test_search_not_fullmatch(self) -> None:
        assert RegexComparison(r"\d+").compare("abc123def") is True

    def test_invalid_raises(self) -> None:
        with pytest.raises(InvalidPatternError):
            RegexComparison("[invalid")

    def test_equality_ignores_compiled_state(self) -> None:
        assert RegexComparison("a+") == RegexComparison("a+")


class TestCompileAnchored:
    def test_whole_string(self) -> None:
        compiled = compile_anchored("/a")
        assert compiled.search("/a") is not None
        assert compiled.search("/ab") is None

    def test_empty_pattern_matches_only_empty(self) -> None:
        compiled = compile_anchored("")
        assert compiled.search("") is not None
        assert compiled.search("/") is None


class TestPairs:
    def test_even_ok(self) -> None:
        is_even_pairs(["a", "1", "b", "2"])
        is_even_pairs([])

    def test_odd_raises(self) -> None:
        with pytest.raises(UnevenPairsError) as exc_info:
            is_even_pairs(["a"])
        assert exc_info.value.count == 1
        assert "got 1" in str(exc_info.value)

    def test_exact_builder(self) -> None:
        comparisons = exact_comparisons("Accept", "text/html", "X-Id", "7")
        assert dict(comparisons) == {
            "Accept": ExactComparison("text/html"),
            "X-Id": ExactComparison("7"),
        }

    def test_regex_builder(self) -> None:
        comparisons = regex_comparisons("X-Id", "^[0-9]+$")
        assert comparisons["X-Id"] == RegexComparison("^[0-9]+$")

    def test_later_duplicate_wins(self) -> None:
        comparisons = exact_comparisons("A", "1", "A", "2")
        assert comparisons["A"] == ExactComparison("2")

    def test_mapping_is_read_only(self) -> None:
        comparisons = exact_comparisons("A", "1")
        with pytest.raises(TypeError):
            comparisons["B"] = ExactComparison("2")  # type: ignore[index]

    def test_regex_builder_rejects_bad_pattern(self) -> None:
        with pytest.raises(InvalidPatternError):
            regex_comparisons("A", "(")

    def test_regex_builder_checks_pairs_first(self) -> None:
        with pytest.raises(UnevenPairsError):
            regex_comparisons("A", "ok", "(")


class TestMatchMap:
    headers = Headers({"Accept": ["text/html", "application/json"], "X-Id": "7"})

    def test_require_all_satisfied(self) -> None:
        comparisons = exact_comparisons("accept", "application/json", "x-id", "7")
        assert match_map(comparisons, self.headers, require_all=True) is True

    def test_require_all_one_missing(self) -> None:
        comparisons = exact_comparisons("Accept", "text/html", "X-Missing", "1")
        assert match_map(comparisons, self.headers, require_all=True) is False

    def test_require_any(self) -> None:
        comparisons = exact_comparisons("Accept", "text/html", "X-Missing", "1")
        assert match_map(comparisons, self.headers, require_all=False) is True

    def test_require_any_none_satisfied(self) -> None:
        comparisons = exact_comparisons("X-Id", "8", "X-Missing", "1")
        assert match_map(comparisons, self.headers, require_all=False) is False

    def test_empty_mapping(self) -> None:
        assert match_map({}, self.headers, require_all=True) is True
        assert match_map({}, self.headers, require_all=False) is False
