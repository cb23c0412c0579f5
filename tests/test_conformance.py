"""Route conformance tests.

Every case in tests/fixtures/*.yaml goes through the config loading path
(parse_route_config -> load_matchers) and is evaluated with all matchers
required to accept the request.
"""

from __future__ import annotations

import pytest
from conftest import RouteCase, load_route_fixtures

_CASES = load_route_fixtures()


@pytest.mark.parametrize(
    "case",
    _CASES,
    ids=[f"{c.fixture_name}::{c.case_name}" for c in _CASES],
)
def test_route_conformance(case: RouteCase) -> None:
    result = all(m.match(case.request) for m in case.matchers)
    assert result is case.expect, (
        f"[{case.fixture_name}] {case.case_name}: expected {case.expect}, got {result}"
    )


def test_fixtures_loaded() -> None:
    assert len(_CASES) > 20
