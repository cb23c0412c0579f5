"""Conformance fixture loader for routematch.

Loads YAML fixtures from tests/fixtures/ and turns each document into a
rank-sorted Matchers collection plus the requests to evaluate against it.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

from routematch import Matchers, load_matchers, parse_route_config
from routematch.http import HttpRequest

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class RouteCase:
    """A single test case from a route fixture."""

    fixture_name: str
    case_name: str
    matchers: Matchers
    request: HttpRequest
    expect: bool


# ─── Fixture loading ────────────────────────────────────────────────────────


def load_route_fixtures() -> list[RouteCase]:
    """Load every route fixture document under FIXTURE_DIR."""
    cases: list[RouteCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_route_file(yaml_file))
    return cases


def _load_route_file(path: Path) -> list[RouteCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[RouteCase] = []
    with path.open() as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            fixture_name = doc["name"]
            matchers = load_matchers(parse_route_config(doc["route"]))
            for case in doc["cases"]:
                cases.append(
                    RouteCase(
                        fixture_name=fixture_name,
                        case_name=case["name"],
                        matchers=matchers,
                        request=_parse_request(case["request"]),
                        expect=bool(case["expect"]),
                    )
                )
    return cases


def _parse_request(data: dict[str, Any]) -> HttpRequest:
    """Parse a YAML request mapping into an HttpRequest."""
    headers: dict[str, str | list[str]] = {}
    for name, value in data.get("headers", {}).items():
        if isinstance(value, list):
            headers[str(name)] = [str(v) for v in value]
        else:
            headers[str(name)] = str(value)
    return HttpRequest.from_url(str(data["url"]), headers)


# ─── Shared fixtures ────────────────────────────────────────────────────────


@pytest.fixture
def make_request():
    """Build an HttpRequest from keyword arguments, defaulting the rest."""

    def _make(
        path: str = "/",
        scheme: str = "http",
        headers: dict[str, str | list[str]] | None = None,
    ) -> HttpRequest:
        return HttpRequest.from_url(f"{scheme}://example.com{path}", headers or {})

    return _make
