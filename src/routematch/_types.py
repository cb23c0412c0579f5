"""Core protocols and the rank enum for routematch.

- Rank is the priority class of a matcher variant (ordering only)
- Matcher is the capability every variant implements
- Request is the read-only view of an incoming request a matcher consults
- HeaderLookup is the case-insensitive, multi-valued header collection
"""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable


class Rank(IntEnum):
    """Priority class of a matcher variant.

    Ordered ANY < PATH < SCHEME. Only the ordering is meaningful;
    never add or subtract ranks.
    """

    ANY = 0
    PATH = 1
    SCHEME = 2


@runtime_checkable
class HeaderLookup(Protocol):
    """Header collection with case-insensitive lookup by name."""

    def get_list(self, key: str) -> list[str]: ...


@runtime_checkable
class Request(Protocol):
    """The request fields a matcher may read.

    ``scheme`` is expected already lower-cased (as URL parsing yields it).
    """

    @property
    def scheme(self) -> str: ...

    @property
    def path(self) -> str: ...

    @property
    def headers(self) -> HeaderLookup: ...


@runtime_checkable
class Matcher(Protocol):
    """Decide whether a request is accepted, and report a priority class.

    ``match`` must only read; it never mutates the matcher or the request.
    ``rank`` returns the same value for every instance of a variant.
    """

    def match(self, request: Request, /) -> bool: ...

    def rank(self) -> Rank: ...
