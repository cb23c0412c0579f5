"""HttpRequest: a simple HTTP request context for matching.

Holds the URL scheme, the URL path and the headers. The query string is
never parsed; from_url() only drops it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from routematch.http._headers import Headers

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence


@dataclass(frozen=True, slots=True)
class HttpRequest:
    """HTTP request context for matching.

    ``scheme`` is compared verbatim by SchemeMatcher, so pass it lower-case
    (from_url() does this for you).
    """

    scheme: str = "http"
    path: str = "/"
    headers: Headers = field(default_factory=Headers)

    @classmethod
    def from_url(
        cls,
        url: str,
        headers: Mapping[str, str | Sequence[str]] | Iterable[tuple[str, str]] = (),
    ) -> HttpRequest:
        """Build a request from a URL.

        The scheme comes back lower-cased from URL splitting; the path
        is kept as-is and defaults to ``/`` when empty.
        """
        parts = urlsplit(url)
        return cls(
            scheme=parts.scheme,
            path=parts.path or "/",
            headers=headers if isinstance(headers, Headers) else Headers(headers),
        )
