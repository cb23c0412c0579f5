"""routematch.http: HTTP request context.

Provides HttpRequest and the case-insensitive Headers collection it
carries; both satisfy the protocols matchers read from.
"""

from routematch.http._headers import Headers
from routematch.http._request import HttpRequest

__all__ = [
    "Headers",
    "HttpRequest",
]
