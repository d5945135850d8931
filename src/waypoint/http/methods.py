"""HTTP method vocabulary.

A closed ``StrEnum`` so members compare equal to the raw method token
from the ASGI scope. Comparison is exact: ``"get"`` is not ``GET``.
"""

from __future__ import annotations

from enum import StrEnum


class HttpMethod(StrEnum):
    """The nine HTTP verbs a route can be registered for."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    TRACE = "TRACE"

    @classmethod
    def from_token(cls, token: str) -> HttpMethod:
        """Return the member for *token*.

        No case folding or whitespace stripping is applied.
        Raises ``ValueError`` for anything outside the vocabulary.
        """
        return cls(token)

    @classmethod
    def is_token(cls, token: str) -> bool:
        """True if *token* names a member exactly."""
        try:
            cls(token)
        except ValueError:
            return False
        return True
