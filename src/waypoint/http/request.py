"""Immutable HTTP request.

Frozen metadata with async body access. Handlers take no arguments,
so they reach the current request through ``waypoint.get_request()``.
"""

from __future__ import annotations

import json as json_module
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import parse_qsl

from waypoint._internal.asgi import Receive, Scope
from waypoint.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``method`` is the raw token the client sent. ``path`` is the path
    component only (query string and fragment already stripped) and is
    never normalized: trailing slashes and case are significant.
    """

    method: str
    path: str
    headers: Headers
    query_string: bytes = b""
    client: tuple[str, int] | None = None

    _receive: Receive | None = field(default=None, repr=False, compare=False)
    # Body cache; the dict is mutable even though the field is frozen
    _cache: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def query(self) -> dict[str, str]:
        """Query parameters, last value wins."""
        return dict(parse_qsl(self.query_string.decode("latin-1"), keep_blank_values=True))

    @property
    def content_type(self) -> str | None:
        return self.headers.get("content-type")

    async def body(self) -> bytes:
        """Read the full request body.

        The ASGI receive channel is consumed once; later calls return
        the cached bytes.
        """
        if "body" not in self._cache:
            self._cache["body"] = b"".join([chunk async for chunk in self.stream()])
        return self._cache["body"]

    async def stream(self) -> AsyncGenerator[bytes]:
        """Stream the request body in chunks."""
        if self._receive is None:
            return
        while True:
            message = await self._receive()
            chunk = message.get("body", b"")
            if chunk:
                yield chunk
            if not message.get("more_body", False):
                break

    async def json(self) -> Any:
        """Parse the body as JSON."""
        return json_module.loads(await self.body())

    async def text(self) -> str:
        return (await self.body()).decode("utf-8")

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        """Create a Request from an ASGI scope and receive callable."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=_request_path(scope),
            headers=Headers(tuple(scope.get("headers", ()))),
            query_string=scope.get("query_string", b""),
            client=tuple(client) if client else None,
            _receive=receive,
        )


def _request_path(scope: Scope) -> str:
    """The path exactly as it appeared on the request line.

    Servers percent-decode ``scope["path"]``; ``raw_path`` keeps the
    encoded form, so ``/a%2Fb`` stays distinct from ``/a/b``.
    """
    raw_path = scope.get("raw_path")
    if raw_path is None:
        return scope["path"]
    return raw_path.decode("latin-1").partition("?")[0]
