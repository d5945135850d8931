"""Request-scoped context via ContextVar.

Handlers are invoked with no arguments. The ASGI handler sets
``request_var`` before dispatch and resets it afterwards, so a handler
reads its request with ``get_request()``.

``ContextVar`` is task-local under asyncio, so concurrent requests
never see each other's request.
"""

from contextvars import ContextVar

from waypoint.http.request import Request

request_var: ContextVar[Request] = ContextVar("waypoint_request")
"""The current request. Set by the ASGI handler before dispatch."""


def get_request() -> Request:
    """Return the current request.

    Raises ``LookupError`` if called outside a request context.
    """
    return request_var.get()
