"""Waypoint exception hierarchy.

Shared across Router, App, and the ASGI handler so every module
raises and catches the same types.
"""

from __future__ import annotations

from dataclasses import dataclass

from waypoint.http.response import JSONResponse, error_payload
from waypoint.routing.route import DispatchOutcome


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when a registration or configuration value is invalid."""


@dataclass(frozen=True, slots=True)
class HTTPError(WaypointError):
    """An error that maps directly to an HTTP status code.

    Raised by the router or by handlers. The ASGI handler turns it into
    a ``{"message": detail}`` JSON response.
    """

    status: int
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)

    @property
    def message(self) -> str:
        return self.detail or f"Error {self.status}"

    def to_response(self) -> JSONResponse:
        return JSONResponse(error_payload(self.message), self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no registered path matched the request path."""

    outcome = DispatchOutcome.NOT_FOUND

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — the first route with this path is registered for another method.

    The message names the method the client sent.
    """

    outcome = DispatchOutcome.METHOD_NOT_ALLOWED

    def __init__(self, method: str) -> None:
        super().__init__(status=405, detail=f"{method} method is not allowed for this route.")


class HandlerUnresolvable(HTTPError):  # noqa: N818
    """500 — a route matched but its handler reference cannot be invoked.

    A configuration error surfaced to the client rather than crashing.
    """

    outcome = DispatchOutcome.HANDLER_MISSING

    def __init__(self, detail: str = "The specified function does not exist") -> None:
        super().__init__(status=500, detail=detail)


class ResponseSent(BaseException):  # noqa: N818
    """Control-flow signal raised by ``send_response``.

    Derives from ``BaseException`` like ``SystemExit`` so handler code
    wrapped in ``except Exception`` cannot swallow it. Caught by the
    router and by the lifespan runner, never by application code.
    """

    def __init__(self, response: JSONResponse) -> None:
        super().__init__(response.status)
        self.response = response
