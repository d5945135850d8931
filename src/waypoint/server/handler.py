"""ASGI handler — the outermost request boundary.

The only component that touches raw ASGI scopes. Builds the typed
Request, runs one dispatch pass, and sends exactly one response back
through ASGI ``send()``.
"""

import logging
from contextvars import Token

from waypoint._internal.asgi import Receive, Scope, Send
from waypoint.context import request_var
from waypoint.errors import HTTPError
from waypoint.http.request import Request
from waypoint.http.response import JSONResponse, error_payload
from waypoint.routing.router import Router
from waypoint.server.sender import emit_response

logger = logging.getLogger("waypoint.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    debug: bool = False,
) -> None:
    """Process a single HTTP request through dispatch."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)
    token: Token[Request] = request_var.set(request)

    try:
        result = await router.dispatch(request)
        response = result.response
        logger.debug(
            "%d %s %s (%s)", response.status, request.method, request.path, result.outcome
        )
    except HTTPError as exc:
        logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)
        response = exc.to_response()
    except Exception as exc:
        logger.exception("500 %s %s", request.method, request.path)
        response = internal_error_response(exc, debug=debug)
    finally:
        request_var.reset(token)

    await emit_response(response, send)


def internal_error_response(exc: Exception, *, debug: bool = False) -> JSONResponse:
    """JSON 500 for an unexpected exception.

    In debug mode the exception type and message are included.
    """
    payload: dict[str, str] = error_payload("Internal Server Error")
    if debug:
        payload["error"] = f"{type(exc).__name__}: {exc}"
    return JSONResponse(payload, 500)
