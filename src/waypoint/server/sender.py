"""ASGI response sending — translates a JSONResponse into ASGI messages."""

from waypoint._internal.asgi import Send
from waypoint.http.response import JSONResponse


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


async def emit_response(response: JSONResponse, send: Send) -> None:
    """Send *response* as one ``http.response.start`` and one body message.

    The status goes out first, then the fixed header set, then the body.
    """
    body = response.body if _body_allowed(response.status) else b""

    raw_headers = [
        (name.lower().encode("latin-1"), value.encode("latin-1"))
        for name, value in response.headers
    ]
    raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": body,
        }
    )
