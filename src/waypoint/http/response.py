"""JSON HTTP response.

Every response waypoint emits is a ``JSONResponse``: a payload, a
status, and the same fixed header set.
"""

from __future__ import annotations

import json as json_module
from dataclasses import dataclass
from typing import Any

CONTENT_TYPE_JSON = "application/json; charset=UTF-8"

# Emitted on every response, in this order. Not configurable.
FIXED_HEADERS: tuple[tuple[str, str], ...] = (
    ("Access-Control-Allow-Origin", "*"),
    ("Content-Type", CONTENT_TYPE_JSON),
    ("Cache-Control", "no-cache, must-revalidate"),
    ("Expires", "Mon, 26 Jul 1997 05:00:00 GMT"),
    ("Pragma", "no-cache"),
)


@dataclass(frozen=True, slots=True)
class JSONResponse:
    """A framed JSON response.

    The payload must be JSON-serializable. Keys keep the order the
    caller built them in; the body is pretty-printed.
    """

    payload: Any = None
    status: int = 200

    @property
    def headers(self) -> tuple[tuple[str, str], ...]:
        return FIXED_HEADERS

    @property
    def body(self) -> bytes:
        """Serialized payload as UTF-8 bytes."""
        return json_module.dumps(self.payload, indent=4, ensure_ascii=False).encode("utf-8")


def error_payload(message: str) -> dict[str, str]:
    """The body shape shared by every error response."""
    return {"message": message}
