"""Route and Dispatch frozen dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from waypoint._internal.types import HandlerRef
from waypoint.http.methods import HttpMethod

if TYPE_CHECKING:
    from waypoint.http.response import JSONResponse


class DispatchOutcome(StrEnum):
    """How a dispatch pass ended."""

    HANDLED = "handled"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    NOT_FOUND = "not_found"
    HANDLER_MISSING = "handler_missing"


@dataclass(frozen=True, slots=True)
class Route:
    """A registered (method, path, handler) association.

    ``path`` is compared verbatim against the request path.
    """

    method: HttpMethod
    path: str
    handler: HandlerRef

    @property
    def handler_name(self) -> str:
        """Human-readable handler reference, for listings and logs."""
        ref = self.handler
        if isinstance(ref, str):
            return ref
        if isinstance(ref, tuple):
            owner, attr = ref
            owner_name = owner.__name__ if isinstance(owner, type) else type(owner).__name__
            return f"{owner_name}.{attr}"
        return getattr(ref, "__qualname__", None) or repr(ref)


@dataclass(frozen=True, slots=True)
class Dispatch:
    """Result of one dispatch pass: exactly one response."""

    outcome: DispatchOutcome
    response: JSONResponse
    route: Route | None = None
