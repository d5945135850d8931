"""Ordered route registry with first-path-match dispatch.

Routes are registered during setup and frozen into a tuple by
``compile()``. Dispatch scans them in registration order.
"""

from waypoint._internal.invoke import invoke
from waypoint._internal.types import HandlerRef
from waypoint.errors import (
    ConfigurationError,
    HandlerUnresolvable,
    MethodNotAllowed,
    NotFound,
    ResponseSent,
)
from waypoint.http.methods import HttpMethod
from waypoint.http.request import Request
from waypoint.routing.resolve import resolve_handler
from waypoint.routing.route import Dispatch, DispatchOutcome, Route


class Router:
    """Exact-path, exact-method route table.

    Usage::

        router = Router()
        router.register(HttpMethod.GET, "/users", list_users)
        router.compile()
        result = await router.dispatch(request)

    The first route whose path equals the request path decides the
    outcome: if its method differs from the request's, the answer is 405
    even when a later route has the same path and the right method.
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] | tuple[Route, ...] = []
        self._compiled = False

    def register(self, method: HttpMethod | str, path: str, handler: HandlerRef) -> Route:
        """Append a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot register routes after compilation."
            raise RuntimeError(msg)
        if not HttpMethod.is_token(method):
            msg = f"Unknown HTTP method {method!r} for route {path!r}."
            raise ConfigurationError(msg)

        route = Route(method=HttpMethod.from_token(method), path=path, handler=handler)
        self._routes.append(route)  # type: ignore[union-attr]
        return route

    def compile(self) -> None:
        """Freeze the registry. No more routes can be registered."""
        if not self._compiled:
            self._routes = tuple(self._routes)
            self._compiled = True

    @property
    def compiled(self) -> bool:
        return self._compiled

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes in insertion order."""
        return tuple(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    async def dispatch(self, request: Request) -> Dispatch:
        """Run one dispatch pass for *request*.

        Returns a ``Dispatch`` carrying exactly one response. A handler
        that returns without calling ``send_response`` lets the scan
        continue; reaching the end of the table yields 404.

        Exceptions other than ``ResponseSent`` raised by a handler
        propagate to the caller.
        """
        for route in self._routes:
            if route.path != request.path:
                continue

            if route.method != request.method:
                return _reject(MethodNotAllowed(request.method), route)

            handler = resolve_handler(route.handler)
            if handler is None:
                return _reject(HandlerUnresolvable(), route)

            try:
                await invoke(handler)
            except ResponseSent as sent:
                return Dispatch(DispatchOutcome.HANDLED, sent.response, route)

        return _reject(NotFound())


def _reject(
    error: NotFound | MethodNotAllowed | HandlerUnresolvable,
    route: Route | None = None,
) -> Dispatch:
    return Dispatch(error.outcome, error.to_response(), route)
