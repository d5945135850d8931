"""Waypoint — exact-path request dispatch for JSON web backends.

Matches a request to the first registered route with the same path,
checks the method, and invokes the handler. Every response is JSON with
the same fixed header set.

Basic usage::

    from waypoint import App, HttpMethod, send_response

    app = App()

    @app.get("/users")
    def list_users():
        send_response({"users": []})

    app.register(HttpMethod.POST, "/users", "myapp.users:UserController.create")

    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "Controller",
    "Dispatch",
    "DispatchOutcome",
    "HTTPError",
    "HandlerUnresolvable",
    "HttpMethod",
    "JSONResponse",
    "MethodNotAllowed",
    "NotFound",
    "Request",
    "ResponseSent",
    "Route",
    "Router",
    "WaypointError",
    "get_request",
    "send_response",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    if name == "App":
        from waypoint.app import App

        return App

    if name == "AppConfig":
        from waypoint.config import AppConfig

        return AppConfig

    if name == "HttpMethod":
        from waypoint.http.methods import HttpMethod

        return HttpMethod

    if name == "Request":
        from waypoint.http.request import Request

        return Request

    if name == "JSONResponse":
        from waypoint.http.response import JSONResponse

        return JSONResponse

    if name in ("Controller", "send_response"):
        from waypoint import controller as _controller

        return getattr(_controller, name)

    if name in ("Dispatch", "DispatchOutcome", "Route"):
        from waypoint.routing import route as _route

        return getattr(_route, name)

    if name == "Router":
        from waypoint.routing.router import Router

        return Router

    if name == "get_request":
        from waypoint.context import get_request

        return get_request

    if name in (
        "ConfigurationError",
        "HTTPError",
        "HandlerUnresolvable",
        "MethodNotAllowed",
        "NotFound",
        "ResponseSent",
        "WaypointError",
    ):
        from waypoint import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
