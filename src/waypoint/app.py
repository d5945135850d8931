"""Waypoint application class.

Mutable during setup (route registration, lifespan hooks).
Frozen at runtime when the first ASGI scope arrives.
"""

import logging
import threading
from collections.abc import Callable

from waypoint._internal.asgi import Receive, Scope, Send
from waypoint._internal.invoke import invoke
from waypoint._internal.types import Handler, HandlerRef, Hook
from waypoint.config import AppConfig
from waypoint.errors import ResponseSent
from waypoint.http.methods import HttpMethod
from waypoint.routing.route import Route
from waypoint.routing.router import Router
from waypoint.server.handler import handle_request

logger = logging.getLogger("waypoint.app")


class App:
    """The waypoint application.

    Routes are tested in the order they are registered. Registration is
    only allowed before the app starts serving; the route table is then
    frozen and shared read-only by every request.

    Usage::

        app = App()

        @app.get("/users")
        def list_users():
            send_response({"users": []})

        app.register(HttpMethod.POST, "/users", (UserController, "create"))

    Thread safety:
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the route table, even if several workers call
        ``__call__()`` concurrently on first request.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_router",
        "_shutdown_hooks",
        "_startup_hooks",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._router = Router()
        self._startup_hooks: list[Hook] = []
        self._shutdown_hooks: list[Hook] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Route registration --

    def register(self, method: HttpMethod | str, path: str, handler: HandlerRef) -> Route:
        """Register *handler* for an exact *method* and *path*."""
        self._check_not_frozen()
        return self._router.register(method, path, handler)

    def route(
        self,
        path: str,
        *,
        method: HttpMethod | str = HttpMethod.GET,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: Exact request path. No parameters or wildcards.
            method: HTTP method. Defaults to ``GET``.
        """

        def decorator(func: Handler) -> Handler:
            self.register(method, path, func)
            return func

        return decorator

    def get(self, path: str) -> Callable[[Handler], Handler]:
        return self.route(path, method=HttpMethod.GET)

    def post(self, path: str) -> Callable[[Handler], Handler]:
        return self.route(path, method=HttpMethod.POST)

    def put(self, path: str) -> Callable[[Handler], Handler]:
        return self.route(path, method=HttpMethod.PUT)

    def patch(self, path: str) -> Callable[[Handler], Handler]:
        return self.route(path, method=HttpMethod.PATCH)

    def delete(self, path: str) -> Callable[[Handler], Handler]:
        return self.route(path, method=HttpMethod.DELETE)

    @property
    def router(self) -> Router:
        """The route table, frozen once the app has started."""
        return self._router

    # -- Lifecycle hooks --

    def on_startup(self, func: Hook) -> Hook:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order during ASGI lifespan startup,
        before the server begins accepting HTTP requests.
        """
        self._check_not_frozen()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Hook) -> Hook:
        """Register an async or sync shutdown hook via decorator."""
        self._check_not_frozen()
        self._shutdown_hooks.append(func)
        return func

    # -- Server --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the app and serve it with the development server."""
        from waypoint.server.dev import run_dev_server

        self._ensure_frozen()
        run_dev_server(
            self,
            host or self.config.host,
            port or self.config.port,
            log_level="debug" if self.config.debug else self.config.log_level,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()
        await handle_request(scope, receive, send, router=self._router, debug=self.config.debug)

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup, runs hooks, and reports completion
        or failure back to the server.
        """
        self._ensure_frozen()

        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    await self.startup()
                except ResponseSent:
                    logger.error("Startup hook called send_response outside a request")
                    await send(
                        {
                            "type": "lifespan.startup.failed",
                            "message": "send_response called during startup",
                        }
                    )
                    return
                except Exception as exc:
                    logger.exception("Startup hook failed")
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await self.shutdown()
                await send({"type": "lifespan.shutdown.complete"})
                return

    async def startup(self) -> None:
        """Run startup hooks in registration order."""
        self._ensure_frozen()
        for hook in self._startup_hooks:
            await invoke(hook)

    async def shutdown(self) -> None:
        """Run shutdown hooks in registration order."""
        for hook in self._shutdown_hooks:
            await invoke(hook)

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._router.compile()
            self._frozen = True
            logger.debug("Route table frozen with %d routes", len(self._router))

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and hooks before calling app.run()."
            )
            raise RuntimeError(msg)
