"""Response framing for handlers.

``send_response`` is the only way a handler produces a response. It
frames the payload as a ``JSONResponse`` and raises ``ResponseSent``,
so no handler code after the call runs::

    from waypoint import Controller, get_request


    class UserController(Controller):
        def show(self) -> None:
            user_id = get_request().query.get("id")
            if user_id is None:
                self.send_response({"message": "id is required"}, 400)
            self.send_response({"id": user_id})
"""

from typing import Any, NoReturn

from waypoint.errors import ResponseSent
from waypoint.http.response import JSONResponse


def send_response(payload: Any, status_code: int = 200) -> NoReturn:
    """Frame *payload* as JSON with *status_code* and end the handler.

    Never returns. The router (or the ASGI handler) catches the signal
    and writes the response with the fixed header set.
    """
    raise ResponseSent(JSONResponse(payload, status_code))


class Controller:
    """Base class for grouping related handlers.

    Register methods as ``(UserController, "show")``; the router builds
    a fresh instance per dispatch for plain methods and calls static or
    class methods directly.
    """

    send_response = staticmethod(send_response)
