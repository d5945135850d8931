"""Tests for waypoint.routing.route — Route and Dispatch records."""

import pytest

from waypoint.controller import Controller
from waypoint.http.methods import HttpMethod
from waypoint.http.response import JSONResponse
from waypoint.routing.route import Dispatch, DispatchOutcome, Route


def _handler() -> None:
    pass


class UserController(Controller):
    def index(self) -> None:
        pass


class TestRoute:
    def test_fields(self) -> None:
        route = Route(method=HttpMethod.GET, path="/users", handler=_handler)
        assert route.method is HttpMethod.GET
        assert route.path == "/users"
        assert route.handler is _handler

    def test_frozen(self) -> None:
        route = Route(method=HttpMethod.GET, path="/users", handler=_handler)
        with pytest.raises(AttributeError):
            route.path = "/other"  # type: ignore[misc]

    def test_equality_by_value(self) -> None:
        a = Route(HttpMethod.GET, "/users", _handler)
        b = Route(HttpMethod.GET, "/users", _handler)
        assert a == b


class TestHandlerName:
    def test_function(self) -> None:
        assert Route(HttpMethod.GET, "/", _handler).handler_name == "_handler"

    def test_class_pair(self) -> None:
        route = Route(HttpMethod.GET, "/", (UserController, "index"))
        assert route.handler_name == "UserController.index"

    def test_instance_pair(self) -> None:
        route = Route(HttpMethod.GET, "/", (UserController(), "index"))
        assert route.handler_name == "UserController.index"

    def test_import_string(self) -> None:
        route = Route(HttpMethod.GET, "/", "myapp.users:UserController.index")
        assert route.handler_name == "myapp.users:UserController.index"


class TestDispatch:
    def test_route_optional(self) -> None:
        result = Dispatch(DispatchOutcome.NOT_FOUND, JSONResponse({"message": "Not Found"}, 404))
        assert result.route is None

    def test_outcomes(self) -> None:
        assert {o.value for o in DispatchOutcome} == {
            "handled",
            "method_not_allowed",
            "not_found",
            "handler_missing",
        }
