"""Handler resolution — turn a route's handler reference into a callable.

Resolution happens at dispatch time, so a route can name a handler that
does not exist yet (or never will). ``resolve_handler`` returns ``None``
in that case and the router answers 500.

Accepted references::

    index                                   # any zero-argument callable
    (UserController, "index")               # class: static/class method,
                                            # or instance method on a fresh instance
    (controller, "index")                   # bound lookup on an instance
    "myapp.controllers:UserController.index"  # import string
"""

import importlib
import inspect
from typing import Any

from waypoint._internal.types import Handler, HandlerRef

_MISSING = object()


def resolve_handler(ref: HandlerRef) -> Handler | None:
    """Return an invocable for *ref*, or ``None`` if it cannot be resolved."""
    if isinstance(ref, str):
        return _resolve_import_string(ref)
    if isinstance(ref, tuple):
        if len(ref) != 2 or not isinstance(ref[1], str):
            return None
        return _resolve_attribute(ref[0], ref[1])
    return ref if callable(ref) else None


def _resolve_import_string(ref: str) -> Handler | None:
    module_path, _, attr_path = ref.partition(":")
    if not module_path or not attr_path:
        return None
    try:
        owner: Any = importlib.import_module(module_path)
    except ImportError:
        return None

    *parents, name = attr_path.split(".")
    for part in parents:
        owner = getattr(owner, part, _MISSING)
        if owner is _MISSING:
            return None
    return _resolve_attribute(owner, name)


def _resolve_attribute(owner: object, name: str) -> Handler | None:
    if isinstance(owner, type):
        raw = inspect.getattr_static(owner, name, _MISSING)
        if raw is _MISSING:
            return None
        if inspect.isfunction(raw):
            # Plain method on a class: bind to a fresh instance per call
            return getattr(owner(), name)
        target = getattr(owner, name)
    else:
        target = getattr(owner, name, _MISSING)
    return target if callable(target) else None
