"""Shared type aliases used across waypoint modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler — called with no arguments, sync or async
Handler: TypeAlias = Callable[[], Any]

# What a route may be registered with: a callable, an (owner, attribute)
# pair looked up at dispatch time, or a "module:attribute" import string
HandlerRef: TypeAlias = Handler | tuple[object, str] | str

# Lifespan hook — sync or async, no arguments
Hook: TypeAlias = Callable[[], Any]
