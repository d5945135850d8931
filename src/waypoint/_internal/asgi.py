"""ASGI type aliases.

Raw ``Scope`` / ``Receive`` / ``Send`` shapes as defined by ASGI 3.0.
Only the server package and the test client touch these directly.
"""

from collections.abc import Awaitable, Callable, MutableMapping
from typing import Any, TypeAlias

Scope: TypeAlias = MutableMapping[str, Any]
Message: TypeAlias = MutableMapping[str, Any]
Receive: TypeAlias = Callable[[], Awaitable[Message]]
Send: TypeAlias = Callable[[Message], Awaitable[None]]
