"""Read-only, case-insensitive request headers.

Wraps the raw ``(name, value)`` byte pairs from the ASGI scope and
decodes lazily on lookup.
"""

from collections.abc import Iterator, Mapping


def _key(name: str) -> bytes:
    return name.lower().encode("latin-1")


class Headers(Mapping[str, str]):
    """Request headers keyed by lower-cased name.

    Lookup returns the first value sent for a name.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        self._raw = raw

    def __getitem__(self, key: str) -> str:
        wanted = _key(key)
        for name, value in self._raw:
            if name.lower() == wanted:
                return value.decode("latin-1")
        raise KeyError(key)

    def __iter__(self) -> Iterator[str]:
        seen: set[str] = set()
        for name, _ in self._raw:
            decoded = name.decode("latin-1").lower()
            if decoded not in seen:
                seen.add(decoded)
                yield decoded

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"Headers({dict(self.items())!r})"
