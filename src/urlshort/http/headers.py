"""Immutable, case-insensitive request headers.

Implements ``Mapping[str, str]`` over the raw byte pairs of an ASGI
scope. Names and values are decoded once, at construction.
"""

from collections.abc import Iterable, Iterator, Mapping


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive request headers.

    ``headers["Location"]`` returns the first value sent for that name;
    ``get_list`` returns every value in the order received.
    """

    __slots__ = ("_index", "_raw")

    _index: dict[str, list[str]]
    _raw: tuple[tuple[bytes, bytes], ...]

    def __init__(self, raw: Iterable[tuple[bytes, bytes]] = ()) -> None:
        pairs = tuple(raw)
        index: dict[str, list[str]] = {}
        for name, value in pairs:
            index.setdefault(name.decode("latin-1").lower(), []).append(value.decode("latin-1"))
        object.__setattr__(self, "_raw", pairs)
        object.__setattr__(self, "_index", index)

    @classmethod
    def from_strings(cls, headers: Mapping[str, str]) -> "Headers":
        """Build headers from a ``str -> str`` mapping (tests, clients)."""
        return cls((k.encode("latin-1"), v.encode("latin-1")) for k, v in headers.items())

    def __getitem__(self, key: str) -> str:
        return self._index[key.lower()][0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._index

    def __iter__(self) -> Iterator[str]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self) -> str:
        return f"Headers({dict((k, v[0]) for k, v in self._index.items())!r})"

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (empty list when absent)."""
        return list(self._index.get(key.lower(), ()))

    @property
    def raw(self) -> tuple[tuple[bytes, bytes], ...]:
        """The undecoded header pairs, as received."""
        return self._raw
