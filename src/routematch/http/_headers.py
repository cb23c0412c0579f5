"""Immutable, case-insensitive, multi-valued HTTP headers.

Implements ``Mapping[str, str]`` plus ``get_list`` (the HeaderLookup
protocol). Names are folded to lower case on construction.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence


class Headers(Mapping[str, str]):
    """Immutable, case-insensitive HTTP headers.

    Accepts a mapping (``{"Accept": "text/html"}`` or
    ``{"Via": ["a", "b"]}``) or an iterable of ``(name, value)`` pairs.

    ``__getitem__`` returns the first value for a name.
    ``get_list`` returns all of them, in arrival order.
    """

    __slots__ = ("_values",)

    _values: dict[str, tuple[str, ...]]

    def __init__(
        self,
        items: Mapping[str, str | Sequence[str]] | Iterable[tuple[str, str]] = (),
    ) -> None:
        if isinstance(items, Headers):
            object.__setattr__(self, "_values", dict(items._values))
            return
        collected: dict[str, list[str]] = {}
        pairs = _flatten(items) if isinstance(items, Mapping) else items
        for name, value in pairs:
            collected.setdefault(name.lower(), []).append(value)
        object.__setattr__(
            self, "_values", {k: tuple(v) for k, v in collected.items()}
        )

    def __setattr__(self, name: str, value: object) -> None:
        msg = "Headers is immutable"
        raise AttributeError(msg)

    def __getitem__(self, key: str) -> str:
        values = self._values.get(key.lower())
        if not values:
            raise KeyError(key)
        return values[0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {list(v)!r}" for k, v in self._values.items())
        return f"Headers({{{items}}})"

    def get_list(self, key: str) -> list[str]:
        """Return all values for *key* (empty if the header is absent)."""
        return list(self._values.get(key.lower(), ()))


def _flatten(mapping: Mapping[str, str | Sequence[str]]) -> Iterator[tuple[str, str]]:
    for name, value in mapping.items():
        if isinstance(value, str):
            yield name, value
        else:
            for v in value:
                yield name, v
