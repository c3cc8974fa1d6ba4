"""A map whose entries are grouped in nested scopes that are dropped together."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Generic, Hashable, Iterator, List, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ScopedMap(Generic[K, V]):
    """A stack of scopes; lookups see the innermost binding of a key."""

    def __init__(self) -> None:
        self._stack: List[Dict[K, V]] = []

    def __repr__(self) -> str:
        return f"ScopedMap({self._stack!r})"

    def push(self) -> None:
        """Open a new, empty scope."""
        self._stack.append({})

    def pop(self) -> None:
        """Drop the innermost scope, if there is one."""
        if self._stack:
            self._stack.pop()

    @contextmanager
    def scope(self) -> Iterator[ScopedMap[K, V]]:
        """Open a scope for the duration of a with block."""
        self.push()
        try:
            yield self
        finally:
            self.pop()

    def __len__(self) -> int:
        """The number of open scopes."""
        return len(self._stack)

    def insert(self, key: K, val: V) -> None:
        """Bind key to val in the innermost scope."""
        if not self._stack:
            raise IndexError("no open scope to insert into")
        self._stack[-1][key] = val

    def flatten(self) -> Dict[K, V]:
        """All visible bindings, with inner scopes overriding outer ones."""
        result: Dict[K, V] = {}
        for scope in self._stack:
            result.update(scope)
        return result

    def get(self, key: K) -> Optional[V]:
        """The innermost value bound to key, or None."""
        for scope in reversed(self._stack):
            if key in scope:
                return scope[key]
        return None

    def __contains__(self, key: object) -> bool:
        return any(key in scope for scope in self._stack)