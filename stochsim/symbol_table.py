"""A keyed table of symbols, some of which may be marked internal."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterator, List, Set, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class SymbolError(LookupError):
    """Base class for symbol table failures."""


class DuplicateSymbolError(SymbolError):
    """Raised when a key that is already present is added again."""


class UnknownSymbolError(SymbolError):
    """Raised when a key that is not present is looked up."""


class SymbolTable(Generic[K, V]):
    """Mapping from keys to values that keeps keys in sorted order.

    Keys may be flagged as internal, which lets callers leave them out of
    listings while still using them in computations.
    """

    def __init__(self) -> None:
        self._table: Dict[K, V] = {}
        self._internal: Set[K] = set()

    def add(self, key: K, value: V, is_internal: bool = False) -> None:
        """Insert a new key; raise DuplicateSymbolError if it already exists."""
        if key in self._table:
            raise DuplicateSymbolError(f"Key already exists: '{key}'")
        self._table[key] = value
        if is_internal:
            self._internal.add(key)

    def keys(self, exclude_internal: bool = False) -> List[K]:
        """Return the keys in sorted order, optionally without internal ones."""
        return [
            key
            for key in sorted(self._table)
            if not (exclude_internal and key in self._internal)
        ]

    def is_internal(self, key: K) -> bool:
        """Tell whether the key was added as internal."""
        return key in self._internal

    def copy(self) -> "SymbolTable[K, V]":
        """Return an independent copy of the table."""
        duplicate: SymbolTable[K, V] = SymbolTable()
        duplicate._table = dict(self._table)
        duplicate._internal = set(self._internal)
        return duplicate

    def __getitem__(self, key: K) -> V:
        try:
            return self._table[key]
        except KeyError:
            raise UnknownSymbolError(f"Key not found: '{key}'") from None

    def __setitem__(self, key: K, value: V) -> None:
        if key not in self._table:
            raise UnknownSymbolError(f"Key not found: '{key}'")
        self._table[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self._table

    def __len__(self) -> int:
        return len(self._table)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        items = ", ".join(f"{key!r}: {self._table[key]!r}" for key in self.keys())
        return f"SymbolTable({{{items}}})"