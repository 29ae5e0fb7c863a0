"""Lookups used by the linters to test membership of a reference set."""

from bisect import bisect_left
from typing import Any, Callable, Iterable, Protocol, runtime_checkable

from .exceptions import InvalidLookup, UnsortedReferenceTable


@runtime_checkable
class CodeLookup(Protocol):
    """A source of truth for the codes accepted by a linter."""

    def contains(self, code: str) -> bool: ...


class SortedTableLookup:
    """Binary search over a static, strictly ascending table of codes.

    Args:
        table:
            The codes to search. Must be strictly ascending.

    Attributes:
        table:
            The codes to search, as an immutable tuple.

    Raises:
        UnsortedReferenceTable:
            If the table is not strictly ascending.
    """

    def __init__(self, table: Iterable[str]):
        self.table = tuple(table)
        for idx in range(1, len(self.table)):
            if self.table[idx - 1] >= self.table[idx]:
                raise UnsortedReferenceTable(
                    index=idx, previous=self.table[idx - 1], current=self.table[idx]
                )

    def contains(self, code: str) -> bool:
        """Check whether a code is in the table.

        Args:
            code:
                The candidate code.

        Returns:
            Whether the code is an exact match for one of the entries.
        """
        idx = bisect_left(self.table, code)
        return idx < len(self.table) and self.table[idx] == code

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and self.contains(code)

    def __len__(self) -> int:
        return len(self.table)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self.table)} codes)"


class FunctionLookup:
    """Adapts a plain function to the `CodeLookup` interface.

    Args:
        fn:
            Function taking the candidate code and returning whether it is valid.
    """

    def __init__(self, fn: Callable[[str], Any]):
        self.fn = fn

    def contains(self, code: str) -> bool:
        return bool(self.fn(code))

    def __repr__(self) -> str:
        name = getattr(self.fn, "__qualname__", repr(self.fn))
        return f"{type(self).__name__}({name})"


def as_lookup(lookup: CodeLookup | Callable[[str], Any]) -> CodeLookup:
    """Convert a lookup or a function into a `CodeLookup`.

    Args:
        lookup:
            An object with a `contains` method, or a function taking the candidate
            code and returning whether it is valid.

    Returns:
        The lookup.

    Raises:
        InvalidLookup:
            If the object is a class, or is neither a lookup nor callable.
    """
    # A class has a `contains` attribute too
    if isinstance(lookup, type):
        raise InvalidLookup(
            lookup=lookup,
            message=(
                f"The lookup {lookup.__name__} is a class. Pass an instance of it "
                "instead."
            ),
        )
    if isinstance(lookup, CodeLookup):
        return lookup
    if callable(lookup):
        return FunctionLookup(lookup)
    raise InvalidLookup(lookup)
