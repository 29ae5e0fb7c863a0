"""Custom exceptions used in the project."""

from typing import Any


class UnsortedReferenceTable(Exception):
    def __init__(self, index: int, previous: str, current: str):
        self.index = index
        self.previous = previous
        self.current = current
        self.message = (
            f"The reference table must be strictly ascending, but the entry "
            f"'{current}' at index {index} does not come after '{previous}'."
        )
        super().__init__(self.message)


class InvalidLookup(Exception):
    def __init__(self, lookup: Any, message: str = ""):
        self.lookup = lookup
        self.message = (
            message
            if message
            else (
                f"The lookup {lookup!r} is not supported. A lookup must either have "
                "a `contains` method or be a callable, taking the candidate code and "
                "returning whether it is valid."
            )
        )
        super().__init__(self.message)
