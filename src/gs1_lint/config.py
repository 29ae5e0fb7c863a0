"""Configuration and result dataclasses."""

from dataclasses import dataclass
from typing import Any, Callable

from .enums import LintError
from .lookup import CodeLookup


@dataclass(frozen=True)
class LintResult:
    """The result of linting a component of an AI value.

    Attributes:
        error:
            The lint error code, `LintError.OK` if the data is valid.
        err_pos:
            The start position of the bad data. Zero if the data is valid.
        err_len:
            The length of the bad data. Zero if the data is valid.
    """

    error: LintError
    err_pos: int = 0
    err_len: int = 0

    @property
    def ok(self) -> bool:
        return self.error == LintError.OK

    def markup(self, data: str) -> str:
        """Highlight the bad data by surrounding it with asterisks.

        Args:
            data:
                The data that was linted.

        Returns:
            The data, with the bad span wrapped in '*', or the data unchanged if
            it is valid.
        """
        if self.ok:
            return data
        end = self.err_pos + self.err_len
        return f"{data[:self.err_pos]}*{data[self.err_pos:end]}*{data[end:]}"


@dataclass
class LinterConfig:
    """Configuration for the linters.

    Attributes:
        iso3166_lookup:
            The lookup used to check ISO 3166 "num-3" country codes. Either an
            object with a `contains` method or a function taking the candidate
            code and returning whether it is valid. If None then the static table
            of codes shipped with the package is used. Defaults to None.
        verbose:
            Whether to log extra output. Defaults to False.
    """

    iso3166_lookup: CodeLookup | Callable[[str], Any] | None = None
    verbose: bool = False
