"""The `iso3166` linter, checking ISO 3166 "num-3" country codes.

The three-digit country codes are defined by ISO 3166-1 ("Codes for the
representation of names of countries and their subdivisions - Part 1: Country
code") as the "num-3" codes.
"""

import logging
from typing import Any, Callable

from .config import LinterConfig, LintResult
from .country_codes import ISO3166_NUM3_CODES
from .enums import LintError
from .lookup import CodeLookup, SortedTableLookup, as_lookup

logger = logging.getLogger(__name__)


class ISO3166Linter:
    """Linter ensuring that the data is an ISO 3166 "num-3" country code.

    The data must be an exact match for one of the codes, so "04" and "0040" are
    both rejected, as is any surrounding whitespace. On failure the whole of the
    data is reported as bad, since a country code has no smaller part that could
    be singled out.

    Args:
        lookup:
            An alternative source of valid codes, either an object with a
            `contains` method or a function taking the candidate code and
            returning whether it is valid. It replaces the built-in table
            entirely. If None then a binary search over the codes in
            `ISO3166_NUM3_CODES` is used. Defaults to None.

    Attributes:
        lookup:
            The lookup used to check the codes.
    """

    def __init__(self, lookup: CodeLookup | Callable[[str], Any] | None = None):
        if lookup is None:
            self.lookup: CodeLookup = _DEFAULT_LOOKUP
        else:
            self.lookup = as_lookup(lookup)
            logger.debug(f"Using the custom ISO 3166 lookup {self.lookup!r}.")

    def __call__(self, data: str) -> LintResult:
        """Lint the data.

        Args:
            data:
                The data to be linted.

        Returns:
            `LintError.OK` if the data is a country code, otherwise
            `LintError.NOT_ISO3166` with the position and length of the bad data.

        Raises:
            TypeError:
                If the data is not a string.
        """
        if not isinstance(data, str):
            raise TypeError(
                f"The data to be linted must be a string, not {type(data).__name__}."
            )

        if self.lookup.contains(data):
            return LintResult(error=LintError.OK)

        return LintResult(error=LintError.NOT_ISO3166, err_pos=0, err_len=len(data))


def get_iso3166_linter(config: LinterConfig) -> ISO3166Linter:
    """Build an ISO 3166 linter from a configuration.

    Args:
        config:
            The linter configuration.

    Returns:
        The linter.
    """
    if config.verbose:
        logger.setLevel(logging.DEBUG)
    return ISO3166Linter(lookup=config.iso3166_lookup)


def lint_iso3166(data: str) -> LintResult:
    """Lint the data with the built-in table of ISO 3166 "num-3" country codes.

    Args:
        data:
            The data to be linted.

    Returns:
        The lint result.
    """
    return _DEFAULT_LINTER(data)


_DEFAULT_LOOKUP = SortedTableLookup(ISO3166_NUM3_CODES)
_DEFAULT_LINTER = ISO3166Linter()
