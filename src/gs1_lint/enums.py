"""Enums used in the project."""

import enum


class LintError(str, enum.Enum):
    """The outcome of running a linter on a component of an AI value.

    Attributes:
        OK:
            The data passed the linter.
        NOT_ISO3166:
            The data is not an ISO 3166 "num-3" country code.
    """

    OK = "ok"
    NOT_ISO3166 = "not-iso3166"
