"""
.. include:: ../../README.md
"""

import logging
from importlib.metadata import version

import colorama
from termcolor import colored

from .config import LinterConfig, LintResult  # noqa
from .enums import LintError  # noqa
from .iso3166 import ISO3166Linter, get_iso3166_linter, lint_iso3166  # noqa
from .lookup import CodeLookup, FunctionLookup, SortedTableLookup  # noqa

# Fetches the version of the package as defined in pyproject.toml
__version__ = version("gs1-lint")


# Ensure that termcolor also works on Windows
colorama.init()


# Set up logging
fmt = colored("%(asctime)s [%(levelname)s] <%(name)s>\n↳ ", "cyan") + colored(
    "%(message)s", "yellow"
)
logging.basicConfig(level=logging.INFO, format=fmt)
