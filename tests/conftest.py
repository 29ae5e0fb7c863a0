"""Global fixtures for unit tests."""

import logging

import pytest

from gs1_lint.config import LinterConfig
from gs1_lint.country_codes import ISO3166_NUM3_CODES
from gs1_lint.iso3166 import ISO3166Linter


class OnlyNineNineNine:
    """Lookup accepting only the code '999', used to test custom lookups."""

    def contains(self, code: str) -> bool:
        return code == "999"


def accept_danish_and_swedish(code: str) -> bool:
    return code in {"208", "752"}


@pytest.fixture(scope="session")
def country_codes():
    yield ISO3166_NUM3_CODES


@pytest.fixture(scope="session")
def linter():
    yield ISO3166Linter()


@pytest.fixture(scope="session")
def custom_linter():
    yield ISO3166Linter(lookup=OnlyNineNineNine())


@pytest.fixture(scope="session")
def linter_config():
    yield LinterConfig(iso3166_lookup=accept_danish_and_swedish, verbose=True)


@pytest.fixture
def reset_log_levels():
    loggers = [logging.getLogger("gs1_lint"), logging.getLogger("gs1_lint.iso3166")]
    levels = [logger.level for logger in loggers]
    for logger in loggers:
        logger.setLevel(logging.NOTSET)
    yield loggers
    for logger, level in zip(loggers, levels):
        logger.setLevel(level)
