"""Command-line interface for linting country codes."""

import logging
import sys

import click
from tabulate import tabulate

from .config import LinterConfig
from .exceptions import InvalidLookup
from .iso3166 import get_iso3166_linter
from .utils import load_lookup

logger = logging.getLogger(__package__)


@click.command()
@click.argument("code", nargs=-1)
@click.option(
    "--lookup",
    type=str,
    default="",
    envvar="GS1_LINT_ISO3166_LOOKUP",
    show_default=True,
    help="""Import path of an alternative lookup for the country codes, of the form
    'package.module:attribute'. The attribute can be a lookup object with a `contains`
    method, a lookup class, or a function taking the code and returning whether it is
    valid. If not specified then the built-in list of ISO 3166 "num-3" codes is
    used.""",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    show_default=True,
    help="Whether extra output should be logged.",
)
def lint(code: tuple[str, ...], lookup: str, verbose: bool):
    """Check that each CODE is an ISO 3166 "num-3" country code."""

    # Raise error if no `code` is specified
    if len(code) == 0:
        raise click.UsageError("Please specify at least one country code to lint.")

    if verbose:
        logger.setLevel(logging.DEBUG)

    try:
        lookup_or_none = load_lookup(lookup) if lookup != "" else None
    except InvalidLookup as e:
        raise click.BadParameter(e.message, param_hint="'--lookup'")

    linter = get_iso3166_linter(
        LinterConfig(iso3166_lookup=lookup_or_none, verbose=verbose)
    )

    rows = list()
    num_invalid = 0
    for data in code:
        result = linter(data)
        if not result.ok:
            num_invalid += 1
        rows.append([repr(data), result.error.value, result.markup(data)])

    click.echo(
        tabulate(rows, headers=["Code", "Result", "Highlight"], disable_numparse=True)
    )
    logger.info(f"{len(code) - num_invalid} of {len(code)} country codes are valid.")

    if num_invalid > 0:
        sys.exit(1)
