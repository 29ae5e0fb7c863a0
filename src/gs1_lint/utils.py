"""Utility functions for the project."""

import importlib
import logging

from .exceptions import InvalidLookup
from .lookup import CodeLookup, as_lookup

logger = logging.getLogger(__name__)


def load_lookup(path: str) -> CodeLookup:
    """Load a lookup from an import path.

    Args:
        path:
            The import path, of the form 'package.module:attribute'. The attribute
            may be a lookup object, a lookup class taking no arguments, or a
            function taking the candidate code and returning whether it is valid.

    Returns:
        The lookup.

    Raises:
        InvalidLookup:
            If the path is malformed, cannot be imported, or does not point to a
            lookup.
    """
    module_name, sep, attr_name = path.partition(":")
    if not sep or not module_name or not attr_name:
        raise InvalidLookup(
            lookup=path,
            message=(
                f"The lookup path '{path}' is not of the form "
                "'package.module:attribute'."
            ),
        )

    # Import the module
    try:
        module = importlib.import_module(module_name)
    except ModuleNotFoundError as e:
        raise InvalidLookup(
            lookup=path,
            message=f"The module '{module_name}' could not be imported: {e}.",
        )

    # Get the lookup from the module, following dotted attributes
    obj = module
    try:
        for part in attr_name.split("."):
            obj = getattr(obj, part)
    except AttributeError:
        raise InvalidLookup(
            lookup=path,
            message=f"The module '{module_name}' has no attribute '{attr_name}'.",
        )

    # Lookup classes are instantiated, as calling them with a code would always
    # return a truthy instance
    if isinstance(obj, type):
        try:
            obj = obj()
        except TypeError as e:
            raise InvalidLookup(
                lookup=path,
                message=f"The lookup class '{attr_name}' could not be created: {e}.",
            )

    lookup = as_lookup(obj)
    logger.debug(f"Loaded the lookup {lookup!r} from '{path}'.")
    return lookup
