# -*- coding: utf-8 -*-
""" Validation of a set of directive definitions. """

import logging
from typing import Any, Iterable, Set

from ..exc import InvalidNameError, SchemaError
from ..names import assert_valid_name
from .locations import is_directive_location
from .types import Argument, Directive, is_input_type

logger = logging.getLogger(__name__)


def validate_directives(directives: Iterable[Directive]) -> bool:
    """ Validate a collection of directive definitions meant to be exposed
    together by a schema.

    Directive construction only checks the shape of ``locations``, empty
    location lists and unknown locations are reported as warnings here but
    do not fail validation.

    Args:
        directives: Directive definitions

    Returns:
        bool: Whether or not the directives are valid

    Raises:
        :class:`~gql_directives.exc.SchemaError` if the directives are invalid.
    """
    names = set()  # type: Set[str]

    for directive in directives:
        _assert(
            isinstance(directive, Directive),
            "Expected Directive but got %r" % (directive,),
        )

        _assert(
            directive.name not in names,
            'Duplicate directive "@%s"' % directive.name,
        )
        names.add(directive.name)

        _validate_locations(directive)
        _validate_arguments(directive)

    return True


def _validate_locations(directive: Directive) -> None:
    if not directive.locations:
        logger.warning('Directive "@%s" has no location', directive.name)

    for loc in directive.locations:
        if not is_directive_location(loc):
            logger.warning(
                'Unknown location %r on directive "@%s"', loc, directive.name
            )


def _validate_arguments(directive: Directive) -> None:
    argnames = set()  # type: Set[str]
    for arg in directive.args:

        _assert(
            isinstance(arg, Argument),
            'Expected Argument in directive "@%s" but got "%s"'
            % (directive.name, arg),
        )

        try:
            assert_valid_name(arg.name)
        except InvalidNameError as err:
            raise SchemaError(str(err)) from err

        _assert(
            arg.name not in argnames,
            'Duplicate argument "%s" on directive "@%s"'
            % (arg.name, directive.name),
        )

        _assert(
            is_input_type(arg.type),
            'Expected input type for argument "%s" on directive "@%s" '
            'but got "%s"' % (arg.name, directive.name, arg.type),
        )

        argnames.add(arg.name)


def _assert(predicate: Any, msg: str) -> None:
    """
    >>> _assert(True, 'foo')
    >>> _assert(False, 'foo')
    Traceback (most recent call last):
        ...
    gql_directives.exc.SchemaError: foo
    """
    if not predicate:
        raise SchemaError(msg)
