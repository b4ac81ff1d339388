# -*- coding: utf-8 -*-
"""
Locations where a directive can be used in an executable document.
"""

import enum
from typing import Any


class DirectiveLocation(str, enum.Enum):
    """
    Closed set of locations a directive can be applied to.

    Members subclass :py:class:`str` and compare equal to their tag so they
    can be checked against location names coming from a parsed document.

    >>> DirectiveLocation.FIELD == "FIELD"
    True
    """

    QUERY = "QUERY"
    MUTATION = "MUTATION"
    SUBSCRIPTION = "SUBSCRIPTION"
    FIELD = "FIELD"
    FRAGMENT_DEFINITION = "FRAGMENT_DEFINITION"
    FRAGMENT_SPREAD = "FRAGMENT_SPREAD"
    INLINE_FRAGMENT = "INLINE_FRAGMENT"

    def __str__(self) -> str:
        return self.value


DIRECTIVE_LOCATIONS = frozenset(loc.value for loc in DirectiveLocation)


def is_directive_location(value: Any) -> bool:
    """ Check whether a value is a known directive location.

    >>> is_directive_location(DirectiveLocation.QUERY)
    True

    >>> is_directive_location("INLINE_FRAGMENT")
    True

    >>> is_directive_location("FIELD_DEFINITION")
    False
    """
    return isinstance(value, str) and value in DIRECTIVE_LOCATIONS


def get_directive_location(value: Any) -> DirectiveLocation:
    """ Find the :class:`DirectiveLocation` corresponding to a tag.

    Raises:
        ValueError: if the value is not a known location.
    """
    if not is_directive_location(value):
        raise ValueError(
            "Unknown directive location %r, expected one of %s"
            % (value, ", ".join(sorted(DIRECTIVE_LOCATIONS)))
        )
    return DirectiveLocation(str(value))
