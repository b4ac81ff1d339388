# -*- coding: utf-8 -*-
""" GraphQL name grammar. """

import re
from typing import Any

from .exc import InvalidNameError

VALID_NAME_RE = re.compile(r"^[_a-zA-Z][_a-zA-Z0-9]*$")


def is_valid_name(name: Any) -> bool:
    """
    >>> is_valid_name('foo_bar')
    True

    >>> is_valid_name('FooBar')
    True

    >>> is_valid_name('__foo_bar')
    True

    >>> is_valid_name('foo-bar')
    False

    >>> is_valid_name('')
    False

    >>> is_valid_name('42')
    False
    """
    return isinstance(name, str) and bool(VALID_NAME_RE.fullmatch(name))


def assert_valid_name(name: Any) -> str:
    """
    Ensure a name is a valid GraphQL name.

    Args:
        name: Candidate name

    Returns:
        The name, unchanged.

    Raises:
        InvalidNameError: if the name doesn't match ``VALID_NAME_RE``.
    """
    if not is_valid_name(name):
        raise InvalidNameError(
            'Invalid name "%s", must match /%s/'
            % (name, VALID_NAME_RE.pattern),
            name,
        )
    return name
