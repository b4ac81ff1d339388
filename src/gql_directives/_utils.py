# -*- coding: utf-8 -*-
""" Some generic laguage level utilities for internal use. """

from typing import Callable, TypeVar, Union

T = TypeVar("T")

Lazy = Union[T, Callable[[], T]]


def lazy(maybe_callable: Union[T, Callable[[], T]]) -> T:
    """ Calls a value if callable else returns it.

    >>> lazy(42)
    42

    >>> lazy(lambda: 42)
    42
    """
    if callable(maybe_callable):
        return maybe_callable()
    return maybe_callable
