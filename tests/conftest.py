# -*- coding: utf-8 -*-
""" Global fixtures """

import pytest

from gql_directives.schema import Argument, Boolean, NonNullType


@pytest.fixture
def if_argument():
    return Argument("if", NonNullType(Boolean), description="Some condition.")


@pytest.fixture
def directive_config(if_argument):
    """ Keyword arguments for a valid directive. """
    return dict(
        name="someDirective",
        description="Some directive.",
        locations=["FIELD", "QUERY"],
        args=[if_argument],
    )
