# -*- coding: utf-8 -*-
""" Default directives. """

from typing import Any

from .locations import DirectiveLocation
from .scalars import Boolean
from .types import Argument, Directive, DirectiveConfig, NonNullType

# Used to conditionally include fields or fragments.
IncludeDirective = Directive.from_config(
    DirectiveConfig(
        name="include",
        description=(
            "Directs the executor to include this field or fragment only when "
            "the `if` argument is true."
        ),
        locations=[
            DirectiveLocation.FIELD,
            DirectiveLocation.FRAGMENT_SPREAD,
            DirectiveLocation.INLINE_FRAGMENT,
        ],
        args=[
            Argument(
                "if", NonNullType(Boolean), description="Included when true."
            )
        ],
    )
)

# Used to conditionally skip (exclude) fields or fragments.
SkipDirective = Directive.from_config(
    DirectiveConfig(
        name="skip",
        description=(
            "Directs the executor to skip this field or fragment when the `if` "
            "argument is true."
        ),
        locations=[
            DirectiveLocation.FIELD,
            DirectiveLocation.FRAGMENT_SPREAD,
            DirectiveLocation.INLINE_FRAGMENT,
        ],
        args=[
            Argument(
                "if", NonNullType(Boolean), description="Skipped when true."
            )
        ],
    )
)


# These directives are always available in any compliant GraphQL server.
SPECIFIED_DIRECTIVES = (IncludeDirective, SkipDirective)


def is_specified_directive(directive: Any) -> bool:
    """ Check whether a directive is one of the built-in directives.

    >>> is_specified_directive(SkipDirective)
    True
    """
    return isinstance(directive, Directive) and any(
        directive.name == d.name for d in SPECIFIED_DIRECTIVES
    )
