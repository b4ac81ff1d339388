# -*- coding: utf-8 -*-
"""
The :mod:`gql_directives.schema` module exposes the classes and functions
used to define directives, the built-in directives and the minimal type
system their arguments are declared with.
"""

# flake8: noqa

from .directives import (
    SPECIFIED_DIRECTIVES,
    IncludeDirective,
    SkipDirective,
    is_specified_directive,
)
from .locations import (
    DIRECTIVE_LOCATIONS,
    DirectiveLocation,
    get_directive_location,
    is_directive_location,
)
from .scalars import ID, SPECIFIED_SCALAR_TYPES, Boolean, Float, Int, String
from .types import (
    Argument,
    Directive,
    DirectiveConfig,
    GraphQLType,
    ListType,
    NamedType,
    NonNullType,
    ScalarType,
    WrappingType,
    is_input_type,
    nullable_type,
    unwrap_type,
)
from .validation import validate_directives
