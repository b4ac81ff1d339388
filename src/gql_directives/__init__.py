# -*- coding: utf-8 -*-
"""
gql_directives

Directive definitions for GraphQL schemas: the closed set of directive
locations, an immutable :class:`~gql_directives.schema.Directive` value which
validates its configuration on construction and the ``@include`` / ``@skip``
directives every schema exposes.
"""

from .version import __version__  # isort:skip

from . import exc, names, schema  # noqa: F401
from .schema import (
    SPECIFIED_DIRECTIVES,
    Directive,
    DirectiveConfig,
    DirectiveLocation,
    IncludeDirective,
    SkipDirective,
)


__all__ = (
    "__version__",
    "Directive",
    "DirectiveConfig",
    "DirectiveLocation",
    "IncludeDirective",
    "SkipDirective",
    "SPECIFIED_DIRECTIVES",
)
