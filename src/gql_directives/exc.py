# -*- coding: utf-8 -*-
"""This module implements all the exceptions exposed by this library."""


class GraphQLError(Exception):
    """
    Base GraphQL exception from which all other inherit. You should prefer
    using one of its subclasses most of the time.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class SchemaError(GraphQLError):
    """
    Raised when a schema or one of its members is not valid.

    These are definition time errors and should be surfaced before any query
    is served.
    """


class DirectiveDefinitionError(SchemaError):
    """
    Raised when a :class:`~gql_directives.schema.Directive` cannot be built
    from the provided configuration.
    """


class MissingNameError(DirectiveDefinitionError):
    pass


class InvalidNameError(DirectiveDefinitionError):
    """
    Raised when a name doesn't match the GraphQL name grammar.

    Args:
        message: Explanatory message
        name: Offending name

    Attributes:
        message (str): Explanatory message
        name (Any): Offending name
    """

    def __init__(self, message: str, name: object = None):
        super().__init__(message)
        self.name = name


class MissingLocationsError(DirectiveDefinitionError):
    pass


class ScalarSerializationError(GraphQLError):
    pass


class ScalarParsingError(GraphQLError):
    pass
