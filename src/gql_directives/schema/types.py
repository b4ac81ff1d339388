# -*- coding: utf-8 -*-

import logging
from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Dict,
    Mapping,
    NamedTuple,
    Optional,
    Sequence,
    Tuple,
    Union,
    cast,
)

from .._utils import Lazy, lazy
from ..exc import (
    MissingLocationsError,
    MissingNameError,
    ScalarParsingError,
    ScalarSerializationError,
)
from ..names import assert_valid_name
from .locations import DirectiveLocation

logger = logging.getLogger(__name__)

_UNSET = object()


class GraphQLType:
    """
    Base type class.

    All types used as argument types should be instances of this class.
    """

    def __eq__(self, lhs: Any) -> bool:
        return self is lhs or (
            isinstance(self, WrappingType)
            and self.__class__ == lhs.__class__
            and self.type == lhs.type
        )

    def __hash__(self) -> int:
        return id(self)

    def as_list(self) -> "ListType":
        """
        Return current type wrapped as a list type.
        """
        return ListType(self)

    def as_non_null(self) -> "NonNullType":
        """
        Return current type wrapped as a non nullable type.
        """
        return NonNullType(self)


class NamedType(GraphQLType):
    """
    Named type base class.

    Attributes:
        name (str): Type name.
    """

    name = NotImplemented  # type: str

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return "%s(%s)" % (self.__class__.__name__, self.name)


class WrappingType(GraphQLType):
    def __init__(self, type_: Lazy[GraphQLType]):
        self._ltype = type_
        self._type = None  # type: Optional[GraphQLType]

    @property
    def type(self) -> GraphQLType:
        if self._type is None:
            self._type = lazy(self._ltype)
        return self._type

    def __hash__(self) -> int:
        return hash((self.__class__, self.type))

    def __getstate__(self) -> Dict[str, Any]:
        # Lazy references are usually lambdas and cannot be pickled.
        return {"_ltype": self.type, "_type": self.type}

    def __repr__(self) -> str:
        return "%s(%r)" % (self.__class__.__name__, self.type)


class NonNullType(WrappingType):
    """
    Non nullable wrapping type.

    A non-null type is a wrapping type which points to another type.

    Non-null types enforce that their values are never null and can ensure
    an error is raised if this ever occurs during a request.

    Args:
        type_: Wrapped type

    Attributes:
        type (GraphQLType): Wrapped type
    """

    def __init__(self, type_: Lazy[GraphQLType]):
        if isinstance(type_, NonNullType):
            raise ValueError("Cannot wrap NonNullType twice")

        super().__init__(type_)

    def __str__(self) -> str:
        return "%s!" % self.type


class ListType(WrappingType):
    """
    List wrapping type.

    A list type is a wrapping type which points to another type.

    Args:
        type_: Wrapped type

    Attributes:
        type (GraphQLType): Wrapped type
    """

    def __str__(self) -> str:
        return "[%s]" % self.type


class ScalarType(NamedType):
    """
    Scalar Type Definition

    The leaf values of any request and input values to arguments are
    Scalars and are defined with a name and a pair of functions used to
    serialize output values and parse input values.

    Args:
        name: Type name

        serialize: Type serializer.

            This function will receive a Python value and must output JSON
            serialisable scalars.

            Raise :class:`~gql_directives.exc.ScalarSerializationError`,
            :py:class:`ValueError` or :py:class:`TypeError` to signify that
            the value cannot be serialized.

        parse: Type de-serializer.

            This function will receive JSON scalars and can outputs any Python
            value.

            Raise :class:`~gql_directives.exc.ScalarParsingError`,
            :py:class:`ValueError` or :py:class:`TypeError` to signify that
            the value cannot be parsed.

        description: Type description

    Attributes:
        name (str): Type name

        description (Optional[str]): Type description
    """

    def __init__(
        self,
        name: str,
        serialize: Callable[[Any], Union[str, int, float, bool, None]],
        parse: Callable[[Any], Any],
        description: Optional[str] = None,
    ):
        self.name = name
        self.description = description
        self._serialize = serialize
        self._parse = parse

    def __reduce__(self) -> Tuple[Any, ...]:
        # Built-in scalars are singletons and are pickled by reference.
        from .scalars import SPECIFIED_SCALAR_TYPES

        if any(self is t for t in SPECIFIED_SCALAR_TYPES):
            return (_specified_scalar, (self.name,))
        return (
            self.__class__,
            (self.name, self._serialize, self._parse, self.description),
        )

    def serialize(self, value: Any) -> Union[str, int, float, bool, None]:
        """
        Transform a Python value in a JSON serializable one.

        Raises:
            ScalarSerializationError:
        """
        try:
            return self._serialize(value)
        except (ValueError, TypeError) as err:
            raise ScalarSerializationError(str(err)) from err

    def parse(self, value: Any) -> Any:
        """
        Transform a GraphQL value in a valid Python value

        Raises:
            ScalarParsingError:
        """
        try:
            return self._parse(value)
        except (ValueError, TypeError) as err:
            raise ScalarParsingError(str(err)) from err


class Argument:
    """
    Argument definition for use in directives.

    Warning:
        As ``None`` is a valid default value, in order to define an argument
        without any default value, the ``default_value`` argument **must** be
        omitted.

    Args:
        name: Argument name

        type_: Argument type (must be input type)

        default_value: Default value

        description: Argument description

    Attributes:
        name (str): Argument name

        description (Optional[str]): Argument description

        has_default_value (bool): ``True`` if default value is set

        default_value (Any):
            Default value if it was set. Accessing this attribute raises an
            :py:class:`AttributeError` if default value wasn't set.

        type (GraphQLType): Value type.

        required (bool):
            Whether this argument is required (non nullable and does not have
            any default value)
    """

    def __init__(
        self,
        name: str,
        type_: Lazy[GraphQLType],
        default_value: Any = _UNSET,
        description: Optional[str] = None,
    ):
        self.name = name
        self.description = description
        self.has_default_value = default_value is not _UNSET
        self._default_value = default_value
        self._ltype = type_
        self._type = None  # type: Optional[GraphQLType]

    @property
    def default_value(self) -> Any:
        if self._default_value is _UNSET:
            raise AttributeError("No default value")
        return self._default_value

    @property
    def type(self) -> GraphQLType:
        if self._type is None:
            self._type = lazy(self._ltype)
        return self._type

    @property
    def required(self) -> bool:
        return (
            isinstance(self.type, NonNullType) and self._default_value is _UNSET
        )

    def _key(self) -> Tuple[Any, ...]:
        return (
            self.name,
            self.type,
            self.description,
            self.has_default_value,
            self._default_value,
        )

    def __eq__(self, rhs: Any) -> bool:
        if not isinstance(rhs, Argument):
            return NotImplemented
        return self is rhs or self._key() == rhs._key()

    def __hash__(self) -> int:
        return hash((self.name, self.type))

    def __getstate__(self) -> Dict[str, Any]:
        state = dict(self.__dict__)
        state["_ltype"] = state["_type"] = self.type
        if self._default_value is _UNSET:
            del state["_default_value"]
        return state

    def __setstate__(self, state: Dict[str, Any]) -> None:
        self.__dict__.update(state)
        self.__dict__.setdefault("_default_value", _UNSET)

    def __str__(self) -> str:
        return "Argument(%s: %s)" % (self.name, self.type)

    def __repr__(self) -> str:
        return "Argument(%s: %s at %d)" % (self.name, self.type, id(self))


class DirectiveConfig(NamedTuple):
    """
    Configuration used to build a :class:`Directive`.

    Attributes:
        name (str): Directive name (required)

        locations (Sequence[DirectiveLocation]):
            Locations the directive can be applied to (required)

        args (Optional[Sequence[Argument]]):
            Argument definitions, defaults to no arguments

        description (Optional[str]): Directive description
    """

    name: str
    locations: Sequence[Union[DirectiveLocation, str]]
    args: Optional[Sequence[Argument]] = None
    description: Optional[str] = None


class Directive:
    """
    Directive definition

    `Directives
    <https://graphql.github.io/graphql-spec/June2018/#sec-Type-System.Directives>`_
    are used by the GraphQL runtime as a way of modifying execution behavior.
    Type system creators will usually not create these directly.

    Directive definitions are immutable: every attribute is read-only once the
    instance has been created and both ``locations`` and ``args`` are copied
    into tuples.

    Warning:
        Only the type of ``locations`` is checked, it can be empty and it can
        contain values which are not members of :class:`DirectiveLocation`.
        Use :func:`~gql_directives.schema.validate_directives` to report
        these cases.

    Args:
        name: Directive name

        locations: Possible locations for that directive

        args: Argument definitions

        description: Directive description

    Attributes:
        name (str): Directive name

        description (Optional[str]): Directive description

        locations (Tuple[DirectiveLocation, ...]):
            Possible locations for that directive

        args (Tuple[gql_directives.schema.Argument, ...]):
            Directive arguments.

        argument_map (Mapping[str, gql_directives.schema.Argument]):
            Directive arguments in indexed form.

    Raises:
        MissingNameError: if ``name`` is missing or empty
        InvalidNameError: if ``name`` is not a valid GraphQL name
        MissingLocationsError: if ``locations`` is not a list or tuple
    """

    __slots__ = ("name", "description", "locations", "args")

    def __init__(
        self,
        name: str,
        locations: Sequence[Union[DirectiveLocation, str]],
        args: Optional[Sequence[Argument]] = None,
        description: Optional[str] = None,
    ):
        if not name:
            raise MissingNameError("Directive must be named.")

        assert_valid_name(name)

        # Strings are sequences too but never a valid list of locations.
        if not isinstance(locations, (list, tuple)):
            raise MissingLocationsError("Must provide locations for directive.")

        args_ = tuple(args) if args is not None else ()

        _set = object.__setattr__
        _set(self, "name", name)
        _set(self, "description", description)
        _set(self, "locations", tuple(locations))
        _set(self, "args", args_)

        logger.debug(
            "Created directive @%s (locations: %s)",
            name,
            ", ".join(str(loc) for loc in self.locations),
        )

    @classmethod
    def from_config(cls, config: DirectiveConfig) -> "Directive":
        """
        Build a directive from a :class:`DirectiveConfig` record.
        """
        return cls(
            config.name,
            config.locations,
            args=config.args,
            description=config.description,
        )

    def to_config(self) -> DirectiveConfig:
        return DirectiveConfig(
            self.name,
            list(self.locations),
            args=list(self.args),
            description=self.description,
        )

    def applies_to(self, location: Union[DirectiveLocation, str]) -> bool:
        """
        Check whether this directive can be used at a given location.

        Args:
            location: Location tag, either a :class:`DirectiveLocation` or
                its string value

        Returns:
            ``True`` if ``location`` is one of the declared locations.
        """
        return location in self.locations

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Directive definitions are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Directive definitions are immutable")

    def __copy__(self) -> "Directive":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "Directive":
        return self

    def __reduce__(self) -> Tuple[Any, ...]:
        return (
            self.__class__,
            (self.name, self.locations, self.args, self.description),
        )

    def _key(self) -> Tuple[Any, ...]:
        return (self.name, self.description, self.locations, self.args)

    def __eq__(self, rhs: Any) -> bool:
        if not isinstance(rhs, Directive):
            return NotImplemented
        return self is rhs or self._key() == rhs._key()

    def __hash__(self) -> int:
        return hash((self.name, self.locations))

    def __str__(self) -> str:
        return "@%s" % self.name

    def __repr__(self) -> str:
        return "Directive(@%s, locations=[%s])" % (
            self.name,
            ", ".join(str(loc) for loc in self.locations),
        )

    @property
    def arguments(self) -> Tuple[Argument, ...]:
        return self.args

    @property
    def argument_map(self) -> Mapping[str, Argument]:
        return MappingProxyType({arg.name: arg for arg in self.args})


def is_input_type(type_: GraphQLType) -> bool:
    """ These types may be used as input types for arguments and directives. """
    return isinstance(unwrap_type(type_), ScalarType)


def unwrap_type(type_: GraphQLType) -> NamedType:
    """ Recursively extract type for a potentially wrapping type like
    :class:`ListType` or :class:`NonNullType`.

    >>> from gql_directives.schema import Int, NonNullType, ListType
    >>> unwrap_type(NonNullType(ListType(NonNullType(Int)))) is Int
    True
    """
    if isinstance(type_, WrappingType):
        return unwrap_type(type_.type)
    return cast(NamedType, type_)


def nullable_type(type_: GraphQLType) -> GraphQLType:
    """ Extract nullable type from a potentially non nulllable one.

    >>> from gql_directives.schema import Int, NonNullType
    >>> nullable_type(NonNullType(Int)) is Int
    True

    >>> nullable_type(Int) is Int
    True
    """
    if isinstance(type_, NonNullType):
        return type_.type
    return type_


def _specified_scalar(name: str) -> ScalarType:
    from .scalars import SPECIFIED_SCALAR_TYPES

    for type_ in SPECIFIED_SCALAR_TYPES:
        if type_.name == name:
            return type_
    raise ValueError("Unknown scalar type %s" % name)
