# -*- coding: utf-8 -*-
""" Test the built-in @include and @skip directives """

import pytest

from gql_directives.schema import (
    SPECIFIED_DIRECTIVES,
    Boolean,
    Directive,
    DirectiveLocation,
    IncludeDirective,
    NonNullType,
    SkipDirective,
    String,
    is_specified_directive,
)


@pytest.mark.parametrize(
    "directive, name, arg_description",
    [
        (IncludeDirective, "include", "Included when true."),
        (SkipDirective, "skip", "Skipped when true."),
    ],
)
def test_builtin_directive_shape(directive, name, arg_description):
    assert isinstance(directive, Directive)
    assert directive.name == name
    assert set(directive.locations) == {
        DirectiveLocation.FIELD,
        DirectiveLocation.FRAGMENT_SPREAD,
        DirectiveLocation.INLINE_FRAGMENT,
    }
    assert len(directive.args) == 1

    (arg,) = directive.args
    assert arg.name == "if"
    assert isinstance(arg.type, NonNullType)
    assert arg.type.type is Boolean
    assert arg.type == NonNullType(Boolean)
    assert arg.description == arg_description
    assert arg.required
    assert not arg.has_default_value
    assert directive.argument_map["if"] is arg


def test_include_description():
    assert IncludeDirective.description == (
        "Directs the executor to include this field or fragment only when "
        "the `if` argument is true."
    )


def test_skip_description():
    assert SkipDirective.description == (
        "Directs the executor to skip this field or fragment when the `if` "
        "argument is true."
    )


def test_builtin_directives_are_not_query_level():
    for directive in SPECIFIED_DIRECTIVES:
        assert not directive.applies_to(DirectiveLocation.QUERY)
        assert not directive.applies_to(DirectiveLocation.MUTATION)
        assert not directive.applies_to(DirectiveLocation.SUBSCRIPTION)
        assert not directive.applies_to(DirectiveLocation.FRAGMENT_DEFINITION)


def test_builtin_directives_are_immutable():
    with pytest.raises(AttributeError):
        IncludeDirective.name = "exclude"  # type: ignore
    with pytest.raises(AttributeError):
        SkipDirective.locations = ()  # type: ignore
    assert IncludeDirective.name == "include"
    assert len(SkipDirective.locations) == 3


def test_specified_directives():
    assert SPECIFIED_DIRECTIVES == (IncludeDirective, SkipDirective)


def test_is_specified_directive():
    assert is_specified_directive(IncludeDirective)
    assert is_specified_directive(SkipDirective)
    assert not is_specified_directive(
        Directive("custom", [DirectiveLocation.FIELD])
    )
    assert not is_specified_directive("include")


@pytest.mark.parametrize("directive", [IncludeDirective, SkipDirective])
def test_builtin_argument_type_cannot_be_replaced(directive):
    with pytest.raises(AttributeError):
        directive.args[0].type.type = String  # type: ignore
    assert directive.args[0].type.type is Boolean
