# -*- coding: utf-8 -*-
""" Test validation of directive sets """

import logging

import pytest

from gql_directives.exc import InvalidNameError, SchemaError
from gql_directives.schema import (
    SPECIFIED_DIRECTIVES,
    Argument,
    Boolean,
    Directive,
    DirectiveLocation,
    Int,
    ListType,
    NonNullType,
    ScalarType,
    String,
    validate_directives,
)


def _validation_records(caplog):
    return [
        r
        for r in caplog.records
        if r.name == "gql_directives.schema.validation"
    ]


def test_specified_directives_are_valid():
    assert validate_directives(SPECIFIED_DIRECTIVES)


def test_accepts_custom_directives():
    assert validate_directives(
        list(SPECIFIED_DIRECTIVES)
        + [
            Directive(
                "limit",
                [DirectiveLocation.FIELD],
                args=[
                    Argument("max", NonNullType(Int)),
                    Argument("tags", ListType(NonNullType(String))),
                ],
            )
        ]
    )


def test_rejects_non_directive():
    with pytest.raises(SchemaError) as exc_info:
        validate_directives([SPECIFIED_DIRECTIVES[0], "skip"])
    assert str(exc_info.value) == "Expected Directive but got 'skip'"


def test_rejects_duplicate_directive_names():
    with pytest.raises(SchemaError) as exc_info:
        validate_directives(
            list(SPECIFIED_DIRECTIVES)
            + [Directive("skip", [DirectiveLocation.FIELD])]
        )
    assert str(exc_info.value) == 'Duplicate directive "@skip"'


def test_rejects_non_argument():
    directive = Directive("foo", [DirectiveLocation.FIELD], args=["bar"])
    with pytest.raises(SchemaError) as exc_info:
        validate_directives([directive])
    assert str(exc_info.value) == (
        'Expected Argument in directive "@foo" but got "bar"'
    )


def test_rejects_invalid_argument_name():
    directive = Directive(
        "foo", [DirectiveLocation.FIELD], args=[Argument("1bar", Boolean)]
    )
    with pytest.raises(SchemaError) as exc_info:
        validate_directives([directive])
    assert str(exc_info.value) == (
        'Invalid name "1bar", must match /^[_a-zA-Z][_a-zA-Z0-9]*$/'
    )
    assert isinstance(exc_info.value.__cause__, InvalidNameError)


def test_rejects_duplicate_argument_names():
    directive = Directive(
        "foo",
        [DirectiveLocation.FIELD],
        args=[Argument("bar", Boolean), Argument("bar", Int)],
    )
    with pytest.raises(SchemaError) as exc_info:
        validate_directives([directive])
    assert str(exc_info.value) == 'Duplicate argument "bar" on directive "@foo"'


def test_rejects_non_input_argument_type():
    class NotAType:
        def __str__(self):
            return "NotAType"

    directive = Directive(
        "foo", [DirectiveLocation.FIELD], args=[Argument("bar", NotAType())]
    )
    with pytest.raises(SchemaError) as exc_info:
        validate_directives([directive])
    assert str(exc_info.value) == (
        'Expected input type for argument "bar" on directive "@foo" '
        'but got "NotAType"'
    )


def test_accepts_custom_scalar_argument():
    Custom = ScalarType("Custom", serialize=str, parse=str)
    directive = Directive(
        "foo", [DirectiveLocation.FIELD], args=[Argument("bar", Custom)]
    )
    assert validate_directives([directive])


def test_warns_on_empty_locations(caplog):
    with caplog.at_level(logging.WARNING):
        assert validate_directives([Directive("foo", [])])

    assert [r.getMessage() for r in _validation_records(caplog)] == [
        'Directive "@foo" has no location'
    ]


def test_warns_on_unknown_locations(caplog):
    directive = Directive("foo", ["FIELD", "FIELD_DEFINITION"])
    with caplog.at_level(logging.WARNING):
        assert validate_directives([directive])

    (record,) = _validation_records(caplog)
    assert record.levelno == logging.WARNING
    assert record.getMessage() == (
        "Unknown location 'FIELD_DEFINITION' on directive \"@foo\""
    )
