# -*- coding: utf-8 -*-
""" Test pre-defined scalar types """

import pytest

from gql_directives.exc import ScalarParsingError, ScalarSerializationError
from gql_directives.schema import ID, Boolean, Float, Int, String


@pytest.mark.parametrize(
    "value, expected",
    [(1, 1), (-1, -1), (1.0, 1), ("42", 42), ("1e3", 1000), (True, 1)],
)
def test_Int_serialize(value, expected):
    assert Int.serialize(value) == expected


@pytest.mark.parametrize(
    "value", [0.1, "", "foo", "1.5", None, 2 ** 31, -(2 ** 31) - 1, [1]]
)
def test_Int_serialize_invalid(value):
    with pytest.raises(ScalarSerializationError):
        Int.serialize(value)


def test_Int_bounds():
    assert Int.parse(2 ** 31 - 1) == 2 ** 31 - 1
    assert Int.parse(-(2 ** 31)) == -(2 ** 31)


@pytest.mark.parametrize(
    "value, expected", [(1, 1.0), (-1.5, -1.5), ("0.1", 0.1), ("1e3", 1000.0)]
)
def test_Float_serialize(value, expected):
    assert Float.serialize(value) == expected


@pytest.mark.parametrize("value", ["", None, "foo"])
def test_Float_parse_invalid(value):
    with pytest.raises(ScalarParsingError):
        Float.parse(value)


@pytest.mark.parametrize(
    "value, expected", [("foo", "foo"), (1, "1"), (True, "true")]
)
def test_String_serialize(value, expected):
    assert String.serialize(value) == expected


def test_String_parse_list():
    with pytest.raises(ScalarParsingError):
        String.parse(["foo"])


@pytest.mark.parametrize(
    "value, expected", [(0, False), ("", False), (1, True)]
)
def test_Boolean_serialize(value, expected):
    assert Boolean.serialize(value) is expected


@pytest.mark.parametrize("value, expected", [("foo", "foo"), (42, "42")])
def test_ID_serialize(value, expected):
    assert ID.serialize(value) == expected


@pytest.mark.parametrize("value", [None, True, 1.5])
def test_ID_parse_invalid(value):
    with pytest.raises(ScalarParsingError):
        ID.parse(value)
