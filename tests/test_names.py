"""Tests for structural type naming."""

import pytest

from bsbind.errors import UnnameableTypeError
from bsbind.ir import (
    ANY,
    BOOL,
    NULL,
    NUMBER,
    REGEX,
    STRING,
    UNIT,
    UNKNOWN,
    Array,
    Class,
    Dict,
    Function,
    Named,
    Object,
    Optional,
    Tuple,
    Union,
)
from bsbind.names import type_name


@pytest.mark.parametrize(
    "typ,expected",
    [
        (NUMBER, "number"),
        (STRING, "string"),
        (BOOL, "bool"),
        (UNIT, "unit"),
        (NULL, "null"),
        (ANY, "any"),
        (UNKNOWN, "unknown"),
        (REGEX, "regex"),
    ],
)
def test_primitive_names(typ, expected):
    assert type_name(typ) == expected


def test_containers():
    assert type_name(Dict(NUMBER)) == "dict_number"
    assert type_name(Array(STRING)) == "array_string"
    assert type_name(Array(Dict(BOOL))) == "array_dict_bool"
    assert type_name(Tuple((NUMBER, STRING, NULL))) == "tuple_of_number_string_null"


def test_fixed_names_ignore_contents():
    assert type_name(Object((("a", NUMBER),))) == "object"
    assert type_name(Object(())) == "object"
    assert type_name(Function((("x", STRING),), NUMBER)) == "func"


def test_named_lowercases_first_letter_only():
    assert type_name(Named("HTMLElement")) == "hTMLElement"
    assert type_name(Named("buffer")) == "buffer"


def test_union_joins_members_in_order():
    assert type_name(Union((NUMBER, STRING))) == "number_or_string"
    assert type_name(Union((STRING, NUMBER))) == "string_or_number"
    assert type_name(Union((Named("Foo"), Array(NUMBER), NULL))) == "foo_or_array_number_or_null"


def test_optional_has_no_name():
    assert type_name(Optional(NUMBER)) == ""


def test_name_is_pure_function_of_shape():
    a = Union((Tuple((NUMBER, Named("Bar"))), Dict(Array(STRING))))
    b = Union((Tuple((NUMBER, Named("Bar"))), Dict(Array(STRING))))
    assert a == b
    assert type_name(a) == type_name(b) == type_name(a)


def test_class_is_unnameable():
    with pytest.raises(UnnameableTypeError):
        type_name(Class((("x", NUMBER),)))
    with pytest.raises(UnnameableTypeError):
        type_name(Class(()))


def test_class_nested_in_union_is_unnameable():
    with pytest.raises(UnnameableTypeError):
        type_name(Union((NUMBER, Class(()))))
