"""Type encoder: IR type -> Reason type syntax.

Unions are never spelled out inline. They are referenced by their
structural name and defined once by the precode generator.
"""

from __future__ import annotations

from . import render
from .ir import (
    Array,
    Class,
    Dict,
    Function,
    Named,
    Object,
    Optional,
    Primitive,
    Tuple,
    Type,
    Union,
)
from .names import type_name
from .util import lower_first

UNTRANSLATABLE = "UNTRANSLATABLE"

_PRIMITIVE_TYPES: dict[str, str] = {
    "number": "float",
    "string": "string",
    "boolean": "bool",
    "unit": "unit",
    "null": "Js.null(unit)",
    "regex": "Js.Re.t",
    "any": "'any",
    "unknown": UNTRANSLATABLE,
}

CONSTRUCTOR = "constructor"


def encode_type(typ: Type) -> str:
    """Render `typ` as Reason type syntax."""
    match typ:
        case Primitive(kind=kind):
            return _PRIMITIVE_TYPES[kind]
        case Dict(value=value):
            return "Js.Dict.t(" + encode_type(value) + ")"
        case Array(element=element):
            return "array(" + encode_type(element) + ")"
        case Tuple(elements=elements):
            return render.tuple_type([encode_type(e) for e in elements])
        case Object(fields=fields):
            return render.object_type([(name, encode_type(t)) for name, t in fields])
        case Function(params=params, ret=ret):
            return render.function_type(
                [(name, encode_type(t)) for name, t in params],
                has_optional_param(typ),
                encode_type(ret),
            )
        case Class(fields=fields):
            return _encode_class(fields)
        case Named(name=name):
            return lower_first(name)
        case Union():
            return type_name(typ)
        case Optional(inner=inner):
            return render.optional_type(encode_type(inner))
        case _:
            raise NotImplementedError("Unknown type")


def has_optional_param(func: Function) -> bool:
    """True if any parameter is Optional-typed."""
    return any(isinstance(t, Optional) for _, t in func.params)


def _encode_class(fields: tuple[tuple[str, Type], ...]) -> str:
    # The constructor belongs to the class value, not to its instances
    parts: list[tuple[str, str]] = []
    for name, t in fields:
        if name == CONSTRUCTOR:
            continue
        if isinstance(t, Function):
            parts.append((name, render.method_type(encode_type(t))))
        else:
            parts.append((name, encode_type(t)))
    return render.object_type(parts)
