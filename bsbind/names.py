"""Deterministic type names derived from type shape.

One name serves two purposes: it is the identifier of a hoisted union alias
and the reference emitted wherever that union is used, so both sides always
agree.

| Shape          | Name                              |
|----------------|-----------------------------------|
| Primitive      | number, string, bool, unit, ...   |
| Dict(t)        | dict_<t>                          |
| Array(t)       | array_<t>                         |
| Tuple(ts)      | tuple_of_<t1>_<t2>...             |
| Object         | object                            |
| Function       | func                              |
| Named(s)       | s with first letter lowercased    |
| Union(ts)      | <t1>_or_<t2>...                   |
| Optional       | "" (never named on its own)       |
| Class          | UnnameableTypeError               |
"""

from __future__ import annotations

from .errors import UnnameableTypeError
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
from .util import lower_first

_PRIMITIVE_NAMES: dict[str, str] = {
    "number": "number",
    "string": "string",
    "boolean": "bool",
    "unit": "unit",
    "null": "null",
    "any": "any",
    "unknown": "unknown",
    "regex": "regex",
}


def type_name(typ: Type) -> str:
    """Return the structural name of `typ`."""
    match typ:
        case Primitive(kind=kind):
            return _PRIMITIVE_NAMES[kind]
        case Dict(value=value):
            return "dict_" + type_name(value)
        case Array(element=element):
            return "array_" + type_name(element)
        case Tuple(elements=elements):
            return "tuple_of_" + "_".join(type_name(e) for e in elements)
        case Object():
            return "object"
        case Function():
            return "func"
        case Named(name=name):
            return lower_first(name)
        case Union(members=members):
            return "_or_".join(type_name(m) for m in members)
        case Optional():
            return ""
        case Class():
            raise UnnameableTypeError(typ)
        case _:
            raise NotImplementedError("Unknown type")
