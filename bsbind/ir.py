"""bsbind IR - language-neutral model of a foreign module's declarations.

Trees are built upstream (by a declaration parser, or by `serialize.from_dict`)
and consumed read-only by the translator.

Architecture:
    .d.ts -> upstream parser -> [IR] -> precode + emit -> Reason source
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


# ============================================================
# TYPES
#
# All types are frozen (immutable, hashable). Field and member
# sequences are tuples so that equal shapes compare equal.
# ============================================================


@dataclass(frozen=True)
class Type:
    """Base for all types. Abstract."""


@dataclass(frozen=True)
class Primitive(Type):
    """Marker types with a fixed target spelling.

    | Kind    | Name    | Reason           |
    |---------|---------|------------------|
    | number  | number  | float            |
    | string  | string  | string           |
    | boolean | bool    | bool             |
    | unit    | unit    | unit             |
    | null    | null    | Js.null(unit)    |
    | any     | any     | 'any             |
    | unknown | unknown | UNTRANSLATABLE   |
    | regex   | regex   | Js.Re.t          |
    """

    kind: Literal["number", "string", "boolean", "unit", "null", "any", "unknown", "regex"]


@dataclass(frozen=True)
class Dict(Type):
    """String-keyed map of `value`."""

    value: Type


@dataclass(frozen=True)
class Array(Type):
    """Homogeneous array of `element`."""

    element: Type


@dataclass(frozen=True)
class Tuple(Type):
    """Fixed-length heterogeneous sequence."""

    elements: tuple[Type, ...]


@dataclass(frozen=True)
class Object(Type):
    """Anonymous structural record.

    Invariants:
    - field order is declaration order (drives generated layout)
    - field names are unique within one object
    """

    fields: tuple[tuple[str, Type], ...]


@dataclass(frozen=True)
class Class(Type):
    """Same shape as Object; a field literally named `constructor` is the
    constructor signature and must itself be a Function (not checked).
    """

    fields: tuple[tuple[str, Type], ...]


@dataclass(frozen=True)
class Function(Type):
    """Function over named parameters.

    A parameter typed Optional(T) is an optional argument; that is the only
    place Optional is meaningful.
    """

    params: tuple[tuple[str, Type], ...]
    ret: Type


@dataclass(frozen=True)
class Named(Type):
    """Reference to a declared type by identifier."""

    name: str


@dataclass(frozen=True)
class Union(Type):
    """Untagged union of member types.

    Invariants:
    - len(members) >= 1
    - member order defines generated variant order and the union's name
    """

    members: tuple[Type, ...]


@dataclass(frozen=True)
class Optional(Type):
    """Optional function parameter. Has no name of its own."""

    inner: Type


# Singleton primitive types
NUMBER = Primitive("number")
STRING = Primitive("string")
BOOL = Primitive("boolean")
UNIT = Primitive("unit")
NULL = Primitive("null")
ANY = Primitive("any")
UNKNOWN = Primitive("unknown")
REGEX = Primitive("regex")


# ============================================================
# DECLARATIONS
# ============================================================


@dataclass(frozen=True)
class Decl:
    """Base for all declarations. Abstract."""


@dataclass(frozen=True)
class VarDecl(Decl):
    """`declare const name: typ` / `export var name: typ`."""

    name: str
    typ: Type


@dataclass(frozen=True)
class FuncDecl(Decl):
    """`declare function name(...)`. typ is normally a Function."""

    name: str
    typ: Type


@dataclass(frozen=True)
class TypeDecl(Decl):
    """`type name = typ` / `interface name { ... }`."""

    name: str
    typ: Type


@dataclass(frozen=True)
class ClassDecl(Decl):
    """`declare class name { ... }`. typ is always a Class."""

    name: str
    typ: Type


@dataclass(frozen=True)
class ExportsDecl(Decl):
    """`export = value`: the module's default export. Anonymous."""

    typ: Type


@dataclass(frozen=True)
class ModuleDecl(Decl):
    """`declare module "name" { ... }`. Statements are processed in order."""

    name: str
    body: tuple[Decl, ...]


@dataclass(frozen=True)
class UnknownDecl(Decl):
    """Sentinel for input the upstream parser could not classify."""
