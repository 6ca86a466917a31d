"""Declaration emitter: IR declarations -> Reason binding declarations."""

from __future__ import annotations

from . import render
from .encode import CONSTRUCTOR, encode_type
from .errors import InvalidConstructorTargetError
from .ir import (
    UNIT,
    Class,
    ClassDecl,
    Decl,
    ExportsDecl,
    FuncDecl,
    Function,
    ModuleDecl,
    Named,
    Type,
    TypeDecl,
    UnknownDecl,
    VarDecl,
)
from .util import lower_first, normalize_ident


def constructor_type(owner: str, typ: Type) -> Type:
    """Constructor signature of a class.

    The first field named `constructor` is used as declared. Without one,
    the constructor takes unit and returns `Named(owner)`.
    """
    if not isinstance(typ, Class):
        raise InvalidConstructorTargetError(owner, typ)
    for name, t in typ.fields:
        if name == CONSTRUCTOR:
            return t
    return Function((("_", UNIT),), Named(owner))


def resolve_constructor(owner: str, typ: Type) -> str:
    """Encoded constructor type of the class `owner`."""
    return encode_type(constructor_type(owner, typ))


def emit_decl(decl: Decl, module_id: str) -> str:
    """Render one declaration owned by the module `module_id` (normalized)."""
    match decl:
        case VarDecl(name=name, typ=typ) | FuncDecl(name=name, typ=typ):
            return render.variable_declaration(
                normalize_ident(name), module_id, encode_type(typ), False
            )
        case ExportsDecl(typ=typ):
            return render.variable_declaration(module_id, module_id, encode_type(typ), True)
        case ModuleDecl(name=name, body=body):
            inner_id = normalize_ident(name)
            return render.module_declaration(name, [emit_decl(d, inner_id) for d in body])
        case TypeDecl():
            # Fully emitted as precode
            return ""
        case ClassDecl(name=name, typ=typ):
            return render.class_declaration(
                lower_first(name),
                name,
                module_id,
                encode_type(typ),
                resolve_constructor(name, typ),
            )
        case UnknownDecl():
            return render.UNKNOWN_DECL
        case _:
            raise NotImplementedError("Unknown declaration")
