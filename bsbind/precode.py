"""Precode generator: auxiliary declarations hoisted ahead of the bodies.

Every union reached during traversal becomes one variant type named by
`type_name`, so that the encoder can refer to it by that name. Type aliases
contribute their own `type` declaration ahead of anything nested in them.

Function return types are not traversed unless `hoist_return_unions` is set:
a union that only appears as a return type is referenced but never declared.
"""

from __future__ import annotations

from . import render
from .encode import encode_type
from .ir import (
    Array,
    Class,
    ClassDecl,
    Decl,
    Dict,
    ExportsDecl,
    FuncDecl,
    Function,
    ModuleDecl,
    Object,
    Optional,
    Type,
    TypeDecl,
    Union,
    UnknownDecl,
    VarDecl,
)
from .names import type_name
from .util import dedupe, lower_first, upper_first


def union_declaration(union: Union) -> str:
    """`type number_or_string = | Number(float) | String(string);`."""
    variants = [(upper_first(type_name(m)), encode_type(m)) for m in union.members]
    return render.variant_declaration(type_name(union), variants)


def type_precode(typ: Type, hoist_return_unions: bool = False) -> list[str]:
    """Hoisted declarations needed by `typ`, in traversal order."""
    out: list[str] = []
    _collect_type(typ, hoist_return_unions, out)
    return out


def _collect_type(typ: Type, hoist_returns: bool, out: list[str]) -> None:
    match typ:
        case Union():
            out.append(union_declaration(typ))
        case Function(params=params, ret=ret):
            for _, t in params:
                _collect_type(t, hoist_returns, out)
            if hoist_returns:
                _collect_type(ret, hoist_returns, out)
        case Object(fields=fields) | Class(fields=fields):
            for _, t in fields:
                _collect_type(t, hoist_returns, out)
        case Optional(inner=inner):
            _collect_type(inner, hoist_returns, out)
        case Array(element=element):
            _collect_type(element, hoist_returns, out)
        case Dict(value=value):
            _collect_type(value, hoist_returns, out)
        case _:
            pass


def decl_precode(decl: Decl, hoist_return_unions: bool = False) -> list[str]:
    """Hoisted declarations for `decl` and everything nested in it, in order."""
    out: list[str] = []
    _collect_decl(decl, hoist_return_unions, out)
    return out


def _collect_decl(decl: Decl, hoist_returns: bool, out: list[str]) -> None:
    match decl:
        case TypeDecl(name=name, typ=typ):
            out.append(render.alias_declaration(lower_first(name), encode_type(typ)))
            _collect_type(typ, hoist_returns, out)
        case VarDecl(typ=typ) | FuncDecl(typ=typ) | ClassDecl(typ=typ) | ExportsDecl(typ=typ):
            _collect_type(typ, hoist_returns, out)
        case ModuleDecl(body=body):
            for stmt in body:
                _collect_decl(stmt, hoist_returns, out)
        case UnknownDecl():
            pass
        case _:
            raise NotImplementedError("Unknown declaration")


def precode(decl: Decl, hoist_return_unions: bool = False) -> str:
    """Deduplicated precode block for `decl`; first occurrence wins."""
    return "\n".join(dedupe(decl_precode(decl, hoist_return_unions)))
