"""bsbind - TypeScript declaration trees to Reason BuckleScript bindings."""

from __future__ import annotations

from .encode import encode_type
from .emit import emit_decl, resolve_constructor
from .errors import (
    InvalidConstructorTargetError as InvalidConstructorTargetError,
    LoadError as LoadError,
    TranslateError as TranslateError,
    UnnameableTypeError as UnnameableTypeError,
)
from .ir import Decl
from .names import type_name
from .precode import precode
from .serialize import decl_from_dict
from .translate import translate

__all__ = [
    "InvalidConstructorTargetError",
    "LoadError",
    "TranslateError",
    "UnnameableTypeError",
    "encode_type",
    "emit_decl",
    "precode",
    "resolve_constructor",
    "translate",
    "translate_dict",
    "type_name",
]


def translate_dict(doc: object, hoist_return_unions: bool = False) -> tuple[str, str] | None:
    """Load a declaration tree from its dict form and translate it."""
    root: Decl = decl_from_dict(doc)
    return translate(root, hoist_return_unions)
