"""Conversion of IR trees to and from JSON-compatible dicts.

This is the hand-off format of the upstream declaration parser. Every node is
a dict tagged with `_type`; named fields and parameters are `{"name", "typ"}`
pairs:

    {"_type": "Function",
     "params": [{"name": "x", "typ": {"_type": "Primitive", "kind": "number"}}],
     "ret": {"_type": "Primitive", "kind": "unit"}}

Loading is lenient about content and strict about structure: unrecognised
type tags load as the `unknown` primitive and unrecognised declaration tags
as UnknownDecl, but a node that is not a dict or lacks a required key raises
LoadError.
"""

from __future__ import annotations

from .errors import LoadError
from .ir import (
    UNKNOWN,
    Array,
    Class,
    ClassDecl,
    Decl,
    Dict,
    ExportsDecl,
    FuncDecl,
    Function,
    ModuleDecl,
    Named,
    Object,
    Optional,
    Primitive,
    Tuple,
    Type,
    TypeDecl,
    Union,
    UnknownDecl,
    VarDecl,
)

PRIMITIVE_KINDS: frozenset[str] = frozenset(
    {"number", "string", "boolean", "unit", "null", "any", "unknown", "regex"}
)


# ============================================================
# IR -> DICT
# ============================================================


def type_to_dict(obj: Type) -> dict[str, object]:
    """Serialize Type subclasses."""
    if isinstance(obj, Primitive):
        return {"_type": "Primitive", "kind": obj.kind}
    if isinstance(obj, Dict):
        return {"_type": "Dict", "value": type_to_dict(obj.value)}
    if isinstance(obj, Array):
        return {"_type": "Array", "element": type_to_dict(obj.element)}
    if isinstance(obj, Tuple):
        return {"_type": "Tuple", "elements": [type_to_dict(e) for e in obj.elements]}
    if isinstance(obj, Object):
        return {"_type": "Object", "fields": _pairs_to_list(obj.fields)}
    if isinstance(obj, Class):
        return {"_type": "Class", "fields": _pairs_to_list(obj.fields)}
    if isinstance(obj, Function):
        return {
            "_type": "Function",
            "params": _pairs_to_list(obj.params),
            "ret": type_to_dict(obj.ret),
        }
    if isinstance(obj, Named):
        return {"_type": "Named", "name": obj.name}
    if isinstance(obj, Union):
        return {"_type": "Union", "members": [type_to_dict(m) for m in obj.members]}
    if isinstance(obj, Optional):
        return {"_type": "Optional", "inner": type_to_dict(obj.inner)}
    raise NotImplementedError("Unknown type")


def _pairs_to_list(pairs: tuple[tuple[str, Type], ...]) -> list[object]:
    return [{"name": name, "typ": type_to_dict(t)} for name, t in pairs]


def decl_to_dict(obj: Decl) -> dict[str, object]:
    """Serialize Decl subclasses."""
    if isinstance(obj, ModuleDecl):
        return {
            "_type": "ModuleDecl",
            "name": obj.name,
            "body": [decl_to_dict(d) for d in obj.body],
        }
    if isinstance(obj, ExportsDecl):
        return {"_type": "ExportsDecl", "typ": type_to_dict(obj.typ)}
    if isinstance(obj, (VarDecl, FuncDecl, TypeDecl, ClassDecl)):
        return {
            "_type": type(obj).__name__,
            "name": obj.name,
            "typ": type_to_dict(obj.typ),
        }
    return {"_type": "UnknownDecl"}


# ============================================================
# DICT -> IR
# ============================================================


def _sub(path: str, key: str) -> str:
    return key if path == "" else path + "." + key


def _node(obj: object, path: str) -> dict[str, object]:
    if not isinstance(obj, dict):
        raise LoadError("expected an object", path)
    return obj


def _field(node: dict[str, object], key: str, path: str) -> object:
    if key not in node:
        raise LoadError("missing key '" + key + "'", path)
    return node[key]


def _str(node: dict[str, object], key: str, path: str) -> str:
    value = _field(node, key, path)
    if not isinstance(value, str):
        raise LoadError("'" + key + "' must be a string", path)
    return value


def _list(node: dict[str, object], key: str, path: str) -> list[object]:
    value = _field(node, key, path)
    if not isinstance(value, list):
        raise LoadError("'" + key + "' must be a list", path)
    return value


def _type_at(node: dict[str, object], key: str, path: str) -> Type:
    return type_from_dict(_field(node, key, path), _sub(path, key))


def _types(node: dict[str, object], key: str, path: str) -> tuple[Type, ...]:
    base = _sub(path, key)
    return tuple(
        type_from_dict(item, _sub(base, str(i))) for i, item in enumerate(_list(node, key, path))
    )


def _pairs(node: dict[str, object], key: str, path: str) -> tuple[tuple[str, Type], ...]:
    base = _sub(path, key)
    result: list[tuple[str, Type]] = []
    for i, item in enumerate(_list(node, key, path)):
        item_path = _sub(base, str(i))
        pair = _node(item, item_path)
        result.append((_str(pair, "name", item_path), _type_at(pair, "typ", item_path)))
    return tuple(result)


def type_from_dict(obj: object, path: str = "") -> Type:
    """Load a Type from its dict form."""
    node = _node(obj, path)
    tag = node.get("_type")
    if tag == "Primitive":
        kind = _str(node, "kind", path)
        if kind not in PRIMITIVE_KINDS:
            return UNKNOWN
        return Primitive(kind)
    if tag == "Dict":
        return Dict(_type_at(node, "value", path))
    if tag == "Array":
        return Array(_type_at(node, "element", path))
    if tag == "Tuple":
        return Tuple(_types(node, "elements", path))
    if tag == "Object":
        return Object(_pairs(node, "fields", path))
    if tag == "Class":
        return Class(_pairs(node, "fields", path))
    if tag == "Function":
        return Function(_pairs(node, "params", path), _type_at(node, "ret", path))
    if tag == "Named":
        return Named(_str(node, "name", path))
    if tag == "Union":
        members = _types(node, "members", path)
        if not members:
            raise LoadError("union has no members", path)
        return Union(members)
    if tag == "Optional":
        return Optional(_type_at(node, "inner", path))
    return UNKNOWN


_NAMED_DECLS: dict[str, type] = {
    "VarDecl": VarDecl,
    "FuncDecl": FuncDecl,
    "TypeDecl": TypeDecl,
    "ClassDecl": ClassDecl,
}


def decl_from_dict(obj: object, path: str = "") -> Decl:
    """Load a Decl from its dict form."""
    node = _node(obj, path)
    tag = node.get("_type")
    if tag == "ModuleDecl":
        base = _sub(path, "body")
        body = _list(node, "body", path)
        return ModuleDecl(
            _str(node, "name", path),
            tuple(decl_from_dict(d, _sub(base, str(i))) for i, d in enumerate(body)),
        )
    if tag == "ExportsDecl":
        return ExportsDecl(_type_at(node, "typ", path))
    if isinstance(tag, str) and tag in _NAMED_DECLS:
        return _NAMED_DECLS[tag](_str(node, "name", path), _type_at(node, "typ", path))
    return UnknownDecl()
