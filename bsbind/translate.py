"""Top-level driver: root declaration -> (artifact name, source text)."""

from __future__ import annotations

from .emit import emit_decl
from .ir import Decl, ModuleDecl, TypeDecl
from .precode import precode
from .util import normalize_ident


def translate(
    root: Decl, hoist_return_unions: bool = False
) -> tuple[str, str] | None:
    """Translate a root declaration into one artifact.

    A module yields `(normalized module name, precode + bodies)`. A bare type
    alias yields `("", precode)`. Any other root yields None, which is a
    legitimate outcome and not an error.
    """
    match root:
        case ModuleDecl(name=name, body=body):
            module_id = normalize_ident(name)
            bodies = [emit_decl(d, module_id) for d in body]
            text = precode(root, hoist_return_unions) + "\n" + "\n".join(bodies)
            return (module_id, text)
        case TypeDecl():
            return ("", precode(root, hoist_return_unions) + emit_decl(root, ""))
        case _:
            return None
