"""Reason/BuckleScript source templates.

Every function takes already-encoded type text and returns source text.
Nothing here inspects the IR; layout decisions live here and nowhere else.
"""

from __future__ import annotations

INDENT = "  "
METHOD_ATTR = "[@bs.meth]"
OPTIONAL_MARKER = "=?"
UNKNOWN_DECL = "/* unknown declaration */"


class Emitter:
    """Line accumulator with indentation tracking."""

    def __init__(self, indent_str: str = INDENT) -> None:
        self.indent: int = 0
        self.lines: list[str] = []
        self._indent_str = indent_str

    def line(self, text: str = "") -> None:
        """Emit a line with current indentation."""
        if text:
            self.lines.append(self._indent_str * self.indent + text)
        else:
            self.lines.append("")

    def block(self, text: str) -> None:
        """Emit multi-line text, re-indenting each line."""
        for ln in text.split("\n"):
            self.line(ln)

    def output(self) -> str:
        """Return the accumulated output as a string."""
        return "\n".join(self.lines)


# ============================================================
# TYPES
# ============================================================


def object_type(fields: list[tuple[str, str]]) -> str:
    """`{. "a": float, "b": string}`."""
    if not fields:
        return "{.}"
    parts = ['"' + name + '": ' + typ for name, typ in fields]
    return "{. " + ", ".join(parts) + "}"


def tuple_type(members: list[str]) -> str:
    return "(" + ", ".join(members) + ")"


def function_type(params: list[tuple[str, str]], has_optional: bool, ret: str) -> str:
    """Function type.

    Without optional parameters the positional form is used and parameter
    names are dropped. With any optional parameter every argument becomes
    labeled and a trailing `unit` closes the application.
    """
    if has_optional:
        parts = ["~" + name + ": " + typ for name, typ in params]
        parts.append("unit")
        return "(" + ", ".join(parts) + ") => " + ret
    if not params:
        return "unit => " + ret
    return "(" + ", ".join(typ for _, typ in params) + ") => " + ret


def method_type(func: str) -> str:
    """Mark a function-typed field as a JS method (called with `this`)."""
    return METHOD_ATTR + " (" + func + ")"


def optional_type(inner: str) -> str:
    return inner + OPTIONAL_MARKER


# ============================================================
# DECLARATIONS
# ============================================================


def alias_declaration(name: str, typ: str) -> str:
    return "type " + name + " = " + typ + ";"


def variant_declaration(name: str, variants: list[tuple[str, str]]) -> str:
    """Tagged choice; each variant carries one payload."""
    e = Emitter()
    e.line("type " + name + " =")
    e.indent += 1
    for tag, payload in variants:
        e.line("| " + tag + "(" + payload + ")")
    e.indent -= 1
    e.lines[-1] += ";"
    return e.output()


def variable_declaration(name: str, module_id: str, typ: str, is_default_export: bool) -> str:
    if is_default_export:
        return "[@bs.module] external " + name + " : " + typ + ' = "' + name + '";'
    return (
        '[@bs.module "' + module_id + '"] external ' + name + " : " + typ + ' = "' + name + '";'
    )


def module_declaration(name: str, children: list[str]) -> str:
    e = Emitter()
    e.line("module " + name + " = {")
    e.indent += 1
    for child in children:
        e.block(child)
    e.indent -= 1
    e.line("};")
    return e.output()


def class_declaration(
    name: str, exported_name: str, module_id: str, class_type: str, ctor_type: str
) -> str:
    """Structural type for instances plus a `new`-binding for the constructor."""
    e = Emitter()
    e.line(alias_declaration(name, class_type))
    e.line(
        '[@bs.new] [@bs.module "'
        + module_id
        + '"] external make_'
        + name
        + " : "
        + ctor_type
        + ' = "'
        + exported_name
        + '";'
    )
    return e.output()
