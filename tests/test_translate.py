"""Top-level translation tests.

Golden cases live in translate/*.tests files. Format:

    === test name
    { JSON declaration tree }
    ---
    name: <artifact name>
    <expected source text>
    ---

An expected section reading `none` means no artifact is produced.
"""

import json
from pathlib import Path

import pytest

from bsbind import translate, translate_dict
from bsbind.errors import UnnameableTypeError
from bsbind.ir import (
    BOOL,
    NULL,
    NUMBER,
    STRING,
    UNIT,
    Class,
    ClassDecl,
    ExportsDecl,
    FuncDecl,
    Function,
    ModuleDecl,
    TypeDecl,
    Union,
    UnknownDecl,
    VarDecl,
)

TRANSLATE_DIR = Path(__file__).parent / "translate"


def parse_translate_file(path: Path) -> list[tuple[str, str, str]]:
    """Parse .tests file into (name, input, expected) tuples."""
    lines = path.read_text().split("\n")
    result: list[tuple[str, str, str]] = []
    i = 0
    while i < len(lines):
        line = lines[i]
        if line.startswith("=== "):
            test_name = line[4:].strip()
            i += 1
            input_lines: list[str] = []
            while i < len(lines) and not lines[i].startswith("---"):
                input_lines.append(lines[i])
                i += 1
            if i < len(lines) and lines[i] == "---":
                i += 1
            expected_lines: list[str] = []
            while i < len(lines) and not lines[i].startswith("---"):
                expected_lines.append(lines[i])
                i += 1
            if i < len(lines) and lines[i] == "---":
                i += 1
            test_input = "\n".join(input_lines)
            expected = "\n".join(expected_lines).strip()
            result.append((test_name, test_input, expected))
        else:
            i += 1
    return result


def discover_translate_tests() -> list[tuple[str, str, str]]:
    """Find all golden tests, returns (test_id, input, expected)."""
    results = []
    for test_file in sorted(TRANSLATE_DIR.glob("*.tests")):
        for name, input_json, expected in parse_translate_file(test_file):
            results.append((f"{test_file.stem}/{name}", input_json, expected))
    return results


def pytest_generate_tests(metafunc):
    """Parametrize tests over golden translation files."""
    if "translate_input" in metafunc.fixturenames:
        params = [
            pytest.param(input_json, expected, id=test_id)
            for test_id, input_json, expected in discover_translate_tests()
        ]
        metafunc.parametrize("translate_input,translate_expected", params)


def test_golden(translate_input: str, translate_expected: str):
    """Verify translation output matches the expected artifact."""
    result = translate_dict(json.loads(translate_input))
    if translate_expected == "none":
        assert result is None
        return
    assert result is not None, "expected an artifact, got none"
    header, _, body = translate_expected.partition("\n")
    assert header.startswith("name:"), "expected section must start with 'name:'"
    name, text = result
    assert name == header[len("name:") :].strip()
    if text.strip() != body.strip():
        pytest.fail(f"--- expected ---\n{body}\n--- got ---\n{text}")


# ============================================================
# driver behavior
# ============================================================


def test_non_module_roots_produce_nothing():
    assert translate(VarDecl("x", NUMBER)) is None
    assert translate(FuncDecl("f", Function((), UNIT))) is None
    assert translate(ExportsDecl(NUMBER)) is None
    assert translate(ClassDecl("C", Class(()))) is None
    assert translate(UnknownDecl()) is None


def test_module_artifact_name_is_normalized():
    result = translate(ModuleDecl('"my-mod"', ()))
    assert result == ("my_mod", "\n")


def test_module_precode_then_bodies():
    module = ModuleDecl(
        "m",
        (FuncDecl("f", Function((("x", Union((NUMBER, STRING))),), Union((BOOL, NULL)))),),
    )
    name, text = translate(module)
    assert name == "m"
    assert text == (
        "type number_or_string =\n"
        "  | Number(float)\n"
        "  | String(string);\n"
        '[@bs.module "m"] external f : (number_or_string) => bool_or_null = "f";'
    )


def test_return_union_gate():
    module = ModuleDecl("m", (FuncDecl("f", Function((), Union((BOOL, NULL)))),))
    _, default_text = translate(module)
    _, gated_text = translate(module, hoist_return_unions=True)
    assert "type bool_or_null" not in default_text
    assert gated_text.startswith("type bool_or_null =\n")


def test_bare_type_decl_artifact():
    result = translate(TypeDecl("Id", Union((NUMBER, STRING))))
    assert result == (
        "",
        "type id = number_or_string;\n"
        "type number_or_string =\n"
        "  | Number(float)\n"
        "  | String(string);",
    )


def test_class_in_union_aborts_translation():
    module = ModuleDecl("m", (VarDecl("v", Union((NUMBER, Class(())))),))
    with pytest.raises(UnnameableTypeError):
        translate(module)
