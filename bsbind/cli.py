"""bsbind CLI - translate a JSON declaration tree into Reason bindings."""

from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass

from .errors import TranslateError
from .ir import Decl
from .precode import precode
from .serialize import decl_from_dict, decl_to_dict
from .translate import translate

PHASES: list[str] = ["load", "precode"]

USAGE: str = """\
bsbind [OPTIONS] [INPUT]

Translate a JSON declaration tree (from INPUT or stdin) into Reason
BuckleScript bindings.

Options:
  --stop-at PHASE          Stop after phase: load, precode
  --hoist-return-unions    Also declare unions used only as return types
  -o, --output FILE        Write output to FILE instead of stdout
  -d, --output-dir DIR     Write output to DIR/<artifact>.re
  --help                   Show this help message
"""


@dataclass
class Options:
    """Parsed command-line options."""

    input_file: str | None = None
    output_file: str | None = None
    output_dir: str | None = None
    stop_at: str | None = None
    hoist_return_unions: bool = False


def parse_args(args: list[str]) -> tuple[Options | None, int]:
    """Parse argv. Returns (options, exit_code); options is None when done."""
    opts = Options()
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return (None, 0)
        elif arg == "--stop-at":
            if i + 1 >= len(args):
                print("error: --stop-at requires an argument", file=sys.stderr)
                return (None, 2)
            opts.stop_at = args[i + 1]
            i += 2
        elif arg == "-o" or arg == "--output":
            if i + 1 >= len(args):
                print("error: " + arg + " requires an argument", file=sys.stderr)
                return (None, 2)
            opts.output_file = args[i + 1]
            i += 2
        elif arg == "-d" or arg == "--output-dir":
            if i + 1 >= len(args):
                print("error: " + arg + " requires an argument", file=sys.stderr)
                return (None, 2)
            opts.output_dir = args[i + 1]
            i += 2
        elif arg == "--hoist-return-unions":
            opts.hoist_return_unions = True
            i += 1
        elif arg.startswith("-"):
            print("error: unknown flag '" + arg + "'", file=sys.stderr)
            return (None, 2)
        else:
            if opts.input_file is not None:
                print("error: unexpected argument '" + arg + "'", file=sys.stderr)
                return (None, 2)
            opts.input_file = arg
            i += 1
    if opts.stop_at is not None and opts.stop_at not in PHASES:
        print("error: unknown phase '" + opts.stop_at + "'", file=sys.stderr)
        return (None, 2)
    if opts.output_file is not None and opts.output_dir is not None:
        print("error: -o and -d are mutually exclusive", file=sys.stderr)
        return (None, 2)
    return (opts, 0)


def read_source(input_file: str | None) -> tuple[str, int]:
    """Read source from file or stdin. Returns (source, exit_code) where exit_code 0 means OK."""
    if input_file is not None:
        try:
            with open(input_file, "rb") as f:
                raw = f.read()
        except OSError:
            print("error: cannot open '" + input_file + "'", file=sys.stderr)
            return ("", 1)
    else:
        raw = sys.stdin.buffer.read()
    try:
        return (raw.decode("utf-8"), 0)
    except ValueError:
        print("error: invalid utf-8 in input", file=sys.stderr)
        return ("", 1)


def write_output(output: str, output_file: str | None) -> int:
    """Write output to file or stdout. Returns 0 on success, 1 on error."""
    if output_file is not None:
        try:
            with open(output_file, "w") as f:
                f.write(output)
        except OSError:
            print("error: cannot write '" + output_file + "'", file=sys.stderr)
            return 1
        return 0
    print(output)
    return 0


def load(source: str) -> Decl:
    """Decode a JSON document into a root declaration."""
    try:
        doc = json.loads(source)
    except json.JSONDecodeError as e:
        raise TranslateError("invalid json: " + e.msg + " at line " + str(e.lineno))
    return decl_from_dict(doc)


def run_pipeline(source: str, opts: Options) -> tuple[int, str, str]:
    """Run load + translate. Returns (exit_code, artifact_name, output)."""
    try:
        root = load(source)
        if opts.stop_at == "load":
            return (0, "", json.dumps(decl_to_dict(root), indent=2))
        if opts.stop_at == "precode":
            return (0, "", precode(root, opts.hoist_return_unions))
        artifact = translate(root, opts.hoist_return_unions)
    except TranslateError as e:
        print("error: " + e.msg, file=sys.stderr)
        return (1, "", "")
    if artifact is None:
        print("note: root is neither a module nor a type alias; nothing to emit", file=sys.stderr)
        return (0, "", "")
    name, text = artifact
    return (0, name, text)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    opts, code = parse_args(argv if argv is not None else sys.argv[1:])
    if opts is None:
        return code
    source, err = read_source(opts.input_file)
    if err != 0:
        return err
    if source.strip() == "":
        print("error: no input provided", file=sys.stderr)
        return 2
    exit_code, name, output = run_pipeline(source, opts)
    if exit_code != 0 or output == "":
        return exit_code
    if opts.output_dir is not None:
        if name == "":
            print("error: artifact has no name; use -o instead of -d", file=sys.stderr)
            return 1
        return write_output(output, os.path.join(opts.output_dir, name + ".re"))
    return write_output(output, opts.output_file)


if __name__ == "__main__":
    sys.exit(main())
