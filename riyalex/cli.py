"""Command-line front end of the compiler driver."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .lexer import Lexer, debug_scanner


class UsageError(ValueError):
    """Raised for a command line that cannot be used."""


@dataclass
class Options:
    """Settings taken from the command line."""

    input: str = ""
    output: str = "a.out"
    emit_preproc: bool = False
    test_lex: bool = False
    print_ast1: bool = False
    print_ast: bool = False
    emit_dot: bool = False
    print_llvm: bool = False
    emit_llvm: bool = False


_FLAGS = {
    "-E": "emit_preproc",
    "--test-lex": "test_lex",
    "--ast1": "print_ast1",
    "--ast": "print_ast",
    "--dot": "emit_dot",
    "--llvm": "print_llvm",
    "--emit-llvm": "emit_llvm",
}


def parse_args(argv: Sequence[str]) -> Options:
    """Build options from the arguments that follow the program name."""
    if not argv:
        raise UsageError("Error: No input file specified.")
    options = Options()
    args = iter(argv)
    for arg in args:
        if arg in _FLAGS:
            setattr(options, _FLAGS[arg], True)
        elif arg == "-o":
            try:
                options.output = next(args)
            except StopIteration:
                raise UsageError("Error: Expected output name after -o.") from None
        elif arg.startswith("-"):
            raise UsageError(f"Invalid option: {arg}")
        else:
            options.input = arg
    return options


def main(argv: Sequence[str] | None = None) -> int:
    """Run the driver and return its exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
    except UsageError as exc:
        print(exc, file=sys.stderr)
        return 1

    if options.test_lex:
        try:
            lexer = Lexer.from_file(options.input)
        except OSError:
            # An unreadable input scans as empty.
            lexer = Lexer("")
        debug_scanner(lexer, sys.stdout)
        return 0

    print("Error: only lexical analysis (--test-lex) is available.", file=sys.stderr)
    return 1