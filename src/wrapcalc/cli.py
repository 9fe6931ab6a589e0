"""wrapcalc CLI — evaluate one expression, or run an interactive prompt."""

from __future__ import annotations

import sys
from typing import TextIO

from .display import HEX, OCT, Radix, format_value
from .emit import to_source
from .errors import EvalError, ParseError
from .kinds import I32, IntKind, kind_by_name
from .parse import parse
from .runtime import evaluate
from .tokens import WHITESPACE


USAGE: str = """\
wrapcalc [OPTIONS] [EXPR...]

Evaluate integer expressions with fixed-width wrapping arithmetic.
With no EXPR, read expressions from an interactive prompt.
Arguments such as -5 or --1 are read as expression text; put -- before
any other expression that starts with a dash.

Options:
  -t, --type KIND  Integer type: u8 u16 u32 u64 u128 i8 i16 i32 i64 i128
                   (default i32)
  --hex            Show hexadecimal alongside decimal and binary (default)
  --oct            Show octal alongside decimal and binary
  --echo           Print the parsed expression before its value
  --help           Show this help message
"""

PROMPT: str = "> "


class Options:
    """Settings shared by one-shot and interactive evaluation."""

    def __init__(self, kind: IntKind, radix: Radix, echo: bool):
        self.kind: IntKind = kind
        self.radix: Radix = radix
        self.echo: bool = echo


def run_line(line: str, opts: Options, out: TextIO, err: TextIO) -> bool:
    """Parse, evaluate and print one expression. Returns False on error."""
    try:
        expr = parse(line)
    except ParseError as e:
        print("wrapcalc: parse error: " + str(e), file=err)
        return False
    if opts.echo:
        print(to_source(expr), file=out)
    try:
        value = evaluate(expr, opts.kind)
    except EvalError as e:
        print("wrapcalc: error: " + str(e), file=err)
        return False
    print(format_value(value, opts.radix), file=out)
    return True


def _enable_history() -> None:
    try:
        import readline  # noqa: F401
    except ImportError:
        pass


def repl(opts: Options, stdin: TextIO, out: TextIO, err: TextIO) -> int:
    """Read-eval-print until EOF or Ctrl-C. Errors do not stop the loop."""
    interactive = stdin.isatty()
    if interactive:
        _enable_history()
    while True:
        try:
            if interactive:
                line = input(PROMPT)
            else:
                line = stdin.readline()
                if line == "":
                    break
        except (EOFError, KeyboardInterrupt):
            if interactive:
                print(file=out)
            break
        if line.strip(WHITESPACE) == "":
            continue
        run_line(line, opts, out, err)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    kind: IntKind = I32
    radix: Radix = HEX
    echo = False
    words: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg == "--type" or arg == "-t":
            if i + 1 >= len(args):
                print("wrapcalc: " + arg + " requires an argument", file=sys.stderr)
                return 2
            try:
                kind = kind_by_name(args[i + 1])
            except KeyError as e:
                print("wrapcalc: " + e.args[0], file=sys.stderr)
                return 2
            i += 2
        elif arg == "--hex":
            radix = HEX
            i += 1
        elif arg == "--oct":
            radix = OCT
            i += 1
        elif arg == "--echo":
            echo = True
            i += 1
        elif arg == "--":
            words.extend(args[i + 1 :])
            break
        elif arg.startswith("-") and len(arg) > 1 and not _starts_expr(arg):
            print("wrapcalc: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        else:
            words.append(arg)
            i += 1

    opts = Options(kind, radix, echo)
    if not words:
        return repl(opts, sys.stdin, sys.stdout, sys.stderr)
    source = " ".join(words)
    if source.strip(WHITESPACE) == "":
        print("wrapcalc: empty expression", file=sys.stderr)
        return 1
    if run_line(source, opts, sys.stdout, sys.stderr):
        return 0
    return 1


def _starts_expr(arg: str) -> bool:
    """Whether a dash-prefixed argument is an expression like '-5' or '--1'."""
    rest = arg.lstrip("-").lstrip(WHITESPACE)
    return rest == "" or not rest[0].isalpha()


if __name__ == "__main__":
    sys.exit(main())
