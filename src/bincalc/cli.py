"""bincalc CLI: evaluate expressions in a fixed-width numeric encoding.

Usage:
    bincalc u8                        Interactive session, 8-bit unsigned
    bincalc -v s32                    Print every computation step
    bincalc f32 -e "1 / 3" -e x3f800000
    echo "x7f + 1" | bincalc s8       Batch mode from stdin

Each line is evaluated on its own; a fault prints a caret under the
offending column and the session carries on.
"""

import argparse
import sys

try:
    import readline  # noqa: F401  (line editing and history for input())
except ImportError:
    pass

from . import __version__
from .encodings import Encoding, ENCODING_NAMES
from .expressions import evaluate
from .formatter import format_caret

PROMPT = '> '


def handle_line(line, encoding, verbose=False, echo=False):
    """Evaluate one line and print its result or fault.

    Trace lines and the ``<dec> (<hex>)`` result go to stdout.  Faults go
    to stderr as a caret line plus message; with *echo*, the line itself is
    printed first (the prompt is not on screen in batch mode).

    Returns:
        True if the line evaluated successfully.
    """
    result = evaluate(line, encoding, verbose)
    if result.ok:
        for step in result.output.trace:
            print(step)
        print(result.output)
        return True

    fault = result.fault
    if echo:
        print(f"{PROMPT}{line}", file=sys.stderr)
    print(format_caret(fault.offset, len(PROMPT)), file=sys.stderr)
    print(fault.message, file=sys.stderr)
    return False


def run_lines(lines, encoding, verbose=False, echo=True):
    """Evaluate a sequence of lines; stop early at ``exit``.

    Returns:
        0 if every line succeeded, else 1.
    """
    status = 0
    for line in lines:
        line = line.rstrip('\r\n')
        if not line.strip():
            continue
        if line.strip() == 'exit':
            break
        if not handle_line(line, encoding, verbose, echo):
            status = 1
    return status


def repl(encoding, verbose=False):
    """Interactive read-eval-print loop until ``exit`` or end of input."""
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            return 0
        if not line.strip():
            continue
        if line.strip() == 'exit':
            return 0
        handle_line(line, encoding, verbose)


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='bincalc',
        description='Binary calculator for fixed-width signed, unsigned '
                    'and floating-point encodings.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Modes:
  s8,s16,s32,s64    8,16,32,64 bit signed encoding
  u8,u16,u32,u64    8,16,32,64 bit unsigned encoding
  f32,f64           32 or 64 bit floating-point encoding

Literals: decimal (-12, 2.5e3 for f32/f64) or hex bit patterns (xff).
Operators: ~ - (unary)  * / %  + -  << >>  &  ^  |  ( )""")

    parser.add_argument('mode', choices=ENCODING_NAMES, metavar='mode',
                        help='Encoding: ' + ', '.join(ENCODING_NAMES))
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print each computation step')
    parser.add_argument('-e', '--expr', action='append', metavar='EXPR',
                        help='Evaluate EXPR and exit (repeatable)')
    parser.add_argument('--version', action='version',
                        version=f'bincalc {__version__}')

    args = parser.parse_args(argv)
    encoding = Encoding.from_name(args.mode)

    try:
        if args.expr:
            return run_lines(args.expr, encoding, args.verbose)
        if not sys.stdin.isatty():
            return run_lines(sys.stdin, encoding, args.verbose)
        return repl(encoding, args.verbose)
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"\nUnexpected error: {type(e).__name__}: {e}", file=sys.stderr)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 2
