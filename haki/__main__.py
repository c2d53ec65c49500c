"""Lisp → Swift compiler.

Usage:
    python -m haki FILE.lisp                   # program → stdout
    python -m haki FILE.lisp -o main.swift      # program → file
    python -m haki - < FILE.lisp               # read stdin
    python -m haki FILE.lisp --primitive '*=Core._times'
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from haki.config import DEFAULT_NAMESPACE, ENTRY_FUNCTION, ENTRY_POINT, CompilerConfig, parse_primitive
from haki.driver import build_program, load_runtime
from haki.errors import HakiError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="haki",
        description="Compile a Lisp source file to a Swift script",
    )
    parser.add_argument('input', help="Input file path, or '-' for stdin")
    parser.add_argument('-o', '--output', help='Output file (default: stdout)')
    parser.add_argument('--namespace', default=DEFAULT_NAMESPACE,
                        help='Name of the emitted struct')
    parser.add_argument('--entry', default=ENTRY_POINT,
                        help='Lisp function compiled as the entry point')
    parser.add_argument('--entry-function', default=ENTRY_FUNCTION,
                        help='Swift name of the entry point')
    parser.add_argument('--primitive', action='append', default=[], metavar='NAME=TARGET',
                        help='Map a Lisp symbol to a runtime call (repeatable)')
    parser.add_argument('--indent', type=int, default=2, help='Indent width')
    runtime = parser.add_mutually_exclusive_group()
    runtime.add_argument('--runtime', help='Runtime support file to prepend')
    runtime.add_argument('--no-runtime', action='store_true',
                         help='Do not prepend runtime support')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def config_from_args(args) -> CompilerConfig:
    config = CompilerConfig(
        namespace=args.namespace,
        entry_point=args.entry,
        entry_function=args.entry_function,
        indent_width=args.indent,
    )
    extra = dict(parse_primitive(spec) for spec in args.primitive)
    return config.with_primitives(extra)


def read_input(path: str) -> str:
    if path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format="%(name)s: %(message)s")

    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    try:
        text = read_input(args.input)
        runtime = "" if args.no_runtime else load_runtime(args.runtime)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        result = build_program(text, config, runtime=runtime)
    except HakiError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        Path(args.output).parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(result)
        print(f"Written to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(result)


if __name__ == '__main__':
    main()
