#!/usr/bin/env python3
"""
cli.py - command line front end for the todo.txt parser

Usage:
    todotxt parse [--text <text>]
    todotxt format
    todotxt normalize [--text <text>]

Examples:
    todotxt parse --text "(A) Call Mom @Phone +Family"
    cat todo.txt | todotxt parse > todo.json
    cat todo.json | todotxt format
    cat todo.txt | todotxt normalize

Input is read from stdin unless --text is given. Set TODOTXT_LOG_LEVEL to
change the default log level.
"""

import argparse
import json
import logging
import os
import sys
from typing import NoReturn

from todotxt.tools.todo_tools import handle_format, handle_normalize, handle_parse_document

log = logging.getLogger(__name__)


def _read_input(args) -> str:
    text = args.text if getattr(args, 'text', None) is not None else sys.stdin.read()
    # A trailing newline ends the last line, it does not start a new one
    if text.endswith("\n"):
        text = text[:-1]
    return text


def _fail(message: str) -> NoReturn:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


# --- commands ---

def parse_cmd(args):
    """Print the parsed document as a JSON list of records."""
    result = handle_parse_document(text=_read_input(args))
    if "error" in result:
        _fail(result["error"])
    print(json.dumps(result["items"], indent=2))


def format_cmd(args):
    """Render a JSON list of records back to todo.txt lines."""
    try:
        records = json.loads(sys.stdin.read())
    except json.JSONDecodeError as e:
        _fail(f"invalid JSON input: {e}")
    if not isinstance(records, list):
        _fail("expected a JSON list of records")
    result = handle_format(items=records)
    if "error" in result:
        _fail(result["error"])
    print(result["text"])


def normalize_cmd(args):
    """Rewrite todo.txt input in canonical form."""
    result = handle_normalize(text=_read_input(args))
    if "error" in result:
        _fail(result["error"])
    print(result["text"])


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog='todotxt',
        description="Parse and format todo.txt task lines",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Command to execute')

    # --- parse ---
    parse_p = subparsers.add_parser('parse', help='Parse todo.txt lines to JSON')
    parse_p.add_argument('--text', help='Document text (default: stdin)')
    parse_p.set_defaults(func=parse_cmd)

    # --- format ---
    format_p = subparsers.add_parser('format', help='Render JSON records from stdin as todo.txt')
    format_p.set_defaults(func=format_cmd)

    # --- normalize ---
    normalize_p = subparsers.add_parser('normalize', help='Rewrite todo.txt in canonical form')
    normalize_p.add_argument('--text', help='Document text (default: stdin)')
    normalize_p.set_defaults(func=normalize_cmd)

    args = parser.parse_args(argv)

    level = "DEBUG" if args.verbose else os.environ.get("TODOTXT_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    log.debug("Running %s", args.command)
    args.func(args)


if __name__ == '__main__':
    main()
