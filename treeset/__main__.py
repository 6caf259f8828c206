"""Combine two sets of elements read from files, one element per line."""

import argparse
import pathlib
import sys
from typing import Any, Callable, List, Optional

import treeset.logging
from treeset.treeset import (
    TreeSet,
    new_with_int_comparator,
    new_with_string_comparator,
)

_presets: dict[
    str, tuple[Callable[[], TreeSet[Any]], Callable[[str], Any]]
] = {
    'int': (new_with_int_comparator, int),
    'string': (new_with_string_comparator, str),
}

_operations: dict[
    str, Callable[[TreeSet[Any], TreeSet[Any]], TreeSet[Any]]
] = {
    'union': TreeSet.union,
    'diff': TreeSet.diff,
    'inter': TreeSet.inter,
}

arg_parser = argparse.ArgumentParser(
    prog='treeset',
    description=(
        'Combine two sets of elements read from files, one element per '
        'line. Blank lines are ignored.'
    ),
)
arg_parser.add_argument(
    'operation',
    choices=sorted(_operations),
    help='set operation to apply to the left and right sets',
)
arg_parser.add_argument(
    'left', help='file holding the left set, or - for standard input'
)
arg_parser.add_argument(
    'right', help='file holding the right set, or - for standard input'
)
arg_parser.add_argument(
    '--comparator',
    choices=sorted(_presets),
    default='string',
    help='how to parse and order the elements (default: string)',
)
arg_parser.add_argument(
    '--verbose',
    action='store_true',
    default=False,
    help='print internal logs',
)
arg_parser.add_argument(
    '--log-file',
    type=pathlib.Path,
    default=None,
    help='write structured JSON logs to this file',
)


def _read_lines(path: str) -> List[str]:
    try:
        if path == '-':
            return sys.stdin.read().splitlines()
        with open(path) as file:
            return file.read().splitlines()
    except OSError as e:
        arg_parser.error(f"can't open '{path}': {e.strerror}")
    except UnicodeDecodeError as e:
        arg_parser.error(f"can't read '{path}': {e.reason}")


def read_set(path: str, comparator: str) -> TreeSet[Any]:
    new_set, parse_element = _presets[comparator]
    elements = new_set()
    for line_number, line in enumerate(_read_lines(path), start=1):
        if not line.strip():
            continue
        try:
            element = parse_element(line)
        except ValueError:
            arg_parser.error(
                f'{path}, line {line_number}: {line!r} is not a valid '
                f'{comparator}'
            )
        elements.add(element)
    return elements


def main(argv: Optional[List[str]] = None) -> int:
    args = arg_parser.parse_args(argv)
    if args.left == '-' and args.right == '-':
        arg_parser.error('only one of left and right can be standard input')
    try:
        treeset.logging.configure(args.verbose, args.log_file)
    except OSError as e:
        arg_parser.error(f"can't open '{args.log_file}': {e.strerror}")
    left = read_set(args.left, args.comparator)
    right = read_set(args.right, args.comparator)
    print(_operations[args.operation](left, right))
    return 0


if __name__ == '__main__':
    sys.exit(main())
