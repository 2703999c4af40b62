# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Command line walker for edge declaration files.

Usage:
    genro-lutree tree.txt
    genro-lutree tree.txt --start A --order bfs
    genro-lutree tree.txt -v
"""

from __future__ import annotations

import argparse
import logging
import sys

from .exceptions import LuTreeError
from .store import NamedLuTree

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='genro-lutree',
        description='Load a parent->child,child file and print a traversal'
    )
    parser.add_argument('file', help='Edge declaration file')
    parser.add_argument('--start', help='Start node (default: first root)')
    parser.add_argument('--order', choices=('dfs', 'bfs'), default='dfs',
                        help='Traversal order (default: dfs)')
    parser.add_argument('--encoding', default='utf-8', help='File encoding')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log each imported line and insertion')
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        tree = NamedLuTree.from_file(args.file, encoding=args.encoding)
        start = args.start
        if start is None:
            roots = tree.roots()
            if not roots:
                logger.warning("No nodes declared in %s", args.file)
                return 0
            start = roots[0]
        names = tree.dfs(start) if args.order == 'dfs' else tree.bfs(start)
    except (OSError, UnicodeDecodeError, LuTreeError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    for name in names:
        print(name)
    return 0


if __name__ == '__main__':
    sys.exit(main())
