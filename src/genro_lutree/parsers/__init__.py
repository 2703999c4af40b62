# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parsers for populating NamedLuTree from text sources.

Available parsers:
- edges: ``parent->child,child`` line format

Example:
    >>> from genro_lutree.parsers import load_file
    >>> tree = load_file('tree.txt')
    >>> tree.bfs('Root')
"""

from .edges import (
    CHILD_SEPARATOR,
    SEPARATOR,
    iter_edges,
    load_file,
    load_lines,
    parse_line,
    split_lines,
)

__all__ = [
    'SEPARATOR',
    'CHILD_SEPARATOR',
    'parse_line',
    'split_lines',
    'iter_edges',
    'load_lines',
    'load_file',
]
