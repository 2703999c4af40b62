# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parser for the edge declaration line format.

Each line declares a parent and its children::

    Root->A,B,C
    A->D
    B->E,F

Rules:
    - one declaration per line, ``->`` between parent and children
    - children separated by ``,``, at least one required
    - no escaping: names cannot contain ``->`` or ``,``
    - whitespace is part of the names (nothing is trimmed)
    - a parent declared on several lines accumulates children
    - lines end at a line feed, a carriage return right before it is
      dropped; an empty line is malformed, but a final line feed does not
      start a new line

The whole source is parsed before the tree is touched, so a malformed
line leaves the target tree unchanged. Children that cannot be inserted
(e.g. declared twice) are skipped by NamedLuTree.insert_with_children.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator

from ..exceptions import ImportFormatError

if TYPE_CHECKING:
    from ..store import NamedLuTree

logger = logging.getLogger(__name__)

SEPARATOR = '->'
CHILD_SEPARATOR = ','


def parse_line(line: str, lineno: int | None = None) -> tuple[str, list[str]]:
    """Split a declaration line into parent and children.

    Args:
        line: A line without its terminator, e.g. 'A->B,C'.
        lineno: Optional line number reported in errors.

    Returns:
        Tuple of (parent_name, [child_name, ...]).

    Raises:
        ImportFormatError: If the separator is missing or repeated, or no
            child is declared.

    Examples:
        >>> parse_line('A->B,C')
        ('A', ['B', 'C'])
        >>> parse_line(' A -> B')
        (' A ', [' B'])
    """
    count = line.count(SEPARATOR)
    if count == 0:
        raise ImportFormatError(f"missing '{SEPARATOR}' in {line!r}", line, lineno)
    if count > 1:
        raise ImportFormatError(f"more than one '{SEPARATOR}' in {line!r}", line, lineno)

    parent, _, rest = line.partition(SEPARATOR)
    if not rest:
        raise ImportFormatError(f"no children declared in {line!r}", line, lineno)
    return parent, rest.split(CHILD_SEPARATOR)


def split_lines(text: str) -> list[str]:
    """Split text on line feeds only.

    Unlike str.splitlines, form feeds, vertical tabs and Unicode line
    separators stay inside the lines. A trailing line feed does not
    produce an empty last line.

    Examples:
        >>> split_lines('A->B\\n\\nB->C\\n')
        ['A->B', '', 'B->C']
    """
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return lines


def iter_edges(lines: Iterable[str]) -> Iterator[tuple[int, str, list[str]]]:
    """Parse lines lazily.

    One trailing line feed, and a carriage return right before it, is
    removed from each line. Any other character, including form feeds or
    Unicode line separators, belongs to the names.

    Yields:
        Tuples of (lineno, parent_name, child_names), lineno 1-based.

    Raises:
        ImportFormatError: On the first malformed line, with its number.
    """
    for lineno, raw in enumerate(lines, start=1):
        line = raw[:-1] if raw.endswith('\n') else raw
        if line.endswith('\r'):
            line = line[:-1]
        parent, children = parse_line(line, lineno)
        yield lineno, parent, children


def load_lines(lines: Iterable[str], tree: NamedLuTree | None = None) -> NamedLuTree:
    """Populate a tree from declaration lines.

    Args:
        lines: Declaration lines (terminators allowed).
        tree: Tree to extend. A new NamedLuTree is created if None.

    Returns:
        The populated tree.

    Raises:
        ImportFormatError: If any line is malformed. Nothing is inserted.
    """
    if tree is None:
        from ..store import NamedLuTree
        tree = NamedLuTree()

    edges = list(iter_edges(lines))
    for lineno, parent, children in edges:
        logger.debug("Line %d | Parent: %r, Children: %r", lineno, parent, children)
        tree.insert_with_children(parent, children)
    return tree


def load_file(
    path: str | Path,
    tree: NamedLuTree | None = None,
    encoding: str = 'utf-8',
) -> NamedLuTree:
    """Populate a tree from a file of declaration lines.

    Args:
        path: File to read.
        tree: Tree to extend. A new NamedLuTree is created if None.
        encoding: Text encoding of the file.

    Returns:
        The populated tree.

    Raises:
        OSError: If the file cannot be read.
        UnicodeDecodeError: If the file is not valid in encoding.
        ImportFormatError: If any line is malformed.
    """
    path = Path(path)
    logger.debug("Creating look-up tree from file: %s", path)
    with path.open(encoding=encoding, newline='') as f:
        text = f.read()
    return load_lines(split_lines(text), tree=tree)
