# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""NamedLuTree - a look-up tree addressed by unique names.

This module provides NamedLuTree, the name-keyed surface of the library.
Structure lives in an Arena (parallel parent/children/payload lists indexed
by handle); NamedLuTree stores each node's name as its payload and keeps a
dict from name to handle for O(1) lookup.

Key Features:
    - **Unique names**: a name can be inserted once, anywhere in the tree
    - **Atomic insertion**: either one arena slot and one index entry are
      added, or nothing changes
    - **Strict and lenient insertion**: insert_child raises on any error,
      insert_with_children skips bad children and keeps going
    - **DFS/BFS from one walk**: see genro_lutree.traversal
    - **Subscriptions**: insert/reject notifications for observers

Traversal order:
    dfs() uses a stack, so siblings come out last-declared first.
    bfs() uses a queue: level by level, siblings in declaration order.

Example:
    Building and walking::

        tree = NamedLuTree()
        tree.insert_with_children('A', ['B', 'C', 'D'])
        tree.insert_child('E', 'B')

        tree.bfs('A')  # ['A', 'B', 'C', 'D', 'E']
        tree.dfs('A')  # ['A', 'D', 'C', 'B', 'E']

    From the line format::

        tree = NamedLuTree.from_lines(['A->B,C', 'B->D'])
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Iterable, Iterator

from ..arena import Arena
from ..exceptions import (
    DuplicateNodeError,
    LuTreeError,
    StartNotFoundError,
    UnknownParentError,
)
from ..traversal import Discipline, SearchBuffer, as_buffer, walk
from .node import LuTreeNode
from .subscription import SubscriberCallback, SubscriptionMixin

logger = logging.getLogger(__name__)


class NamedLuTree(SubscriptionMixin):
    """A forest of uniquely named nodes over an arena.

    NamedLuTree provides:
    - insert_root_if_absent(name): idempotent root creation
    - insert_child(child, parent): strict single-edge insertion
    - insert_with_children(name, children): lenient batch insertion
    - lookup(name) / tree[name]: handle or node view by name
    - dfs(start) / bfs(start) / traverse(start, discipline): ordered walks

    Example:
        >>> tree = NamedLuTree()
        >>> tree.insert_with_children('Root', ['A', 'B'])
        0
        >>> tree.children('Root')
        ['A', 'B']
    """

    __slots__ = ('_arena', '_name2idx', '_ins_subscribers', '_rej_subscribers')

    def __init__(self) -> None:
        self._arena: Arena[str] = Arena()
        self._name2idx: dict[str, int] = {}
        self._ins_subscribers: dict[str, SubscriberCallback] = {}
        self._rej_subscribers: dict[str, SubscriberCallback] = {}

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> NamedLuTree:
        """Build a tree from ``parent->child,child`` lines.

        See genro_lutree.parsers.load_lines.
        """
        from ..parsers import load_lines
        return load_lines(lines, tree=cls())

    @classmethod
    def from_file(cls, path: str | Path, encoding: str = 'utf-8') -> NamedLuTree:
        """Build a tree from a file of ``parent->child,child`` lines.

        See genro_lutree.parsers.load_file.
        """
        from ..parsers import load_file
        return load_file(path, tree=cls(), encoding=encoding)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"NamedLuTree({list(self._name2idx)})"

    def __len__(self) -> int:
        """Return the number of nodes."""
        return len(self._arena)

    def __iter__(self) -> Iterator[str]:
        """Iterate over names in insertion order."""
        return iter(self._name2idx)

    def __contains__(self, name: object) -> bool:
        return name in self._name2idx

    def __getitem__(self, name: str) -> LuTreeNode:
        return self.node(name)

    @property
    def arena(self) -> Arena[str]:
        """The backing arena (payloads are node names)."""
        return self._arena

    # ==================== Insertion ====================

    def _register(self, name: str, parent: int | None) -> int:
        """Allocate name under parent and index it. Caller has validated."""
        handle = self._arena.allocate(parent, name)
        self._name2idx[name] = handle
        logger.debug("Inserted %r as handle %d (parent %r)", name, handle, parent)
        self._on_node_inserted(LuTreeNode(self, handle))
        return handle

    def _check_child(self, child_name: str, parent_name: str) -> int:
        """Return the parent handle if child_name can go under parent_name."""
        parent = self._name2idx.get(parent_name)
        if parent is None:
            raise UnknownParentError(f"Parent node {parent_name!r} not found")
        if child_name in self._name2idx:
            raise DuplicateNodeError(f"Node {child_name!r} exists already")
        return parent

    def insert_root_if_absent(self, name: str) -> int:
        """Return the handle of name, creating it as a root if needed.

        Calling it again with the same name returns the same handle and
        changes nothing.

        Args:
            name: The node name.

        Returns:
            Handle of the existing or newly created node.
        """
        handle = self._name2idx.get(name)
        if handle is not None:
            return handle
        return self._register(name, None)

    def insert_child(self, child_name: str, parent_name: str) -> int:
        """Insert child_name as a new node under parent_name.

        Either one node is added or, on error, the tree is unchanged.

        Args:
            child_name: Name of the node to create.
            parent_name: Name of an existing node.

        Returns:
            Handle of the new node.

        Raises:
            UnknownParentError: If parent_name is not registered.
            DuplicateNodeError: If child_name is already registered, under
                any parent.
        """
        return self._register(child_name, self._check_child(child_name, parent_name))

    def insert_with_children(self, name: str, child_names: Iterable[str]) -> int:
        """Ensure name exists and insert child_names under it, in order.

        Unlike insert_child, a child that cannot be inserted (typically a
        name already present elsewhere) does not stop the batch: the error
        is logged, reported to reject subscribers, and the next child is
        processed. Use insert_child for strict semantics.

        Args:
            name: Parent name, created as a root if absent.
            child_names: Names of the children to create. A single string
                is refused rather than split into one-character names.

        Returns:
            Handle of name.

        Raises:
            TypeError: If child_names is a str.
        """
        if isinstance(child_names, str):
            raise TypeError(
                f"child_names must be an iterable of names, not str ({child_names!r})"
            )
        handle = self.insert_root_if_absent(name)
        for child_name in child_names:
            try:
                parent = self._check_child(child_name, name)
            except LuTreeError as e:
                logger.warning("Skipped child %r of %r: %s", child_name, name, e)
                self._on_child_rejected(child_name, name, e)
                continue
            self._register(child_name, parent)
        return handle

    # ==================== Lookup ====================

    def lookup(self, name: str) -> int | None:
        """Return the handle of name, or None if absent."""
        return self._name2idx.get(name)

    def node(self, name: str) -> LuTreeNode:
        """Return a node view for name.

        Raises:
            KeyError: If name is not registered.
        """
        handle = self._name2idx.get(name)
        if handle is None:
            raise KeyError(f"Node {name!r} not found")
        return LuTreeNode(self, handle)

    def name_of(self, handle: int) -> str:
        """Return the name stored at handle.

        Raises:
            OutOfBoundsError: If handle is not allocated.
        """
        return self._arena.get_payload(handle)

    def _handle(self, name: str) -> int:
        return self.node(name).handle

    # ==================== Navigation ====================

    def parent(self, name: str) -> str | None:
        """Return the parent's name, or None for a root."""
        parent = self._arena.parent_of(self._handle(name))
        return None if parent is None else self.name_of(parent)

    def children(self, name: str) -> list[str]:
        """Return the children's names in insertion order."""
        return [self.name_of(h) for h in self._arena.children_of(self._handle(name))]

    def roots(self) -> list[str]:
        """Return the names of all roots, in insertion order."""
        return [self.name_of(h) for h in self._arena.roots()]

    def ancestors(self, name: str) -> list[str]:
        """Return the names from the parent of name up to its root."""
        return [self.name_of(h) for h in self._arena.ancestors_of(self._handle(name))]

    def depth(self, name: str) -> int:
        """Return the distance of name from its root (root=0)."""
        return len(self._arena.ancestors_of(self._handle(name)))

    # ==================== Traversal ====================

    def iter_traverse(
        self,
        start_name: str,
        discipline: Discipline | str | SearchBuffer[Any] = Discipline.LIFO,
    ) -> Iterator[str]:
        """Lazily walk from start_name, yielding names.

        The start name and the discipline are resolved immediately, so
        errors surface at the call rather than at the first iteration.

        Raises:
            StartNotFoundError: If start_name is not registered.
            ValueError: If discipline is not valid.
        """
        start = self._name2idx.get(start_name)
        if start is None:
            raise StartNotFoundError(f"Start node {start_name!r} not found")
        buffer = as_buffer(discipline)
        return (self.name_of(h) for h in walk(self._arena, start, buffer))

    def traverse(
        self,
        start_name: str,
        discipline: Discipline | str | SearchBuffer[Any] = Discipline.LIFO,
    ) -> list[str]:
        """Walk from start_name and return the names in visiting order.

        Args:
            start_name: Name where the walk begins.
            discipline: Discipline.LIFO ('lifo') for depth-first,
                Discipline.FIFO ('fifo') for breadth-first, or an empty
                SearchBuffer to use as the pending buffer.

        Returns:
            Every name reachable from start_name, exactly once.

        Raises:
            StartNotFoundError: If start_name is not registered.
        """
        return list(self.iter_traverse(start_name, discipline))

    def dfs(self, start_name: str) -> list[str]:
        """Depth-first walk; siblings are visited last-declared first."""
        return self.traverse(start_name, Discipline.LIFO)

    def bfs(self, start_name: str) -> list[str]:
        """Breadth-first walk; siblings are visited in declaration order."""
        return self.traverse(start_name, Discipline.FIFO)
