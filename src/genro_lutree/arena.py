# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Arena - flat, append-only storage for tree structure.

Nodes live in three parallel lists addressed by a dense integer handle:

    - ``_parents[h]``: handle of the parent, or None for roots
    - ``_children[h]``: handles that declared ``h`` as parent, in insertion order
    - ``_payloads[h]``: the value carried by the node

Handles are assigned in insertion order starting at 0 and are never reused,
since the arena has no removal operation. Parent links only ever point to
already allocated handles, so the structure is always a forest.

Example:
    >>> arena = Arena()
    >>> root = arena.allocate(payload='root')
    >>> leaf = arena.allocate(root, 'leaf')
    >>> arena.parent_of(leaf)
    0
    >>> arena.children_of(root)
    [1]
"""

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from .exceptions import OutOfBoundsError

T = TypeVar('T')


class Arena(Generic[T]):
    """Append-only node storage addressed by integer handles."""

    __slots__ = ('_parents', '_children', '_payloads')

    def __init__(self) -> None:
        self._parents: list[int | None] = []
        self._children: list[list[int]] = []
        self._payloads: list[T | None] = []

    def __repr__(self) -> str:
        return f"Arena({len(self._parents)} nodes, {len(self.roots())} roots)"

    def __len__(self) -> int:
        """Return the number of allocated handles."""
        return len(self._parents)

    def __contains__(self, handle: object) -> bool:
        """True if handle refers to an allocated slot."""
        return (
            isinstance(handle, int)
            and not isinstance(handle, bool)
            and 0 <= handle < len(self._parents)
        )

    def __iter__(self) -> Iterator[int]:
        """Iterate over handles in allocation order."""
        return iter(range(len(self._parents)))

    def _check(self, handle: int) -> int:
        """Return handle unchanged if allocated, else raise OutOfBoundsError."""
        if handle not in self:
            raise OutOfBoundsError(
                f"Handle {handle!r} out of bounds (arena size {len(self._parents)})"
            )
        return handle

    # ==================== Allocation ====================

    def allocate(self, parent: int | None = None, payload: T | None = None) -> int:
        """Append a new slot and link it under parent.

        Args:
            parent: Handle of an already allocated node, or None for a root.
            payload: Initial value carried by the node.

        Returns:
            The new handle.

        Raises:
            OutOfBoundsError: If parent is not an allocated handle. The
                arena is left untouched.
        """
        if parent is not None:
            self._check(parent)

        handle = len(self._parents)
        self._parents.append(parent)
        self._children.append([])
        self._payloads.append(payload)
        if parent is not None:
            self._children[parent].append(handle)
        return handle

    # ==================== Access ====================

    def parent_of(self, handle: int) -> int | None:
        """Return the parent handle, or None for a root."""
        return self._parents[self._check(handle)]

    def children_of(self, handle: int) -> list[int]:
        """Return a copy of the children handles in insertion order."""
        return list(self._children[self._check(handle)])

    def get_payload(self, handle: int) -> T | None:
        """Return the payload stored at handle."""
        return self._payloads[self._check(handle)]

    def set_payload(self, handle: int, value: T) -> None:
        """Replace the payload stored at handle."""
        self._payloads[self._check(handle)] = value

    # ==================== Navigation ====================

    def is_root(self, handle: int) -> bool:
        """True if handle has no parent."""
        return self._parents[self._check(handle)] is None

    def roots(self) -> list[int]:
        """Return the handles without parent, in allocation order."""
        return [h for h, p in enumerate(self._parents) if p is None]

    def ancestors_of(self, handle: int) -> list[int]:
        """Return the parent chain of handle, nearest first.

        The chain always terminates: a parent is allocated before any of
        its children and parents are never changed afterwards.
        """
        chain: list[int] = []
        parent = self._parents[self._check(handle)]
        while parent is not None:
            chain.append(parent)
            parent = self._parents[parent]
        return chain
