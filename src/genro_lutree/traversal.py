# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Traversal engine - one walk, two buffer disciplines.

Depth-first and breadth-first orders come out of the same algorithm; the
only difference is the buffer holding the pending handles:

    - StackBuffer (LIFO): the last enqueued handle is taken first -> DFS
    - QueueBuffer (FIFO): the first enqueued handle is taken first -> BFS

With a stack, children are pushed in declaration order and popped in
reverse, so DFS visits siblings last-declared first. This is part of the
observable ordering.

Example:
    >>> arena = Arena()
    >>> a = arena.allocate(payload='A')
    >>> b, c = arena.allocate(a, 'B'), arena.allocate(a, 'C')
    >>> list(walk(arena, a, StackBuffer()))
    [0, 2, 1]
    >>> list(walk(arena, a, QueueBuffer()))
    [0, 1, 2]
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, Iterator, TypeVar

if TYPE_CHECKING:
    from .arena import Arena

T = TypeVar('T')


class SearchBuffer(ABC, Generic[T]):
    """Ordered buffer of pending items used during a walk."""

    @abstractmethod
    def enqueue(self, item: T) -> None:
        """Add an item to the buffer."""

    @abstractmethod
    def take_next(self) -> T | None:
        """Remove and return the next item, or None if the buffer is empty."""

    @abstractmethod
    def is_empty(self) -> bool:
        """True if no item is pending."""


class StackBuffer(SearchBuffer[T]):
    """LIFO buffer: yields depth-first order."""

    __slots__ = ('_items',)

    def __init__(self) -> None:
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def take_next(self) -> T | None:
        return self._items.pop() if self._items else None

    def is_empty(self) -> bool:
        return not self._items


class QueueBuffer(SearchBuffer[T]):
    """FIFO buffer: yields breadth-first order."""

    __slots__ = ('_items',)

    def __init__(self) -> None:
        self._items: deque[T] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def enqueue(self, item: T) -> None:
        self._items.append(item)

    def take_next(self) -> T | None:
        return self._items.popleft() if self._items else None

    def is_empty(self) -> bool:
        return not self._items


class Discipline(Enum):
    """Buffer discipline selecting the traversal order."""

    LIFO = 'lifo'
    FIFO = 'fifo'

    def new_buffer(self) -> SearchBuffer[Any]:
        """Return a fresh empty buffer for this discipline."""
        if self is Discipline.LIFO:
            return StackBuffer()
        return QueueBuffer()


def as_buffer(discipline: Discipline | str | SearchBuffer[Any]) -> SearchBuffer[Any]:
    """Resolve a discipline specifier into a buffer.

    Args:
        discipline: A Discipline, its value ('lifo' or 'fifo'), or a
            SearchBuffer instance used as is.

    Returns:
        An empty SearchBuffer.

    Raises:
        ValueError: If the string is not a known discipline or the given
            buffer is not empty.
    """
    if isinstance(discipline, SearchBuffer):
        if not discipline.is_empty():
            raise ValueError("Traversal buffer must be empty")
        return discipline
    return Discipline(discipline).new_buffer()


def walk(arena: Arena[Any], start: int, buffer: SearchBuffer[int]) -> Iterator[int]:
    """Walk the handles reachable from start in the order set by buffer.

    A handle is marked visited when it is taken from the buffer, not when
    it is enqueued. Children already visited are not enqueued again.

    Args:
        arena: The arena holding the structure.
        start: Handle where the walk begins.
        buffer: Empty buffer deciding the order.

    Yields:
        Handles in visiting order.
    """
    visited: set[int] = set()
    buffer.enqueue(start)

    while not buffer.is_empty():
        handle = buffer.take_next()
        for child in arena.children_of(handle):
            if child not in visited:
                buffer.enqueue(child)
        yield handle
        visited.add(handle)
