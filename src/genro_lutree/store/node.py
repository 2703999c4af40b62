# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""LuTree node view."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core import NamedLuTree


class LuTreeNode:
    """A lightweight view of one node of a NamedLuTree.

    The node holds no structure of its own: it pairs the owning tree with a
    handle and reads everything else from the tree's arena, so views can be
    created and dropped freely.

    Example:
        >>> tree = NamedLuTree()
        >>> tree.insert_with_children('A', ['B'])
        0
        >>> node = tree['B']
        >>> node.name, node.handle, node.parent.name
        ('B', 1, 'A')
    """

    __slots__ = ('tree', 'handle')

    def __init__(self, tree: NamedLuTree, handle: int) -> None:
        self.tree = tree
        self.handle = handle

    def __repr__(self) -> str:
        return f"LuTreeNode({self.name!r}, handle={self.handle})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LuTreeNode):
            return NotImplemented
        return self.tree is other.tree and self.handle == other.handle

    def __hash__(self) -> int:
        return hash((id(self.tree), self.handle))

    @property
    def name(self) -> str:
        """The node's unique name."""
        return self.tree.arena.get_payload(self.handle)

    @property
    def parent(self) -> LuTreeNode | None:
        """The parent node, or None for a root."""
        parent = self.tree.arena.parent_of(self.handle)
        return None if parent is None else LuTreeNode(self.tree, parent)

    @property
    def children(self) -> list[LuTreeNode]:
        """Child nodes in insertion order."""
        return [LuTreeNode(self.tree, h) for h in self.tree.arena.children_of(self.handle)]

    @property
    def is_root(self) -> bool:
        """True if this node has no parent."""
        return self.tree.arena.is_root(self.handle)

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.tree.arena.children_of(self.handle)

    @property
    def depth(self) -> int:
        """Distance from the root (root=0)."""
        return len(self.tree.arena.ancestors_of(self.handle))
