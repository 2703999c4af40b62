# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""LuTree store package - name-keyed look-up tree.

The package is organized into:
- core: NamedLuTree with insertion, lookup, navigation and traversal
- node: LuTreeNode, a handle-bound view of one node
- subscription: insert/reject notifications

Example:
    >>> from genro_lutree import NamedLuTree
    >>> tree = NamedLuTree()
    >>> tree.insert_with_children('A', ['B', 'C'])
    0
    >>> tree.bfs('A')
    ['A', 'B', 'C']
"""

from .core import NamedLuTree
from .node import LuTreeNode

__all__ = ["NamedLuTree", "LuTreeNode"]
