# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-LuTree - Named look-up trees over an index arena.

A lightweight, zero-dependency library storing forests of uniquely named
nodes in flat arrays addressed by integer handles, with depth-first and
breadth-first traversal sharing a single walk.
"""

__version__ = "0.1.0"

from .arena import Arena
from .exceptions import (
    DuplicateNodeError,
    ImportFormatError,
    LuTreeError,
    OutOfBoundsError,
    StartNotFoundError,
    UnknownParentError,
)
from .parsers import load_file, load_lines, parse_line
from .store import LuTreeNode, NamedLuTree
from .traversal import Discipline, QueueBuffer, SearchBuffer, StackBuffer, walk

__all__ = [
    # Core classes
    "Arena",
    "NamedLuTree",
    "LuTreeNode",
    # Traversal
    "Discipline",
    "SearchBuffer",
    "StackBuffer",
    "QueueBuffer",
    "walk",
    # Import
    "parse_line",
    "load_lines",
    "load_file",
    # Exceptions
    "LuTreeError",
    "UnknownParentError",
    "DuplicateNodeError",
    "OutOfBoundsError",
    "StartNotFoundError",
    "ImportFormatError",
]
