# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""LuTree exceptions."""

from __future__ import annotations


class LuTreeError(Exception):
    """Base exception for LuTree errors."""

    pass


class UnknownParentError(LuTreeError):
    """Raised when a child is inserted under a name that is not registered."""

    pass


class DuplicateNodeError(LuTreeError):
    """Raised when a name is inserted a second time."""

    pass


class OutOfBoundsError(LuTreeError):
    """Raised when a handle does not refer to an allocated arena slot."""

    pass


class StartNotFoundError(LuTreeError):
    """Raised when a traversal starts from an unregistered name."""

    pass


class ImportFormatError(LuTreeError):
    """Raised when an edge declaration line cannot be parsed.

    Attributes:
        line: The offending line, verbatim.
        lineno: 1-based line number, or None when parsing a single line.
    """

    def __init__(self, message: str, line: str, lineno: int | None = None) -> None:
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)
        self.line = line
        self.lineno = lineno
