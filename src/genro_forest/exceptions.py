# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Forest exceptions."""

from __future__ import annotations


class ForestError(Exception):
    """Base exception for forest errors."""

    pass


class InvalidIndexError(ForestError, IndexError):
    """Raised when a pre-order index is outside the forest."""

    def __init__(self, index: object, size: int) -> None:
        self.index = index
        self.size = size
        if size:
            message = f"Index {index!r} out of range (0-{size - 1})"
        else:
            message = f"Index {index!r} out of range (forest is empty)"
        super().__init__(message)


class ForestSourceError(ForestError, ValueError):
    """Raised when a forest cannot be built from the given source."""

    pass


class NoSelectionError(ForestError):
    """Raised when an editor operation needs a selected item."""

    pass
