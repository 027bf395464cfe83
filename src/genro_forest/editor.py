# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ForestEditor - holds the current forest and a selected item.

Forest operations return a new forest value. The editor keeps the latest
value and updates the selection with the index reported by each
structural operation, so the selection follows the same item across
moves, promotions and demotions.

Example:
    >>> editor = ForestEditor(['a', 'b', 'c'])
    >>> editor.select(0)
    >>> editor.move_forward()
    >>> editor.forest.labels(), editor.selected
    (['b', 'a', 'c'], 1)
    >>> editor.demote()
    >>> editor.outline()
    'b\\n└──a\\nc'
"""

from __future__ import annotations

import logging
from typing import Any

from .exceptions import InvalidIndexError, NoSelectionError
from .node import Node
from .outline import render_outline

logger = logging.getLogger(__name__)


class ForestEditor:
    """Mutable holder of a forest value with an optional selection.

    Attributes:
        forest: The current forest.
        selected: Pre-order index of the selected item, or None.
        changed: True once an edit has been applied since creation or
            the last :meth:`mark_saved`.
    """

    __slots__ = ('_forest', '_selected', '_changed', '_raise_on_error')

    def __init__(
        self,
        source: Node | dict | list | None = None,
        raise_on_error: bool = True,
    ) -> None:
        """Initialize a ForestEditor.

        Args:
            source: Initial forest, or data accepted by Node.from_source.
            raise_on_error: If True (default), invalid indices (out of
                range or not an int) and edits without a selection raise.
                If False they are logged as warnings and the call leaves
                the editor unchanged.
        """
        self._forest = Node.from_source(source)
        self._selected: int | None = None
        self._changed = False
        self._raise_on_error = raise_on_error

    def __repr__(self) -> str:
        return f"ForestEditor(size={self._forest.size}, selected={self._selected})"

    def __len__(self) -> int:
        return self._forest.size

    @property
    def forest(self) -> Node:
        return self._forest

    @property
    def selected(self) -> int | None:
        return self._selected

    @property
    def changed(self) -> bool:
        return self._changed

    @property
    def root_count(self) -> int:
        return self._forest.root_count()

    def mark_saved(self) -> None:
        """Reset the changed flag, e.g. after the forest has been persisted."""
        self._changed = False

    def label_at(self, index: int) -> str:
        return self._forest.find_label(index)

    def outline(self, indexed: bool = False) -> str:
        return render_outline(self._forest, indexed=indexed)

    # ==================== Error policy ====================

    def _check_index(self, index: int) -> bool:
        try:
            self._forest.check_index(index)
        except (InvalidIndexError, TypeError) as e:
            if self._raise_on_error:
                raise
            logger.warning("Ignoring invalid index: %s", e)
            return False
        return True

    def _require_selection(self, action: str) -> bool:
        if self._selected is not None:
            return True
        if self._raise_on_error:
            raise NoSelectionError(f"Cannot {action}: no item selected")
        logger.warning("Ignoring %s: no item selected", action)
        return False

    def _commit(self, forest: Node, selected: int | None, action: str, **info: Any) -> None:
        self._forest = forest
        self._selected = selected
        self._changed = True
        logger.debug("%s -> size=%d selected=%s %s", action, forest.size, selected, info)

    # ==================== Selection ====================

    def select(self, index: int) -> None:
        """Select the item at ``index``."""
        if self._check_index(index):
            self._selected = index

    def clear_selection(self) -> None:
        self._selected = None

    def select_next(self) -> None:
        """Move the selection one item down, stopping at the last item.

        With no selection, selects the first item of a non-empty forest.
        """
        if self._forest.is_empty:
            return
        if self._selected is None:
            self._selected = 0
        elif self._selected + 1 < self._forest.size:
            self._selected += 1

    def select_previous(self) -> None:
        """Move the selection one item up, stopping at the first item."""
        if self._forest.is_empty:
            return
        if self._selected is None:
            self._selected = 0
        elif self._selected > 0:
            self._selected -= 1

    # ==================== Edits ====================

    def insert(self, label: str) -> None:
        """Add ``label`` as the first root of the forest.

        The current selection keeps pointing at the same item.
        """
        selected = self._selected + 1 if self._selected is not None else None
        self._commit(self._forest.prepend(label), selected, 'insert', label=label)

    def edit(self, label: str) -> None:
        """Replace the label of the selected item."""
        if not self._require_selection('edit'):
            return
        forest = self._forest.set_label(self._selected, label)
        self._commit(forest, self._selected, 'edit', label=label)

    def delete(self) -> None:
        """Delete the selected item and clear the selection."""
        if not self._require_selection('delete'):
            return
        index = self._selected
        self._commit(self._forest.delete(index), None, 'delete', index=index)

    def move_forward(self) -> None:
        """Swap the selected subtree with its next sibling."""
        self._restructure('move_forward')

    def move_backward(self) -> None:
        """Swap the selected subtree with its previous sibling."""
        self._restructure('move_backward')

    def promote(self) -> None:
        """Move the selected subtree one level up."""
        self._restructure('promote')

    def demote(self) -> None:
        """Move the selected subtree under its previous sibling."""
        self._restructure('demote')

    def _restructure(self, operation: str) -> None:
        if not self._require_selection(operation):
            return
        index = self._selected
        forest, new_index = getattr(self._forest, operation)(index)
        if new_index == index and forest == self._forest:
            logger.debug("%s at %d left the forest unchanged", operation, index)
            return
        self._commit(forest, new_index, operation, index=index)
