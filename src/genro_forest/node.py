# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Forest node classes.

A forest of multi-way trees is stored as a left-child/right-sibling binary
tree: ``child`` is a node's first child, ``sibling`` its next sibling (the
roots of the forest are siblings of each other). Every node caches the
size of its binary subtree, which makes pre-order index arithmetic O(depth).

Nodes are immutable. Every editing method returns a new forest and leaves
the receiver untouched.

Example:
    >>> forest = Node.from_source(['0', ('1', ['2', '3']), '4'])
    >>> forest.size
    5
    >>> forest.find_label(2)
    '2'
    >>> forest, index = forest.promote(2)
    >>> forest.as_list()
    ['0', ('1', ['3']), '2', '4']
"""

from __future__ import annotations

from typing import Any, Iterator, TYPE_CHECKING

from .exceptions import InvalidIndexError

if TYPE_CHECKING:
    from .traversal import PreOrderIter


class Node:
    """Base class of the two node variants, :class:`Empty` and :class:`Filled`.

    Carries the public forest API. Index-addressed operations take a
    pre-order index in ``[0, size - 1]`` and raise
    :class:`~genro_forest.exceptions.InvalidIndexError` otherwise.
    """

    __slots__ = ()

    size: int

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"'{type(self).__name__}' object is immutable")

    def __len__(self) -> int:
        """Return the number of nodes in the forest."""
        return self.size

    def __iter__(self) -> Iterator[str]:
        """Iterate over labels in pre-order."""
        for label, _ in self.traverse():
            yield label

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        if self is other:
            return True
        if self.size != other.size:
            return False
        return all(
            a == b for a, b in zip(self._signature(), other._signature())
        )

    def __hash__(self) -> int:
        return hash(tuple(self._signature()))

    def _signature(self) -> Iterator[tuple[str, bool, bool]]:
        """Yield (label, has_child, has_sibling) for the binary pre-order.

        The sequence identifies the binary tree uniquely, so it is used for
        equality and hashing without recursion.
        """
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            if node.is_empty:
                continue
            yield node.label, bool(node.child), bool(node.sibling)
            stack.append(node.sibling)
            stack.append(node.child)

    @property
    def is_empty(self) -> bool:
        """True for the empty forest."""
        return self.size == 0

    def check_index(self, index: int) -> None:
        """Raise unless ``index`` addresses a node of this forest.

        Raises:
            TypeError: If index is not an integer.
            InvalidIndexError: If index is outside ``[0, size - 1]``.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            raise TypeError(
                f"index must be int, not {type(index).__name__}"
            )
        if index < 0 or index >= self.size:
            raise InvalidIndexError(index, self.size)

    # ==================== Reading ====================

    def find_label(self, index: int) -> str:
        """Return the label at pre-order ``index``.

        Args:
            index: Pre-order index in ``[0, size - 1]``.

        Returns:
            The label of the node.

        Raises:
            InvalidIndexError: If index is out of range.
        """
        self.check_index(index)
        i = index
        node = self
        while i > 0:
            if i <= node.child.size:
                i -= 1
                node = node.child
            else:
                i -= 1 + node.child.size
                node = node.sibling
        return node.label

    def traverse(self) -> PreOrderIter:
        """Return a single-pass iterator of (label, NodePosition) in pre-order."""
        from .traversal import PreOrderIter
        return PreOrderIter(self)

    def labels(self) -> list[str]:
        """Return all labels in pre-order."""
        return list(self)

    def root_count(self) -> int:
        """Return the number of trees in the forest."""
        count = 0
        node = self
        while not node.is_empty:
            count += 1
            node = node.sibling
        return count

    def root_labels(self) -> list[str]:
        """Return the labels of the forest roots in order."""
        result = []
        node = self
        while not node.is_empty:
            result.append(node.label)
            node = node.sibling
        return result

    # ==================== Editing ====================

    def set_label(self, index: int, label: str) -> Node:
        """Return a forest with the label at ``index`` replaced."""
        from .zipper import focus
        return focus(self, index).set_label(label).restore()

    def prepend(self, label: str) -> Node:
        """Return a forest with a new childless root ``label`` in front."""
        return Filled(label, EMPTY, self)

    def move_forward(self, index: int) -> tuple[Node, int]:
        """Swap the subtree at ``index`` with its next sibling.

        Returns:
            Tuple of (new_forest, new_index) where new_index is the position
            of the moved node. Unchanged when there is no next sibling.
        """
        from .zipper import focus
        return focus(self, index).move_forward().restore_with_index()

    def move_backward(self, index: int) -> tuple[Node, int]:
        """Swap the subtree at ``index`` with its previous sibling.

        Returns:
            Tuple of (new_forest, new_index). Unchanged when there is no
            previous sibling.
        """
        from .zipper import focus
        return focus(self, index).move_backward().restore_with_index()

    def promote(self, index: int) -> tuple[Node, int]:
        """Move the subtree at ``index`` to be its parent's next sibling.

        A root is moved to the front of the forest instead.

        Returns:
            Tuple of (new_forest, new_index).
        """
        from .zipper import focus
        return focus(self, index).promote().restore_with_index()

    def demote(self, index: int) -> tuple[Node, int]:
        """Move the subtree at ``index`` to be its previous sibling's last child.

        Returns:
            Tuple of (new_forest, new_index). Unchanged when there is no
            previous sibling.
        """
        from .zipper import focus
        return focus(self, index).demote().restore_with_index()

    def delete(self, index: int) -> Node:
        """Return a forest without the node at ``index``.

        The children of the deleted node take its place, followed by its
        former next siblings.
        """
        from .zipper import focus
        return focus(self, index).delete().restore()

    def concat(self, other: Node) -> Node:
        """Return this forest followed by the trees of ``other``."""
        from .zipper import concat
        return concat(self, other)

    # ==================== Conversion ====================

    def as_list(self) -> list[Any]:
        """Convert to a nested list.

        Leaves become their label, nodes with children become
        ``(label, [children...])`` tuples.

        Example:
            >>> Node.from_source(['a', ('b', ['c'])]).as_list()
            ['a', ('b', ['c'])]
        """
        result: list[Any] = []
        stack: list[tuple[Node, list[Any]]] = [(self, result)]
        while stack:
            node, target = stack.pop()
            while not node.is_empty:
                if node.child.is_empty:
                    target.append(node.label)
                else:
                    children: list[Any] = []
                    target.append((node.label, children))
                    stack.append((node.child, children))
                node = node.sibling
        return result

    @classmethod
    def from_source(cls, source: Node | dict | list | tuple | None) -> Node:
        """Build a forest from a nested list, a dict or another forest.

        Args:
            source: Can be:
                - None: the empty forest
                - Node: returned as is (nodes are immutable)
                - list/tuple: items are labels or (label, children) pairs
                - dict: label -> children (dict, list or None)

        Raises:
            TypeError: If source has an unsupported type.
            ForestSourceError: If the nested shape is invalid.
        """
        from .loading import load_from_dict, load_from_list

        if source is None:
            return EMPTY
        if isinstance(source, Node):
            return source
        if isinstance(source, dict):
            return load_from_dict(source)
        if isinstance(source, (list, tuple)):
            return load_from_list(source)
        raise TypeError(
            f"source must be dict, list, or Node, not {type(source).__name__}"
        )


class Empty(Node):
    """The empty forest. Use the :data:`EMPTY` singleton."""

    __slots__ = ()

    size = 0

    def __repr__(self) -> str:
        return 'EMPTY'


EMPTY = Empty()


class Filled(Node):
    """A labeled node with its first child and next sibling.

    Attributes:
        label: The node's text.
        child: First child (EMPTY for a leaf).
        sibling: Next sibling (EMPTY for the last one at its level).
        size: ``1 + child.size + sibling.size``.
    """

    __slots__ = ('label', 'child', 'sibling', 'size')

    label: str
    child: Node
    sibling: Node

    def __init__(
        self,
        label: str,
        child: Node = EMPTY,
        sibling: Node = EMPTY,
    ) -> None:
        object.__setattr__(self, 'label', label)
        object.__setattr__(self, 'child', child)
        object.__setattr__(self, 'sibling', sibling)
        object.__setattr__(self, 'size', 1 + child.size + sibling.size)

    def __repr__(self) -> str:
        return f"Filled({self.label!r}, size={self.size})"
