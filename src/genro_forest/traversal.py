# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Pre-order traversal exposing the display position of each node."""

from __future__ import annotations

from enum import Enum
from typing import Iterator, NamedTuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .node import Node


class NodeRole(Enum):
    """Whether a node is a root, a first child, or a later sibling."""

    ROOT = 'root'
    CHILD = 'child'
    SIBLING = 'sibling'


class NodePosition(NamedTuple):
    """Position of a node in the forest, as needed to draw it.

    Attributes:
        role: The node's NodeRole.
        is_last: True if no sibling follows the node at its level.
    """

    role: NodeRole
    is_last: bool


class PreOrderIter:
    """Iterator over (label, NodePosition) pairs in pre-order.

    Uses an explicit stack, so the depth of the forest does not bound
    the depth of the Python call stack. The iterator is single-pass.

    Example:
        >>> forest = Node.from_source([('a', ['b', 'c'])])
        >>> [(label, pos.role.name) for label, pos in forest.traverse()]
        [('a', 'ROOT'), ('b', 'CHILD'), ('c', 'SIBLING')]
    """

    __slots__ = ('_stack',)

    def __init__(self, forest: Node) -> None:
        self._stack: list[tuple[Node, NodeRole]] = []
        if not forest.is_empty:
            self._stack.append((forest, NodeRole.ROOT))

    def __iter__(self) -> Iterator[tuple[str, NodePosition]]:
        return self

    def __next__(self) -> tuple[str, NodePosition]:
        if not self._stack:
            raise StopIteration
        node, role = self._stack.pop()
        sibling = node.sibling
        if not sibling.is_empty:
            sibling_role = NodeRole.ROOT if role is NodeRole.ROOT else NodeRole.SIBLING
            self._stack.append((sibling, sibling_role))
        if not node.child.is_empty:
            self._stack.append((node.child, NodeRole.CHILD))
        return node.label, NodePosition(role, sibling.is_empty)
