# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Zipper navigation over the left-child/right-sibling encoding.

A :class:`ForestZipper` pairs a focused subtree with the path back to the
top of the forest. Each step of the path remembers the part of an ancestor
that was not descended into:

- :class:`AtParent`: descent went into ``child``, the ancestor's
  ``sibling`` is kept for the way back.
- :class:`AtSibling`: descent went into ``sibling``, the ancestor's
  ``child`` is kept for the way back.

``None`` marks the top of the path. Edits happen at the focus, then
:meth:`ForestZipper.restore` rebuilds the forest one ancestor at a time.
"""

from __future__ import annotations

from typing import NamedTuple, Union

from .node import EMPTY, Filled, Node


class AtParent:
    """Path step recorded when descending into a node's child."""

    __slots__ = ('label', 'sibling', 'prev')

    def __init__(self, label: str, sibling: Node, prev: PathStep) -> None:
        self.label = label
        self.sibling = sibling
        self.prev = prev

    def __repr__(self) -> str:
        return f"AtParent({self.label!r})"


class AtSibling:
    """Path step recorded when descending into a node's sibling."""

    __slots__ = ('label', 'child', 'prev')

    def __init__(self, label: str, child: Node, prev: PathStep) -> None:
        self.label = label
        self.child = child
        self.prev = prev

    def __repr__(self) -> str:
        return f"AtSibling({self.label!r})"


PathStep = Union[AtParent, AtSibling, None]


class ExtractedTree(NamedTuple):
    """A tree cut out of its sibling chain: root label plus its children."""

    label: str
    child: Node


def focus(forest: Node, index: int) -> ForestZipper:
    """Return a zipper focused on the node at pre-order ``index``.

    Raises:
        InvalidIndexError: If index is out of range.
    """
    forest.check_index(index)
    i = index
    node = forest
    prev: PathStep = None
    while i > 0:
        if i <= node.child.size:
            i -= 1
            prev = AtParent(node.label, node.sibling, prev)
            node = node.child
        else:
            i -= 1 + node.child.size
            prev = AtSibling(node.label, node.child, prev)
            node = node.sibling
    return ForestZipper(node, prev)


def concat(left: Node, right: Node) -> Node:
    """Join two forests, the roots of ``right`` following those of ``left``."""
    if right.is_empty:
        return left
    prev: PathStep = None
    node = left
    while not node.is_empty:
        prev = AtSibling(node.label, node.child, prev)
        node = node.sibling
    return ForestZipper(right, prev).restore()


class ForestZipper:
    """A forest focused on one subtree.

    Attributes:
        focus: The subtree at the focused position (its siblings included).
        prev: Innermost path step, or None at the top of the forest.
    """

    __slots__ = ('focus', 'prev')

    def __init__(self, focus: Node, prev: PathStep = None) -> None:
        self.focus = focus
        self.prev = prev

    def __repr__(self) -> str:
        return f"ForestZipper(focus={self.focus!r}, prev={self.prev!r})"

    # ==================== Rebuild ====================

    def restore(self) -> Node:
        """Rebuild the whole forest around the focus."""
        node = self.focus
        prev = self.prev
        while prev is not None:
            if isinstance(prev, AtParent):
                node = Filled(prev.label, node, prev.sibling)
            else:
                node = Filled(prev.label, prev.child, node)
            prev = prev.prev
        return node

    def restore_with_index(self) -> tuple[Node, int]:
        """Rebuild the forest and return the focus' pre-order index.

        Returns:
            Tuple of (forest, index).
        """
        node = self.focus
        prev = self.prev
        index = 0
        while prev is not None:
            if isinstance(prev, AtParent):
                index += 1
                node = Filled(prev.label, node, prev.sibling)
            else:
                index += 1 + prev.child.size
                node = Filled(prev.label, prev.child, node)
            prev = prev.prev
        return node, index

    # ==================== Local edits ====================

    def set_label(self, label: str) -> ForestZipper:
        """Replace the label of the focused node."""
        node = self.focus
        if node.is_empty:
            return self
        return ForestZipper(Filled(label, node.child, node.sibling), self.prev)

    def delete(self) -> ForestZipper:
        """Replace the focused node by its children followed by its siblings."""
        node = self.focus
        if node.is_empty:
            return self
        return ForestZipper(concat(node.child, node.sibling), self.prev)

    def move_forward(self) -> ForestZipper:
        """Swap the focused subtree with its next sibling, if any."""
        node = self.focus
        if node.is_empty or node.sibling.is_empty:
            return self
        nxt = node.sibling
        prev = AtSibling(nxt.label, nxt.child, self.prev)
        return ForestZipper(Filled(node.label, node.child, nxt.sibling), prev)

    def move_backward(self) -> ForestZipper:
        """Swap the focused subtree with its previous sibling, if any."""
        node = self.focus
        prev = self.prev
        if node.is_empty or not isinstance(prev, AtSibling):
            return self
        behind = Filled(prev.label, prev.child, node.sibling)
        return ForestZipper(Filled(node.label, node.child, behind), prev.prev)

    def extract_tree(self) -> tuple[ForestZipper, ExtractedTree | None]:
        """Cut the focused tree out of its sibling chain.

        Returns:
            Tuple of (zipper, tree). The zipper is focused on the following
            siblings, which close the gap. tree is None if the focus is empty.
        """
        node = self.focus
        if node.is_empty:
            return self, None
        tree = ExtractedTree(node.label, node.child)
        return ForestZipper(node.sibling, self.prev), tree

    def promote(self) -> ForestZipper:
        """Move the focused tree after its parent, or to the front at root level."""
        zipper, tree = self.extract_tree()
        if tree is None:
            return zipper
        node = zipper.focus
        prev = zipper.prev
        while isinstance(prev, AtSibling):
            node = Filled(prev.label, prev.child, node)
            prev = prev.prev
        if prev is None:
            return ForestZipper(Filled(tree.label, tree.child, node), None)
        # prev is the parent: the tree becomes its next sibling
        parent = AtSibling(prev.label, node, prev.prev)
        return ForestZipper(Filled(tree.label, tree.child, prev.sibling), parent)

    def demote(self) -> ForestZipper:
        """Move the focused tree to the end of its previous sibling's children."""
        zipper, tree = self.extract_tree()
        if tree is None:
            return zipper
        rest = zipper.focus
        prev = zipper.prev
        if not isinstance(prev, AtSibling):
            return ForestZipper(Filled(tree.label, tree.child, rest), prev)
        path: PathStep = AtParent(prev.label, rest, prev.prev)
        node = prev.child
        while not node.is_empty:
            path = AtSibling(node.label, node.child, path)
            node = node.sibling
        return ForestZipper(Filled(tree.label, tree.child, EMPTY), path)
