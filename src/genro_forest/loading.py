# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Functions for building forests from plain Python data.

Nested shape accepted by :func:`load_from_list`::

    ['0', ('1', ['2', '3']), '4']

Each item is either a label (a leaf) or a ``(label, children)`` pair,
where children is again a list (or a dict, or None). :func:`load_from_dict`
accepts the same tree written as an ordered mapping::

    {'0': None, '1': {'2': None, '3': None}, '4': None}

Forests are built bottom-up with an explicit work list, so nesting depth
is not limited by the Python recursion limit.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from .exceptions import ForestSourceError
from .node import EMPTY, Filled, Node

logger = logging.getLogger(__name__)


class _Frame:
    """A list of sibling items being folded into a chain, right to left."""

    __slots__ = ('items', 'index', 'chain', 'pending')

    def __init__(self, items: list | tuple) -> None:
        self.items = items
        self.index = len(items)
        self.chain: Node = EMPTY
        self.pending: str | None = None


def _normalize_children(children: Any) -> list | tuple:
    """Return children as a sequence of items.

    Raises:
        ForestSourceError: If children is not None, a list, tuple or dict.
    """
    if children is None:
        return ()
    if isinstance(children, dict):
        return list(children.items())
    if isinstance(children, (list, tuple)):
        return children
    raise ForestSourceError(
        f"children must be list, dict, or None, not {type(children).__name__}"
    )


def _parse_item(item: Any) -> tuple[str, list | tuple]:
    """Split an item into (label, children).

    Raises:
        ForestSourceError: If item is neither a label nor a (label, children) pair.
    """
    if isinstance(item, str):
        return item, ()
    if isinstance(item, (list, tuple)) and len(item) == 2 and isinstance(item[0], str):
        return item[0], _normalize_children(item[1])
    raise ForestSourceError(
        f"Invalid item {item!r}: expected label or (label, children)"
    )


def _build(items: list | tuple) -> Node:
    result: Node = EMPTY
    stack = [_Frame(items)]
    while stack:
        frame = stack[-1]
        if frame.pending is not None:
            # the children of frame.pending have just been built
            frame.chain = Filled(frame.pending, result, frame.chain)
            frame.pending = None
        if frame.index == 0:
            stack.pop()
            result = frame.chain
            continue
        frame.index -= 1
        label, children = _parse_item(frame.items[frame.index])
        if children:
            frame.pending = label
            stack.append(_Frame(children))
        else:
            frame.chain = Filled(label, EMPTY, frame.chain)
    return result


def load_from_list(items: list | tuple) -> Node:
    """Build a forest from a nested list of labels and (label, children) pairs.

    Args:
        items: The roots of the forest, in order.

    Returns:
        The forest.

    Raises:
        ForestSourceError: If the nested shape is invalid.

    Example:
        >>> load_from_list(['0', ('1', ['2', '3']), '4']).labels()
        ['0', '1', '2', '3', '4']
    """
    if not isinstance(items, (list, tuple)):
        raise ForestSourceError(
            f"items must be list or tuple, not {type(items).__name__}"
        )
    forest = _build(items)
    logger.debug("Loaded forest of %d nodes from list", forest.size)
    return forest


def load_from_dict(data: dict[str, Any]) -> Node:
    """Build a forest from an ordered mapping of label -> children.

    Children may be a nested dict, a list in :func:`load_from_list` form,
    or None for a leaf.

    Raises:
        ForestSourceError: If the nested shape is invalid.
    """
    if not isinstance(data, dict):
        raise ForestSourceError(
            f"data must be dict, not {type(data).__name__}"
        )
    forest = _build(list(data.items()))
    logger.debug("Loaded forest of %d nodes from dict", forest.size)
    return forest


def to_json(forest: Node, **kwargs: Any) -> str:
    """Serialize a forest to JSON in the :meth:`Node.as_list` shape.

    Args:
        forest: The forest to serialize.
        **kwargs: Passed to json.dumps (e.g. indent).
    """
    return json.dumps(forest.as_list(), **kwargs)


def from_json(text: str) -> Node:
    """Build a forest from JSON produced by :func:`to_json`.

    Raises:
        ForestSourceError: If the text is not valid JSON or has an invalid shape.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ForestSourceError(f"Invalid forest JSON: {e}") from e
    return load_from_list(data)
