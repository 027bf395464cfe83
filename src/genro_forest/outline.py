# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Plain-text outline of a forest, drawn with box glyphs.

Example:
    >>> print(render_outline(Node.from_source(['0', ('1', ['2', '3']), '4'])))
    0
    1
    ├──2
    └──3
    4
"""

from __future__ import annotations

from typing import Iterator, TYPE_CHECKING

from .traversal import NodeRole

if TYPE_CHECKING:
    from .node import Node

SPACER = '   '
VERT_BAR = '│  '
TEE = '├──'
ELBOW = '└──'


def iter_outline(forest: Node) -> Iterator[str]:
    """Yield one line per node of the forest, in pre-order.

    Roots are printed bare. Other nodes are indented by one block per
    ancestor level: a vertical bar while that level has more siblings to
    come, blank space otherwise.
    """
    prefix: list[str] = []
    for label, position in forest.traverse():
        if position.role is NodeRole.ROOT:
            prefix.clear()
            yield label
            continue
        if position.role is NodeRole.SIBLING:
            # drop the blocks of the previous sibling's subtree and its own bar
            while prefix and prefix.pop() == SPACER:
                pass
        if position.is_last:
            line = ''.join(prefix) + ELBOW + label
            prefix.append(SPACER)
        else:
            line = ''.join(prefix) + TEE + label
            prefix.append(VERT_BAR)
        yield line


def iter_indexed_outline(forest: Node) -> Iterator[str]:
    """Like :func:`iter_outline`, with the pre-order index in front of each line."""
    width = len(str(forest.size - 1)) if forest.size else 0
    for index, line in enumerate(iter_outline(forest)):
        yield f"{index:>{width}}  {line}"


def render_outline(forest: Node, indexed: bool = False) -> str:
    """Return the outline of the forest as a single string."""
    lines = iter_indexed_outline(forest) if indexed else iter_outline(forest)
    return '\n'.join(lines)
