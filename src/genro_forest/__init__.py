# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-Forest - Ordered forests with index-addressed structural edits.

A lightweight, zero-dependency library storing a forest of labeled items
as an immutable left-child/right-sibling tree, edited through a zipper and
addressed by stable pre-order indices.
"""

__version__ = "0.1.0"

from .editor import ForestEditor
from .exceptions import (
    ForestError,
    ForestSourceError,
    InvalidIndexError,
    NoSelectionError,
)
from .loading import from_json, load_from_dict, load_from_list, to_json
from .node import EMPTY, Empty, Filled, Node
from .outline import iter_indexed_outline, iter_outline, render_outline
from .traversal import NodePosition, NodeRole, PreOrderIter
from .zipper import AtParent, AtSibling, ExtractedTree, ForestZipper, concat, focus

__all__ = [
    # Core classes
    "Node",
    "Empty",
    "Filled",
    "EMPTY",
    # Zipper
    "ForestZipper",
    "AtParent",
    "AtSibling",
    "ExtractedTree",
    "focus",
    "concat",
    # Traversal
    "PreOrderIter",
    "NodePosition",
    "NodeRole",
    # Loading and rendering
    "load_from_list",
    "load_from_dict",
    "to_json",
    "from_json",
    "iter_outline",
    "iter_indexed_outline",
    "render_outline",
    # Editor
    "ForestEditor",
    # Exceptions
    "ForestError",
    "InvalidIndexError",
    "ForestSourceError",
    "NoSelectionError",
]
