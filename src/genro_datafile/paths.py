# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Dotted path navigation over DataNode trees.

Path Syntax:
    - Dotted paths: 'parent.child.grandchild'
    - Bracketed names: 'items[3].name'

Brackets carry no indexing semantics: 'items[3]' is looked up as a child
literally named ``items[3]``. ``indexed_name`` only composes such names.

Example:
    >>> root = DataNode()
    >>> has_property(root, 'window.size')
    False
    >>> get_property(root, 'window.size').set_int(640)
    >>> has_property(root, 'window.size')
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .node import DataNode

PATH_SEPARATOR = '.'


def split_path(path: str) -> tuple[str, str | None]:
    """Split a path at its first separator.

    Args:
        path: Dotted path (e.g., 'a.b.c').

    Returns:
        Tuple of (head, rest) where rest is None for a single segment.

    Example:
        >>> split_path('a.b.c')
        ('a', 'b.c')
        >>> split_path('a')
        ('a', None)
    """
    head, sep, rest = path.partition(PATH_SEPARATOR)
    if not sep:
        return head, None
    return head, rest


def indexed_name(name: str, index: int) -> str:
    """Compose the literal child name used for numbered elements."""
    return f"{name}[{index}]"


def has_property(node: DataNode, path: str) -> bool:
    """Check whether every segment of path exists, creating nothing.

    Args:
        node: Starting node.
        path: Dotted path relative to node.

    Returns:
        True if the full path exists, False otherwise.
    """
    head, rest = split_path(path)
    if head not in node:
        return False
    if rest is None:
        return True
    return has_property(node.ensure_child(head), rest)


def get_property(node: DataNode, path: str) -> DataNode:
    """Return the node at path, creating missing segments on the way.

    Args:
        node: Starting node.
        path: Dotted path relative to node.

    Returns:
        The DataNode addressed by path.
    """
    head, rest = split_path(path)
    child = node.ensure_child(head)
    if rest is None:
        return child
    return get_property(child, rest)
