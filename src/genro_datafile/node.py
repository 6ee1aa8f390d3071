# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""DataNode - the tree entity of a DataFile document.

A DataNode holds:
- an ordered list of string values (the payload of a leaf property)
- an ordered list of ``(name, child)`` pairs
- a name -> position index kept in sync with that list for O(1) lookup

Children are only ever appended or replaced, never removed, so the index
never needs compaction. Comment lines are stored as children flagged with
``is_comment``; they are kept in order but never enter the name index.

Example:
    >>> root = DataNode()
    >>> root['window']['width'].set_int(640)
    >>> root.get_property('window.width').get_int()
    640
    >>> root['tags'].set_value('red')
    >>> root['tags'].set_value('blue', 1)
    >>> root['tags'].get_full_value()
    'red, blue'
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

from .exceptions import (
    FormatError,
    InvalidParentError,
    MissingChildError,
    ValueIndexError,
)
from . import paths

BOOL_TRUE = 'True'
BOOL_FALSE = 'False'


def _parse_bool(text: str) -> bool:
    """Parse 'true'/'false' in any case, surrounding whitespace allowed."""
    word = text.strip().lower()
    if word == 'true':
        return True
    if word == 'false':
        return False
    raise ValueError(f"invalid boolean literal: {text!r}")


class DataNode:
    """A node in a DataFile tree.

    A node without children is a leaf and its values are the property
    values. A node with children is a branch; its own values are kept but
    not written out.

    Every node has at most one parent and never sits below itself, so the
    children form a tree.
    """

    __slots__ = ('_values', '_order', '_nodes', '_is_comment', '_parent')

    def __init__(self, is_comment: bool = False) -> None:
        """Initialize an empty DataNode.

        Args:
            is_comment: True for the pseudo-property holding a comment line.
        """
        self._values: list[str] = []
        self._order: list[tuple[str, DataNode]] = []
        self._nodes: dict[str, int] = {}
        self._is_comment = is_comment
        self._parent: DataNode | None = None

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        if self._is_comment:
            return "DataNode(comment)"
        return f"DataNode(values={self._values!r}, children={self.keys()!r})"

    def __len__(self) -> int:
        """Return the number of named children (comments excluded)."""
        return len(self._nodes)

    def __iter__(self) -> Iterator[str]:
        """Iterate over child names in insertion order."""
        return iter(self.keys())

    def __contains__(self, name: str) -> bool:
        """Check if a direct child with this name exists."""
        return name in self._nodes

    def __getitem__(self, name: str) -> DataNode:
        """Get-or-create access, see ensure_child()."""
        return self.ensure_child(name)

    def __setitem__(self, name: str, node: DataNode) -> None:
        """Replace access, see replace_child()."""
        self.replace_child(name, node)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataNode):
            return NotImplemented
        return (
            self._is_comment == other._is_comment
            and self._values == other._values
            and self._order == other._order
        )

    __hash__ = None  # type: ignore[assignment]

    # ==================== Properties ====================

    @property
    def is_comment(self) -> bool:
        """True if this node stands for a preserved comment line."""
        return self._is_comment

    @property
    def parent(self) -> DataNode | None:
        """The node owning this one, None for a root."""
        return self._parent

    @property
    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self._order

    @property
    def is_branch(self) -> bool:
        """True if this node has at least one child (comments included)."""
        return bool(self._order)

    @property
    def values(self) -> tuple[str, ...]:
        """The stored values, in order."""
        return tuple(self._values)

    @property
    def name_index(self) -> dict[str, int]:
        """Copy of the name -> position mapping."""
        return dict(self._nodes)

    # ==================== Children ====================

    def ensure_child(self, name: str) -> DataNode:
        """Return the child called name, creating an empty one if absent.

        Args:
            name: Child name.

        Returns:
            The existing or newly appended child.
        """
        index = self._nodes.get(name)
        if index is None:
            index = len(self._order)
            self._nodes[name] = index
            child = DataNode()
            child._parent = self
            self._order.append((name, child))
        return self._order[index][1]

    def replace_child(self, name: str, node: DataNode) -> None:
        """Replace an existing child, keeping its position.

        Args:
            name: Name of the child to replace.
            node: The new child.

        Raises:
            MissingChildError: If no child with this name exists.
            TypeError: If node is not a DataNode.
            InvalidParentError: If node already has a parent, or is this
                node or one of its ancestors.
        """
        if not isinstance(node, DataNode):
            raise TypeError(f"child must be a DataNode, not {type(node).__name__}")
        index = self._nodes.get(name)
        if index is None:
            raise MissingChildError(name)
        old = self._order[index][1]
        if node is old:
            return
        ancestor: DataNode | None = self
        while ancestor is not None:
            if ancestor is node:
                raise InvalidParentError(
                    f"cannot place a node below itself as {name!r}"
                )
            ancestor = ancestor._parent
        if node._parent is not None:
            raise InvalidParentError(f"node placed as {name!r} already has a parent")
        old._parent = None
        node._parent = self
        self._order[index] = (name, node)

    def add_comment(self, text: str) -> DataNode:
        """Append a comment line as a pseudo-property.

        Args:
            text: The full comment line, starting with '#'.

        Returns:
            The comment node.
        """
        if not text.startswith('#'):
            raise ValueError(f"comment must start with '#', got {text!r}")
        comment = DataNode(is_comment=True)
        comment._parent = self
        self._order.append((text, comment))
        return comment

    def children(self) -> list[tuple[str, DataNode]]:
        """Return ``(name, child)`` pairs in order, comments included."""
        return list(self._order)

    def keys(self) -> list[str]:
        """Return child names in order, comments excluded."""
        return [name for name, node in self._order if not node._is_comment]

    def walk(self, _prefix: str = '') -> Iterator[tuple[str, DataNode]]:
        """Yield ``(dotted_path, node)`` for every descendant, depth first.

        Comments are skipped.

        Example:
            >>> for path, node in root.walk():
            ...     print(path, node.get_full_value())
        """
        for name, node in self._order:
            if node._is_comment:
                continue
            path = f"{_prefix}.{name}" if _prefix else name
            yield path, node
            yield from node.walk(path)

    # ==================== Paths ====================

    def has_property(self, path: str) -> bool:
        """Check if a dotted path exists without creating anything."""
        return paths.has_property(self, path)

    def get_property(self, path: str) -> DataNode:
        """Return the node at a dotted path, creating missing segments."""
        return paths.get_property(self, path)

    def get_indexed_property(self, name: str, index: int) -> DataNode:
        """Return the child literally named ``name[index]``.

        Example:
            >>> root.get_indexed_property('enemy', 2)  # same as root['enemy[2]']
        """
        return self.get_property(paths.indexed_name(name, index))

    # ==================== Values ====================

    def value_count(self) -> int:
        """Return the number of stored values."""
        return len(self._values)

    def set_value(self, text: str, item: int = 0) -> None:
        """Store text at position item, padding with empty strings.

        Args:
            text: Value to store.
            item: Zero-based value index.

        Raises:
            ValueIndexError: If item is negative.
        """
        if item < 0:
            raise ValueIndexError(item, len(self._values))
        while len(self._values) <= item:
            self._values.append('')
        self._values[item] = text

    def get_value(self, item: int = 0) -> str:
        """Return the value at item, or '' when there is none."""
        if 0 <= item < len(self._values):
            return self._values[item]
        return ''

    def get_full_value(self) -> str:
        """Return all values joined with ', '."""
        return ', '.join(self._values)

    def _get_typed(self, item: int, convert: Callable[[str], Any], expected: str) -> Any:
        if not 0 <= item < len(self._values):
            raise ValueIndexError(item, len(self._values))
        text = self._values[item]
        try:
            return convert(text)
        except ValueError as exc:
            raise FormatError(text, expected) from exc

    def get_real(self, item: int = 0) -> float:
        """Parse the value at item as a float.

        Raises:
            ValueIndexError: If item is beyond the stored values.
            FormatError: If the text is not a number.
        """
        return self._get_typed(item, float, 'real')

    def get_int(self, item: int = 0) -> int:
        """Parse the value at item as a base-10 integer.

        '12.5' is rejected rather than truncated.

        Raises:
            ValueIndexError: If item is beyond the stored values.
            FormatError: If the text is not an integer.
        """
        return self._get_typed(item, int, 'integer')

    def get_bool(self, item: int = 0) -> bool:
        """Parse the value at item as 'true' or 'false' (any case).

        Raises:
            ValueIndexError: If item is beyond the stored values.
            FormatError: If the text is not a boolean literal.
        """
        return self._get_typed(item, _parse_bool, 'boolean')

    def set_real(self, value: float, item: int = 0) -> None:
        self.set_value(repr(float(value)), item)

    def set_int(self, value: int, item: int = 0) -> None:
        self.set_value(format(value, 'd'), item)

    def set_bool(self, value: bool, item: int = 0) -> None:
        self.set_value(BOOL_TRUE if value else BOOL_FALSE, item)
