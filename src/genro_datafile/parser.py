# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Parser for DataFile text.

The format is line oriented, one statement per line::

    # comment, kept verbatim
    name = Alice
    tags = red, "a,b", blue
    window
    {
        width = 640
    }

Nesting is carried by ``{`` and ``}`` only; indentation is ignored. A bare
name does nothing by itself: it becomes a node header when the next
statement is ``{``. The parser therefore runs a two-state machine,
``IDLE`` and ``NAME_PENDING``, over a stack of open scopes. A ``{`` opens
the child named by the last bare name or assignment seen, or the child
named ``''`` when there was none.

Example:
    >>> root = loads('name = Alice\\nsub\\n{\\n  x = 1\\n}\\n')
    >>> root['sub']['x'].get_int()
    1
"""

from __future__ import annotations

import io
import os
from enum import Enum, auto
from pathlib import Path
from typing import Iterable, TextIO

from .exceptions import StructuralError
from .node import DataNode
from .options import FormatOptions, resolve_options

COMMENT_PREFIX = '#'
ASSIGN = '='
QUOTE = '"'
OPEN_SCOPE = '{'
CLOSE_SCOPE = '}'


class ParserState(Enum):
    """Carried state between two lines."""

    IDLE = auto()
    NAME_PENDING = auto()


def split_values(text: str, separator: str = ',') -> list[str]:
    """Split an assignment's right-hand side into trimmed values.

    Quotes toggle a mode in which the separator is plain text; the quote
    characters themselves are dropped. There is no escape for a literal
    quote. A trailing empty token is discarded unless it is quoted, so
    ``a, ""`` holds two values.

    Args:
        text: Text after the '=' sign.
        separator: Single-character list separator.

    Returns:
        List of values in order.

    Example:
        >>> split_values('red, "a,b", blue')
        ['red', 'a,b', 'blue']
    """
    values: list[str] = []
    token: list[str] = []
    in_quotes = False
    quoted = False
    for char in text:
        if char == QUOTE:
            in_quotes = not in_quotes
            quoted = True
        elif in_quotes or char != separator:
            token.append(char)
        else:
            values.append(''.join(token).strip())
            token = []
            quoted = False
    if token or quoted:
        values.append(''.join(token).strip())
    return values


class DataFileParser:
    """Incremental, line-by-line DataFile parser.

    Feed physical lines with feed(), then call close() to get the root.

    Attributes:
        root: The node receiving top-level properties.
        options: Formatting options (only the separator is used).
        state: Current ParserState.
        last_name: Name from the last bare name or assignment, '' at start.
        line_number: Number of lines fed so far.

    Example:
        >>> parser = DataFileParser()
        >>> for line in ['window', '{', 'width = 640', '}']:
        ...     parser.feed(line)
        >>> parser.close()['window']['width'].get_int()
        640
    """

    def __init__(
        self,
        root: DataNode | None = None,
        options: FormatOptions | None = None,
        separator: str | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            root: Existing node to parse into. A new DataNode if None.
            options: Formatting options.
            separator: Overrides options.separator.
        """
        self.options = resolve_options(options, separator=separator)
        self.root = root if root is not None else DataNode()
        self._stack: list[DataNode] = [self.root]
        self.state = ParserState.IDLE
        self.last_name = ''
        self.line_number = 0

    @property
    def current(self) -> DataNode:
        """The innermost open scope."""
        return self._stack[-1]

    @property
    def depth(self) -> int:
        """Number of scopes opened and not yet closed."""
        return len(self._stack) - 1

    def feed(self, line: str) -> None:
        """Process one physical line.

        Raises:
            StructuralError: On '}' with no open scope.
        """
        self.line_number += 1
        text = line.strip()
        if not text:
            return
        if text.startswith(COMMENT_PREFIX):
            self.current.add_comment(text)
            return

        name, assign, value_text = text.partition(ASSIGN)
        if assign:
            self._assign(name.strip(), value_text.strip())
        elif text.startswith(OPEN_SCOPE):
            self._open_scope()
        elif text.startswith(CLOSE_SCOPE):
            self._close_scope(text)
        else:
            self.state = ParserState.NAME_PENDING
            self.last_name = text

    def close(self) -> DataNode:
        """Finish parsing and return the root.

        Scopes left open at end of input are accepted as closed.
        """
        self._stack = [self.root]
        self.state = ParserState.IDLE
        self.last_name = ''
        return self.root

    def _assign(self, name: str, value_text: str) -> None:
        node = self.current.ensure_child(name)
        for item, value in enumerate(split_values(value_text, self.options.separator)):
            node.set_value(value, item)
        self.state = ParserState.IDLE
        self.last_name = name

    def _open_scope(self) -> None:
        self._stack.append(self.current.ensure_child(self.last_name))
        self.state = ParserState.IDLE

    def _close_scope(self, line: str) -> None:
        if len(self._stack) == 1:
            raise StructuralError(
                f"unmatched '{CLOSE_SCOPE}'", self.line_number, line,
            )
        self._stack.pop()
        self.state = ParserState.IDLE


# ==================== Entry Points ====================

def parse_lines(
    lines: Iterable[str],
    separator: str | None = None,
    *,
    options: FormatOptions | None = None,
    into: DataNode | None = None,
) -> DataNode:
    """Parse an iterable of lines into a DataNode tree.

    Args:
        lines: Physical lines, with or without line terminators.
        separator: List separator (default ',').
        options: Formatting options; separator overrides options.separator.
        into: Existing tree to merge into. A new root if None.

    Returns:
        The root DataNode.
    """
    parser = DataFileParser(into, options=options, separator=separator)
    for line in lines:
        parser.feed(line)
    return parser.close()


def loads(
    text: str,
    separator: str | None = None,
    *,
    options: FormatOptions | None = None,
    into: DataNode | None = None,
) -> DataNode:
    """Parse DataFile text. See parse_lines()."""
    return parse_lines(
        io.StringIO(text, newline=None), separator, options=options, into=into,
    )


def load(
    stream: TextIO,
    separator: str | None = None,
    *,
    options: FormatOptions | None = None,
    into: DataNode | None = None,
) -> DataNode:
    """Parse DataFile text from an open text stream. See parse_lines()."""
    return parse_lines(stream, separator, options=options, into=into)


def read(
    path: str | os.PathLike[str],
    separator: str | None = None,
    *,
    options: FormatOptions | None = None,
    into: DataNode | None = None,
) -> DataNode:
    """Read a DataFile from disk.

    The file is decoded as UTF-8; a leading byte order mark is skipped.

    Args:
        path: File to read.
        separator: List separator (default ',').
        options: Formatting options; separator overrides options.separator.
        into: Existing tree to merge into. A new root if None.

    Returns:
        The root DataNode.

    Raises:
        OSError: If the file cannot be opened or read.
        StructuralError: If the braces do not balance.
    """
    with Path(path).open(encoding='utf-8-sig', newline=None) as stream:
        return load(stream, separator, options=options, into=into)
